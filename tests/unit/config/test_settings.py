"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from metasearch.config.settings import GoogleSettings, Settings


class TestDefaults:
    def test_google_defaults(self, settings: Settings) -> None:
        assert settings.google.endpoint == "http://ajax.googleapis.com/ajax/services/search/web"
        assert settings.google.api_version == "1.0"
        assert settings.google.page_size == 8
        assert settings.google.engine_name == "Google"

    def test_observability_defaults(self, settings: Settings) -> None:
        assert settings.observability.log_level == "info"
        assert settings.observability.log_format == "json"

    @pytest.mark.parametrize("page_size", [0, 9])
    def test_page_size_bounds(self, page_size: int) -> None:
        with pytest.raises(ValidationError):
            GoogleSettings(page_size=page_size)


class TestEnvironment:
    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("METASEARCH_GOOGLE__PAGE_SIZE", "4")
        monkeypatch.setenv("METASEARCH_OBSERVABILITY__LOG_FORMAT", "console")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.google.page_size == 4
        assert s.observability.log_format == "console"


class TestFromYaml:
    def test_loads_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "metasearch.yaml"
        config.write_text(
            "google:\n"
            "  endpoint: http://localhost:9000/search\n"
            "  page_size: 2\n"
            "observability:\n"
            "  log_level: debug\n"
        )

        s = Settings.from_yaml(config)

        assert s.google.endpoint == "http://localhost:9000/search"
        assert s.google.page_size == 2
        assert s.google.api_version == "1.0"
        assert s.observability.log_level == "debug"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = tmp_path / "empty.yaml"
        config.write_text("")

        assert Settings.from_yaml(config).google.page_size == 8

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Settings.from_yaml(tmp_path / "nope.yaml")


class TestFields:
    def test_only_configured_sections(self) -> None:
        assert set(Settings.model_fields) == {"google", "observability"}
