"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (METASEARCH_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class GoogleSettings(BaseModel):
    """Google AJAX Search API configuration."""

    endpoint: str = Field(
        default="http://ajax.googleapis.com/ajax/services/search/web",
        description="Search endpoint URL (without query string)",
    )
    api_version: str = Field(default="1.0", description="API version sent as the 'v' parameter")
    page_size: int = Field(default=8, ge=1, le=8, description="Results per request, sent as the 'rsz' parameter")
    engine_name: str = Field(default="Google", description="Engine name stamped on every result")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the METASEARCH_ prefix.
    Nested settings use double underscores: METASEARCH_GOOGLE__PAGE_SIZE=4

    Example:
        METASEARCH_GOOGLE__ENDPOINT=http://localhost:9000/search
        METASEARCH_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "METASEARCH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    google: GoogleSettings = Field(default_factory=GoogleSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file take precedence over environment variables
        for the keys it sets.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
