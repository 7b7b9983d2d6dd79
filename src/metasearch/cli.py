"""CLI entry point for metasearch."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from metasearch.config.settings import Settings
from metasearch.models.result import Result


def main(argv: list[str] | None = None) -> None:
    """Run one search from the command line and print the results as JSON."""
    parser = argparse.ArgumentParser(
        prog="metasearch",
        description="metasearch — Query a search provider and print normalized results",
    )
    parser.add_argument(
        "term",
        nargs="+",
        help="Search term (multiple words are joined with spaces)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["json", "console"],
        default=None,
        help="Log format (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"metasearch {_get_version()}",
    )

    args = parser.parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    # Apply CLI overrides
    if args.log_level:
        settings.observability.log_level = args.log_level
    if args.log_format:
        settings.observability.log_format = args.log_format

    from metasearch.observability.logging import setup_logging

    setup_logging(settings.observability)

    results = asyncio.run(_search(" ".join(args.term), settings))
    json.dump([r.model_dump() for r in results], sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")


async def _search(search_term: str, settings: Settings) -> list[Result]:
    """Run the Google searcher once and collect its single delivery."""
    from metasearch.adapters.google.adapter import GoogleSearcher

    queue: asyncio.Queue[list[Result]] = asyncio.Queue(maxsize=1)
    await GoogleSearcher(settings.google).search(search_term, queue)
    return await queue.get()


def _get_version() -> str:
    """Get the package version."""
    try:
        from metasearch import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
