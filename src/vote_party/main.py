#!/usr/bin/env python3
"""Main entry point for the vote party core.

Loads settings, configures logging, creates the schema and loads the act
catalog. Transport boundaries build on the same container.
"""

from __future__ import annotations

import asyncio
import json
import logging
import logging.config
import sys
from pathlib import Path

from vote_party.domain.shared.messages import LogTemplates

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logging.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, _LOGGING_CONFIG_PATH)

    logging.getLogger().setLevel(resolved_level)


async def _bootstrap() -> None:
    from vote_party.config.container import create_container
    from vote_party.config.settings import get_settings

    container = create_container(get_settings())
    try:
        await container.initialize()
    finally:
        await container.shutdown()


def main() -> int:
    from vote_party.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.APP_STARTING, settings.environment)

    try:
        asyncio.run(_bootstrap())
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logger.exception(LogTemplates.APP_FATAL_ERROR, e)
        return 1

    logger.info(LogTemplates.APP_READY)
    return 0


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
