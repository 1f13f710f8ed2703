"""Logging setup for the API process."""

import logging

from envelope_api import config


def configure_logging(level: str | None = None) -> None:
    """Configure root logging; unknown level names fall back to INFO."""
    name = (level or config.LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger().setLevel(resolved)
