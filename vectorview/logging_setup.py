"""Logging setup for applications embedding vectorview.

The library never configures logging itself; the embedding app calls
``configure_logging()`` once at startup, before the first extraction.
"""

from __future__ import annotations

import logging

from vectorview.config import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging. Falls back to DEBUG on an unknown level name."""
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.DEBUG),
        format=LOG_FORMAT,
    )
