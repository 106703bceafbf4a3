"""Logging setup for applications that embed argguard."""

from __future__ import annotations

import logging

from argguard.config import settings

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging; falls back to LOG_LEVEL from the environment."""
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT)
