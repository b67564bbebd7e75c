"""Logging helpers shared by routers, services and repositories."""

from __future__ import annotations

import logging
from typing import Any, Mapping

APP_LOGGER_NAME = "backend.ponto"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; callers pass structured fields via ``extra``."""

    return logging.getLogger(name)


def configure_logging(config: Mapping[str, Any] | None = None) -> None:
    """Apply the ``logging`` block of the settings profile.

    Installs a single stream handler on the application logger; repeated
    calls only adjust the level and format.
    """

    global _handler
    config = config or {}
    level_name = str(config.get("level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise RuntimeError(f"Unknown log level '{level_name}'")

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        app_logger.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(config.get("format", DEFAULT_FORMAT)))
    app_logger.setLevel(level)
