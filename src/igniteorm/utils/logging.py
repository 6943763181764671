"""Logging helpers for igniteorm."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "IGNITEORM_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    value = os.getenv(LOG_LEVEL_ENV)
    if not value:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return default


def configure_logging(level: int | None = None) -> None:
    logger = logging.getLogger("igniteorm")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(resolve_log_level() if level is None else level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"igniteorm.{name}")
