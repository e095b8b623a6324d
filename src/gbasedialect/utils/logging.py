"""Logging helpers for gbasedialect.

Every record carries the correlation id of the engine run that asked for the
SQL, so statements generated during one schema synchronization can be grouped.
"""

from __future__ import annotations

import logging
import os
import uuid
from contextvars import ContextVar
from typing import Optional

LOG_LEVEL_ENV = "GBASE_LOG_LEVEL"
ROOT_LOGGER = "gbasedialect"

_correlation_id: ContextVar[str | None] = ContextVar("gbasedialect_correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def resolve_log_level(default: int = logging.INFO, override: int | str | None = None) -> int:
    """
    Pick the level from ``override``, then ``GBASE_LOG_LEVEL``, then ``default``.
    Unrecognized names fall back to ``default``.
    """
    value = override if override is not None else os.getenv(LOG_LEVEL_ENV)
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int | str | None = None) -> None:
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers:
        if level is not None:
            logger.setLevel(resolve_log_level(override=level))
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s")
    )
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(resolve_log_level(override=level))


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_correlation_id(value: Optional[str] = None) -> str:
    token = value or uuid.uuid4().hex
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    return _correlation_id.get() or set_correlation_id()
