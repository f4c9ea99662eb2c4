"""Loguru setup shared by the API and its tests.

Every record carries ``extra["correlation_id"]``. The request logging
middleware sets it per request; outside a request it is ``-``.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_NOISY_LOGGERS = {
    "werkzeug": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").lower() in ("1", "true", "yes")


def _log_file_path() -> str:
    explicit = os.getenv("LOG_FILE")
    if explicit:
        return explicit
    instance_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../instance"))
    return os.path.join(instance_dir, "app.log")


class _StdlibBridge(logging.Handler):
    """Forwards stdlib ``logging`` records (werkzeug, SQLAlchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_correlation_id.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class ContextualLogger:
    """loguru proxy that binds the current correlation id on every call."""

    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(correlation_id=_correlation_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or "-")


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("-")


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    """(Re)configure sinks. Safe to call more than once.

    ``LOG_LEVEL`` sets the level unless ``debug_mode`` forces DEBUG.
    ``LOG_JSON`` switches both sinks to loguru's JSON serialisation.
    The file sink rotates at ``LOG_ROTATION`` (default ``10 MB``).
    """

    if level is None:
        level = "DEBUG" if debug_mode else (os.getenv("LOG_LEVEL") or "INFO")
    level = level.upper()
    as_json = _env_flag("LOG_JSON")
    log_file = _log_file_path()
    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-"})
    _logger.add(
        sys.stderr,
        level=level,
        format=_TEXT_FORMAT,
        colorize=not as_json,
        serialize=as_json,
        backtrace=False,
        diagnose=False,
        filter=sanitize_record,
    )
    _logger.add(
        log_file,
        level=level,
        format=_TEXT_FORMAT,
        colorize=False,
        serialize=as_json,
        rotation=os.getenv("LOG_ROTATION") or "10 MB",
        retention=5,
        backtrace=False,
        diagnose=False,
        enqueue=True,
        encoding="utf-8",
        filter=sanitize_record,
    )

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    for name, noisy_level in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(noisy_level)


logger = ContextualLogger()

__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
