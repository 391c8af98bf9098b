"""Logging setup for gif-braille."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"
LOG_MAX_BYTES = 2_000_000
LOG_BACKUP_COUNT = 5

logger = logging.getLogger(__name__)


def _default_log_dir() -> Path:
    return Path.home() / ".gif_braille" / "logs"


def _resolve_level(level_name: str | None) -> int:
    level = logging.getLevelName((level_name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _is_console_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and not isinstance(
        handler, logging.FileHandler
    )


def init_logging(level_name: str | None = None) -> Path:
    """Log to a rotating file and to stderr; return the log file path.

    Handlers already on the root logger are reused, so a second call does not
    duplicate output. If the log directory cannot be created, only stderr is
    used and the failure is logged there.
    """
    log_path = _default_log_dir() / "app.log"
    level = _resolve_level(level_name)
    root = logging.getLogger()
    root.setLevel(level)

    new_handlers: list[logging.Handler] = []
    file_error: Optional[OSError] = None
    if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            new_handlers.append(
                RotatingFileHandler(
                    log_path,
                    maxBytes=LOG_MAX_BYTES,
                    backupCount=LOG_BACKUP_COUNT,
                    encoding="utf-8",
                )
            )
        except OSError as exc:
            file_error = exc
    if not any(_is_console_handler(h) for h in root.handlers):
        new_handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in new_handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if file_error is not None:
        logger.warning("Log file disabled, cannot open %s: %s", log_path, file_error)
    logger.info("Logging initialized at %s", log_path)
    return log_path


def set_console_level(level: int) -> None:
    """Set the level of the stderr handlers, leaving file handlers alone."""
    for handler in logging.getLogger().handlers:
        if _is_console_handler(handler):
            handler.setLevel(level)
