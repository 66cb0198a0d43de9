"""
Logging for the wacloud SDK.

Console output goes through rich's RichHandler; DEV mode also writes a daily
log file. SDK code logs through ContextLogger, which tags every message with
the WhatsApp phone-number ID the call is made for: ``[P:<phone id>] message``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wacloud.core.config.settings import LOG_LEVELS, settings

from .context import get_current_phone_context

DEFAULT_CONSOLE_FORMAT = "[%(name)s] %(message)s"
DEFAULT_FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_console = Console(
    theme=Theme(
        {
            "info": "cyan",
            "warning": "yellow",
            "error": "bold red",
            "debug": "dim white",
        }
    )
)


class CompactFormatter(logging.Formatter):
    """Formatter that prints ``wacloud.*`` logger names by their last two parts."""

    package_prefix = "wacloud."

    def format(self, record: logging.LogRecord) -> str:
        original_name = record.name
        if original_name.startswith(self.package_prefix):
            record.name = ".".join(original_name.split(".")[-2:])
        try:
            return super().format(record)
        finally:
            record.name = original_name


class ContextLogger:
    """
    Logger wrapper that prefixes messages with the phone-number ID.

    The ID set with ``set_phone_context`` wins over the one bound at
    construction, so a shared logger still reports the number a call is
    actually made for.
    """

    def __init__(self, logger: logging.Logger, phone_number_id: str | None = None):
        self.logger = logger
        self.phone_number_id = phone_number_id

    def _prefixed(self, message: str) -> str:
        phone = get_current_phone_context() or self.phone_number_id
        return f"[P:{phone}] {message}" if phone else message

    def _log(self, level: int, message: str, *args, **kwargs) -> None:
        if self.logger.isEnabledFor(level):
            self.logger.log(level, self._prefixed(message), *args, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        """Log at ERROR with the active exception's traceback."""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, *args, **kwargs)

    def bind(self, **kwargs) -> ContextLogger:
        """
        Return a new ContextLogger with updated context.

        Example:
            client_logger = logger.bind(phone_number_id="1234567890")
        """
        return ContextLogger(
            self.logger,
            phone_number_id=kwargs.get("phone_number_id", self.phone_number_id),
        )


def _console_handler(fmt: str) -> logging.Handler:
    # RichHandler renders time and level itself
    handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        markup=False,
    )
    handler.setFormatter(CompactFormatter(fmt))
    return handler


def _file_handler(log_dir: str, fmt: str) -> logging.Handler:
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    logfile = directory / f"wacloud_{datetime.now():%Y%m%d}.log"
    handler = logging.FileHandler(logfile, encoding="utf-8")
    handler.setFormatter(CompactFormatter(fmt))
    return handler


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> None:
    """
    Configure the root logger.

    Parameters
    ----------
    level : str
        "DEBUG", "INFO", "WARNING" or "ERROR"; anything else means INFO
    mode : str
        "DEV" adds a daily log file in ``log_dir``; other modes log to the
        console only
    log_dir : str, optional
        Directory for the DEV log file
    console_fmt, file_fmt : str, optional
        Override the default console and file formats
    """
    lvl = level.upper() if level.upper() in LOG_LEVELS else "INFO"

    handlers = [_console_handler(console_fmt or DEFAULT_CONSOLE_FORMAT)]
    if mode.upper() == "DEV" and log_dir:
        handlers.append(_file_handler(log_dir, file_fmt or DEFAULT_FILE_FORMAT))

    logging.basicConfig(level=lvl, handlers=handlers, force=True)
    logging.getLogger("wacloud.logging").debug(f"Logging initialized ({lvl})")


def setup_app_logging() -> None:
    """Configure logging from the global settings."""
    setup_logging(
        level=settings.log_level,
        mode=settings.environment,
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(name: str, phone_number_id: str | None = None) -> ContextLogger:
    """
    Get a phone-number aware logger.

    Args:
        name: Logger name (usually __name__)
        phone_number_id: Phone number ID used when no context is set
    """
    return ContextLogger(logging.getLogger(name), phone_number_id=phone_number_id)
