"""
pinlock Structured Logger

Thin wrapper over the standard library logger that accepts keyword context:

    logger = get_logger(__name__)
    logger.info("Lock saved", path="dependencies.lock", status="saved")

renders as ``Lock saved path=dependencies.lock status=saved``. All pinlock
loggers live under the ``pinlock`` namespace so the CLI can configure them at
once with ``configure_logging``.
"""

import logging
import sys
from typing import Any, Dict, Optional

from .constants import LOG_LEVELS

ROOT_LOGGER_NAME = "pinlock"

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def _format_context(context: Dict[str, Any]) -> str:
    parts = []
    for key, value in context.items():
        text = str(value)
        if " " in text:
            text = repr(text)
        parts.append(f"{key}={text}")
    return " ".join(parts)


class PinlockLogger:
    """
    Logger that appends keyword context to each message.

    Accepts the standard ``exc_info`` and ``extra`` keywords; any other keyword
    is treated as context. ``message`` is positional-only, so context may use
    that key too (``logger.info("Committed", message=commit_message)``).
    """

    def __init__(self, name: str):
        if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        self.name = name
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, /, exc_info: Any = False,
             extra: Optional[Dict[str, Any]] = None, **context: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if context:
            message = f"{message} {_format_context(context)}"
        self._logger.log(level, message, exc_info=exc_info, extra=extra)

    def debug(self, message: str, /, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, /, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, /, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, /, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, /, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, **kwargs)


def get_logger(name: str) -> PinlockLogger:
    """Get a pinlock logger (names are nested under ``pinlock``)."""
    return PinlockLogger(name)


def configure_logging(level: str = "warning", stream: Any = None) -> logging.Logger:
    """
    Configure the ``pinlock`` logger hierarchy.

    Replaces any handler installed by a previous call so repeated CLI
    invocations in one process (tests) do not duplicate output.

    Args:
        level: One of debug, info, warning, error
        stream: Target stream (defaults to stderr)

    Returns:
        The configured root pinlock logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if level.lower() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level} (expected one of {', '.join(LOG_LEVELS)})")
    numeric_level = logging.getLevelName(level.upper())

    for handler in list(root.handlers):
        if getattr(handler, "_pinlock_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    handler._pinlock_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(numeric_level)
    return root
