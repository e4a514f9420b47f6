"""
Logging for the polylib package.

Every module logs through a child of the ``polylib`` logger, which carries a
``NullHandler`` so nothing is printed unless the host application asks for it.
``setup_logging`` is that opt-in: it attaches output handlers to the
``polylib`` logger only and leaves the root logger alone.
"""

import sys
import logging
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import Settings, get_settings

LIBRARY_LOGGER = "polylib"

# Marks handlers installed by setup_logging so a second call replaces them
_HANDLER_FLAG = "_polylib_handler"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with the record's context merged in"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(getattr(record, "extra_data", {}))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Single-line text, context appended as key=value pairs"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s %(levelname)-5s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = getattr(record, "extra_data", None)
        if context:
            pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
            text = f"{text} [{pairs}]"
        return text


def _build_handlers(settings: Settings, formatter: logging.Formatter) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_FLAG, True)
    return handlers


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Send polylib's own records to stderr (and LOG_FILE, if set).

    Only the ``polylib`` logger is touched. Handlers from an earlier call are
    replaced; handlers the application installed elsewhere are kept. Records
    stop propagating to the root logger so they are not printed twice.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    formatter = StructuredFormatter() if settings.LOG_FORMAT == "json" else TextFormatter()

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            library_logger.removeHandler(handler)
            handler.close()

    for handler in _build_handlers(settings, formatter):
        library_logger.addHandler(handler)
    library_logger.setLevel(level)
    library_logger.propagate = False
    return library_logger


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger carrying permanent context, extended per call with ``extra_data``"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = kwargs.setdefault("extra", {})
        extra["extra_data"] = {**self.extra, **kwargs.pop("extra_data", {})}
        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Get logger with permanent context"""
    return LoggerAdapter(get_logger(name), context)
