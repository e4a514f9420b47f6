"""Core utilities package"""

from .config import settings, get_settings, load_settings, Settings, DEFAULT_COMPARISON_EPSILON
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    PolyLibError,
    InvalidArgumentError,
    NullArgumentError,
    IndexOutOfRangeError,
    ConversionOverflowError,
)

__all__ = [
    "settings",
    "get_settings",
    "load_settings",
    "Settings",
    "DEFAULT_COMPARISON_EPSILON",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "PolyLibError",
    "InvalidArgumentError",
    "NullArgumentError",
    "IndexOutOfRangeError",
    "ConversionOverflowError",
]
