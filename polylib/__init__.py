"""polylib - immutable polynomials with tolerance-based equality.

Subpackages:
- polylib.math: Polynomial value type and arithmetic
- polylib.extensions: String helpers (base conversion)
- polylib.core: Configuration, logging and exceptions
"""

__version__ = "0.1.0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.errors import (
    ConversionOverflowError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NullArgumentError,
    PolyLibError,
)
from .extensions import convert_to_int
from .math import Polynomial, add, equals, multiply, subtract

__all__ = [
    "Polynomial",
    "add",
    "subtract",
    "multiply",
    "equals",
    "convert_to_int",
    "PolyLibError",
    "InvalidArgumentError",
    "NullArgumentError",
    "IndexOutOfRangeError",
    "ConversionOverflowError",
]
