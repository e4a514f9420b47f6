"""
polylib.math - polynomial value objects

Immutable value types with:
- Operator overloading
- Fuzzy comparison
- Multiple output formats
"""

from .polynomial import Polynomial, add, equals, multiply, subtract
from .value import MathValue, ToleranceMode, fuzzy_compare

__all__ = [
    "MathValue",
    "ToleranceMode",
    "fuzzy_compare",
    "Polynomial",
    "add",
    "subtract",
    "multiply",
    "equals",
]
