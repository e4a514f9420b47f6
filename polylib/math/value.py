"""
Base MathValue class for polylib value objects.

This module provides the foundation for immutable mathematical value objects with:
- Operator overloading
- Fuzzy comparison with tolerances
- Multiple output formats (string, TeX)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) < tol
    ABSOLUTE = "absolute"  # |a - b| < tol


def fuzzy_compare(a: float, b: float, tolerance: float, mode: str) -> bool:
    """
    Compare two floats with tolerance.

    Both modes use a strict bound, so a difference equal to the tolerance is
    not a match.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value
        mode: Comparison mode (relative, absolute)

    Returns:
        True if values are equal within tolerance
    """
    if a == b:
        return True

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) < tolerance

    elif mode == ToleranceMode.RELATIVE:
        max_abs = max(abs(a), abs(b))
        return abs(a - b) / max_abs < tolerance

    raise ValueError(f"Unknown tolerance mode: {mode}")


class MathValue(ABC):
    """
    Base class for mathematical value objects.

    Provides:
    - Operator overloading (+, -, *, unary -, unary +)
    - Fuzzy comparison with tolerances
    - Multiple output formats (string, TeX)

    Note: Concrete subclasses should inherit from both BaseModel and MathValue,
    e.g., `class Polynomial(BaseModel, MathValue):`. MathValue itself is abstract
    and does not inherit from BaseModel to avoid MRO conflicts.
    """

    @abstractmethod
    def compare(
        self, other: MathValue, tolerance: float | None = None, mode: str = ToleranceMode.ABSOLUTE
    ) -> bool:
        """
        Fuzzy comparison with tolerance.

        Args:
            other: Value to compare against
            tolerance: Tolerance for comparison (None = type default)
            mode: Tolerance mode (relative, absolute)

        Returns:
            True if values are equal within tolerance
        """
        pass

    # String representations

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""
        pass

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""
        pass

    # Operator overloading (Python magic methods)

    @abstractmethod
    def __add__(self, other: Any) -> MathValue:
        """Addition: self + other"""
        pass

    @abstractmethod
    def __radd__(self, other: Any) -> MathValue:
        """Right addition: other + self"""
        pass

    @abstractmethod
    def __sub__(self, other: Any) -> MathValue:
        """Subtraction: self - other"""
        pass

    @abstractmethod
    def __rsub__(self, other: Any) -> MathValue:
        """Right subtraction: other - self"""
        pass

    @abstractmethod
    def __mul__(self, other: Any) -> MathValue:
        """Multiplication: self * other"""
        pass

    @abstractmethod
    def __rmul__(self, other: Any) -> MathValue:
        """Right multiplication: other * self"""
        pass

    @abstractmethod
    def __neg__(self) -> MathValue:
        """Unary negation: -self"""
        pass

    @abstractmethod
    def __pos__(self) -> MathValue:
        """Unary positive: +self"""
        pass

    def to_python(self) -> Any:
        """
        Convert MathValue to Python native type.

        Returns:
            Python native value (float, tuple, etc.)
        """
        raise NotImplementedError(f"{self.__class__.__name__}.to_python() not implemented")
