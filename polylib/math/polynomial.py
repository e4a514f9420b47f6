"""
Polynomial value type.

A univariate polynomial with dense float coefficients, stored lowest degree
first: ``Polynomial(1, 2, 3)`` is ``3x^2 + 2x + 1``.

Polynomials are immutable. Every arithmetic operation allocates a new
instance, and both construction and ``to_array()`` copy the coefficients.

Equality is tolerance based: two polynomials of the same degree are equal when
every pair of coefficients differs by less than the comparison epsilon
(``POLYLIB_COMPARISON_EPSILON``, read once when this module is imported).
That relation is reflexive and symmetric but not transitive: ``a == b`` and
``b == c`` do not imply ``a == c`` when the coefficients drift by just under
epsilon at each step.

Hashing works on exact coefficient values, so bit-identical polynomials hash
identically while polynomials that are only equal within epsilon may not.
Avoid using nearly-equal polynomials as interchangeable dict or set keys.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, Mapping

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..core.config import get_settings
from ..core.errors import IndexOutOfRangeError, InvalidArgumentError, NullArgumentError
from ..core.logging import get_context_logger
from .value import MathValue, ToleranceMode, fuzzy_compare

logger = get_context_logger(__name__, component="polynomial")

_HASH_BITS = 32
_HASH_MASK = (1 << _HASH_BITS) - 1
_HASH_SHIFT = 2

# Operand types accepted by the arithmetic functions besides Polynomial itself
_SEQUENCE_TYPES = (list, tuple, np.ndarray)

_MISSING = object()

# Read once at import
COMPARISON_EPSILON: float = get_settings().COMPARISON_EPSILON


def _coerce_coefficients(raw: Any, argument: str = "coefficients") -> tuple[float, ...]:
    """Validate a raw coefficient sequence and copy it into a tuple of floats."""
    if raw is None:
        logger.debug("Rejected missing coefficients", extra_data={"argument": argument})
        raise NullArgumentError(argument)

    if isinstance(raw, np.ndarray) and raw.ndim == 0:
        raw = (raw.item(),)

    if not _is_iterable(raw):
        raise InvalidArgumentError(f"{argument} must be a sequence of numbers", argument=argument)

    coefficients = []
    for value in raw:
        if isinstance(value, (str, bytes)) or not isinstance(value, numbers.Real):
            logger.debug("Rejected non-numeric coefficient", extra_data={"value": repr(value)})
            raise InvalidArgumentError(
                f"{argument} must contain only real numbers, got {value!r}", argument=argument
            )
        coefficients.append(float(value))

    if not coefficients:
        logger.debug("Rejected empty coefficients", extra_data={"argument": argument})
        raise InvalidArgumentError(f"{argument} can't be empty", argument=argument)

    return tuple(coefficients)


def _operand_coefficients(operand: Any, argument: str) -> tuple[float, ...]:
    """Coefficients of an arithmetic operand (Polynomial, scalar or sequence)."""
    if isinstance(operand, Polynomial):
        # Instances built through model_construct skip validation
        if not operand.coefficients:
            raise InvalidArgumentError(f"{argument} is empty", argument=argument)
        return operand.coefficients
    if isinstance(operand, numbers.Real):
        return (float(operand),)
    return _coerce_coefficients(operand, argument)


def _is_iterable(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def _is_operand(value: Any) -> bool:
    return value is None or isinstance(value, (Polynomial, numbers.Real) + _SEQUENCE_TYPES)


def _combine(lhs: tuple[float, ...], rhs: tuple[float, ...], sign: int) -> list[float]:
    result = list(lhs) + [0.0] * max(len(rhs) - len(lhs), 0)
    for i, value in enumerate(rhs):
        result[i] += sign * value
    return result


def _convolve(lhs: tuple[float, ...], rhs: tuple[float, ...]) -> list[float]:
    result = [0.0] * (len(lhs) + len(rhs) - 1)
    for i, a in enumerate(lhs):
        for j, b in enumerate(rhs):
            result[i + j] += a * b
    return result


def _format_coefficient(value: float) -> str:
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


def _rotate_left(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (_HASH_BITS - shift))) & _HASH_MASK


def add(lhs: Any, rhs: Any) -> Polynomial:
    """
    Add two polynomials, or a polynomial and a scalar.

    The result has as many coefficients as the longer operand; missing
    coefficients of the shorter one count as zero. A scalar only changes the
    constant term.

    Raises:
        NullArgumentError: If either operand is None
        InvalidArgumentError: If either operand has no coefficients
    """
    a = _operand_coefficients(lhs, "lhs")
    b = _operand_coefficients(rhs, "rhs")
    return Polynomial._from_trusted(_combine(a, b, 1))


def subtract(lhs: Any, rhs: Any) -> Polynomial:
    """
    Subtract ``rhs`` from ``lhs``.

    Same shape rule as ``add``. With a scalar minuend only the constant term
    keeps the scalar: ``subtract(c, p)`` is ``(c - p[0], -p[1], ...)``.
    """
    a = _operand_coefficients(lhs, "lhs")
    b = _operand_coefficients(rhs, "rhs")
    return Polynomial._from_trusted(_combine(a, b, -1))


def multiply(lhs: Any, rhs: Any) -> Polynomial:
    """
    Multiply by discrete convolution.

    The result has ``len(lhs) + len(rhs) - 1`` coefficients, coefficient ``k``
    being the sum of ``lhs[i] * rhs[j]`` over ``i + j == k``. A scalar is a
    one-coefficient operand, so it scales every coefficient.
    """
    a = _operand_coefficients(lhs, "lhs")
    b = _operand_coefficients(rhs, "rhs")
    return Polynomial._from_trusted(_convolve(a, b))


def equals(lhs: Polynomial | None, rhs: Polynomial | None) -> bool:
    """
    Tolerance-based equality.

    Identical references are equal, None only equals None, otherwise the
    degrees must match and every coefficient pair must differ by strictly less
    than ``COMPARISON_EPSILON``.
    """
    if lhs is rhs:
        return True
    if lhs is None or rhs is None:
        return False
    if lhs.length != rhs.length:
        return False

    return all(abs(a - b) < COMPARISON_EPSILON for a, b in zip(lhs.coefficients, rhs.coefficients))


class Polynomial(BaseModel, MathValue):
    """
    Immutable univariate polynomial.

    Examples:
        >>> Polynomial(1, 2, 3)         # 3x^2 + 2x + 1
        >>> Polynomial([0, 5, 0, 3])    # 3x^3 + 5x
        >>> Polynomial(4)               # constant 4

    ``model_validate`` goes through the same constructor checks, but pydantic
    reports their failures wrapped in a ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    coefficients: tuple[float, ...] = Field(min_length=1, description="Coefficients, lowest degree first")

    # Make NumPy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, *args: Any, coefficients: Any = _MISSING, **kwargs: Any):
        """
        Create a Polynomial.

        Args:
            *args: Either the coefficients themselves or a single sequence of them
            coefficients: Keyword form of the coefficient sequence

        Raises:
            NullArgumentError: If the coefficient sequence is None
            InvalidArgumentError: If the sequence is empty or holds non-numbers
        """
        if coefficients is not _MISSING and args:
            raise InvalidArgumentError(
                "Polynomial accepts either coefficients or positional arguments, not both"
            )

        if coefficients is not _MISSING:
            raw = coefficients
        elif len(args) == 1 and isinstance(args[0], Polynomial):
            raw = args[0].coefficients
        elif len(args) == 1 and (args[0] is None or _is_iterable(args[0])):
            raw = args[0]
        else:
            raw = args

        super().__init__(coefficients=_coerce_coefficients(raw), **kwargs)

    @classmethod
    def _from_trusted(cls, coefficients: list[float]) -> Polynomial:
        """Wrap a freshly computed, already valid coefficient buffer."""
        return cls.model_construct(coefficients=tuple(coefficients))

    @property
    def comparison_epsilon(self) -> float:
        """Tolerance used by ``==``; fixed for the life of the process."""
        return COMPARISON_EPSILON

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Polynomial:
        """Copy, re-validating updated coefficients through the constructor."""
        if update and "coefficients" in update:
            return Polynomial(coefficients=update["coefficients"])
        return self.clone()

    @property
    def length(self) -> int:
        """Number of coefficients."""
        return len(self.coefficients)

    @property
    def degree(self) -> int:
        """Highest exponent with a coefficient slot, zero or not."""
        return len(self.coefficients) - 1

    def __len__(self) -> int:
        return len(self.coefficients)

    def __getitem__(self, index: int) -> float:
        """
        Coefficient of ``x^index``.

        Only ``0 <= index < length`` is valid; negative indices are not wrapped.
        """
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise TypeError(f"Polynomial indices must be integers, not {type(index).__name__}")
        if index < 0 or index >= len(self.coefficients):
            raise IndexOutOfRangeError(int(index), len(self.coefficients))
        return self.coefficients[index]

    # Conversions

    def to_array(self) -> list[float]:
        """Copy of the coefficients as a list."""
        return list(self.coefficients)

    def clone(self) -> Polynomial:
        return Polynomial._from_trusted(list(self.coefficients))

    def to_python(self) -> tuple[float, ...]:
        return self.coefficients

    def to_numpy(self) -> np.ndarray:
        """Convert to a NumPy float64 array (lowest degree first)."""
        return np.array(self.coefficients, dtype=np.float64)

    # Comparison

    def compare(
        self, other: MathValue, tolerance: float | None = None, mode: str = ToleranceMode.ABSOLUTE
    ) -> bool:
        """
        Fuzzy comparison with an explicit tolerance.

        Without a tolerance this is plain ``==``.
        """
        if tolerance is None:
            return equals(self, other) if isinstance(other, Polynomial) else False
        if not isinstance(other, Polynomial) or self.length != other.length:
            return False
        return all(
            fuzzy_compare(a, b, tolerance, mode)
            for a, b in zip(self.coefficients, other.coefficients)
        )

    def __eq__(self, other: Any) -> bool:
        if other is None or isinstance(other, Polynomial):
            return equals(self, other)
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        """
        Rotate-and-add fold of the coefficient hashes, in index order.

        Consistent with exact equality only; see the module docstring.
        """
        result = 0
        for value in self.coefficients:
            result = (_rotate_left(result, _HASH_SHIFT) + (hash(value) & _HASH_MASK)) & _HASH_MASK
        return result

    # String representations

    def _terms(self, power_format: str) -> list[str]:
        terms = []
        for i in range(len(self.coefficients) - 1, -1, -1):
            value = self.coefficients[i]
            if value == 0:
                continue
            coefficient = _format_coefficient(value)
            if i > 1:
                terms.append(power_format.format(coefficient=coefficient, power=i))
            elif i == 1:
                terms.append(f"{coefficient}x")
            else:
                terms.append(coefficient)
        return terms

    def to_string(self) -> str:
        """
        Render terms from highest to lowest degree, skipping zero coefficients.

        ``Polynomial(0, 5, 0, 3)`` renders as ``"3x^3 + 5x"``; an all-zero
        polynomial renders as an empty string.
        """
        return " + ".join(self._terms("{coefficient}x^{power}"))

    def to_tex(self) -> str:
        return " + ".join(self._terms("{coefficient}x^{{{power}}}"))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()})"

    # Arithmetic operators

    def __add__(self, other: Any) -> Polynomial:
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Any) -> Polynomial:
        if not _is_operand(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: Any) -> Polynomial:
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other: Any) -> Polynomial:
        if not _is_operand(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other: Any) -> Polynomial:
        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other: Any) -> Polynomial:
        if not _is_operand(other):
            return NotImplemented
        return multiply(other, self)

    def __neg__(self) -> Polynomial:
        return Polynomial._from_trusted([-value for value in self.coefficients])

    def __pos__(self) -> Polynomial:
        return self.clone()
