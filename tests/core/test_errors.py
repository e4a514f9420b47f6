"""Tests for the exception taxonomy."""

from polylib.core.errors import (
    ConversionOverflowError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    NullArgumentError,
    PolyLibError,
)


class TestErrors:
    """Test exception hierarchy and payloads."""

    def test_hierarchy(self):
        """Test that each error is a PolyLibError and its builtin counterpart."""
        assert issubclass(InvalidArgumentError, (PolyLibError, ValueError))
        assert issubclass(NullArgumentError, InvalidArgumentError)
        assert issubclass(IndexOutOfRangeError, IndexError)
        assert issubclass(IndexOutOfRangeError, PolyLibError)
        assert issubclass(ConversionOverflowError, OverflowError)
        assert issubclass(ConversionOverflowError, PolyLibError)

    def test_null_argument_message(self):
        """Test the NullArgumentError message and details."""
        error = NullArgumentError("coefficients")
        assert str(error) == "coefficients can't be None"
        assert error.details == {"argument": "coefficients"}

    def test_invalid_argument_without_name(self):
        """Test that details are empty when no argument is named."""
        assert InvalidArgumentError("bad").details == {}

    def test_index_message(self):
        """Test the IndexOutOfRangeError message."""
        assert str(IndexOutOfRangeError(3, 3)) == "index 3 is out of range [0, 3)"

    def test_overflow_details(self):
        """Test that overflow details are kept."""
        error = ConversionOverflowError("too long", length=40, scale=2)
        assert error.message == "too long"
        assert error.details == {"length": 40, "scale": 2}
