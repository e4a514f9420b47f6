"""Tests for the MathValue base and fuzzy_compare."""

import math

import pytest

from polylib.math.value import MathValue, ToleranceMode, fuzzy_compare


class TestFuzzyCompare:
    """Test float comparison with tolerance."""

    def test_exact_equality(self):
        """Test identical values always match."""
        assert fuzzy_compare(1.0, 1.0, 0.0, ToleranceMode.ABSOLUTE)
        assert fuzzy_compare(0.0, 0.0, 0.0, ToleranceMode.RELATIVE)

    def test_absolute(self):
        """Test absolute tolerance."""
        assert fuzzy_compare(1.0, 1.05, 0.1, ToleranceMode.ABSOLUTE)
        assert not fuzzy_compare(1.0, 1.2, 0.1, ToleranceMode.ABSOLUTE)

    def test_absolute_is_strict(self):
        """Test that a difference equal to the tolerance is not a match."""
        assert not fuzzy_compare(0.0, 0.5, 0.5, ToleranceMode.ABSOLUTE)

    def test_relative(self):
        """Test relative tolerance."""
        assert fuzzy_compare(100.0, 100.05, 0.001, ToleranceMode.RELATIVE)
        assert not fuzzy_compare(100.0, 101.0, 0.001, ToleranceMode.RELATIVE)

    def test_relative_against_zero(self):
        """Test relative mode when one side is zero."""
        assert not fuzzy_compare(0.0, 1e-3, 0.5, ToleranceMode.RELATIVE)

    def test_nan_never_matches(self):
        """Test that NaN is not within any tolerance."""
        assert not fuzzy_compare(math.nan, 1.0, 1.0, ToleranceMode.ABSOLUTE)

    def test_unknown_mode(self):
        """Test that unknown modes are rejected."""
        with pytest.raises(ValueError):
            fuzzy_compare(1.0, 2.0, 0.1, "sigfigs")


class TestMathValueBase:
    """Test the abstract base."""

    def test_cannot_instantiate(self):
        """Test that MathValue is abstract."""
        with pytest.raises(TypeError):
            MathValue()
