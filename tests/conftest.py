"""
Shared pytest fixtures and utilities for testing polylib.

This module provides:
- Environment isolation for configuration tests
- Helpers for comparing polynomial coefficients
- Validation error assertions for the pydantic models
"""

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

from polylib.math.polynomial import Polynomial


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Run with no POLYLIB_* variables and no .env file in the working directory."""
    import os

    for name in list(os.environ):
        if name.startswith("POLYLIB_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def assert_coefficients():
    """Helper to assert a polynomial's coefficients, with float tolerance."""
    def _assert_coefficients(poly: Polynomial, expected: list[float]) -> None:
        assert isinstance(poly, Polynomial)
        assert poly.to_array() == pytest.approx(expected), (
            f"Coefficients differ:\n{poly.to_array()}\n!=\n{expected}"
        )

    return _assert_coefficients


@pytest.fixture
def assert_validation_error():
    """Helper to assert that creating a model raises ValidationError."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
