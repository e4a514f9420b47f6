"""Helpers that live alongside the polynomial types."""

from .strings import convert_to_int

__all__ = ["convert_to_int"]
