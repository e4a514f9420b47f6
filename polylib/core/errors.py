"""
Library exceptions.

Every error is raised eagerly at the API boundary, before any computation
proceeds. None of them is retried inside the library.
"""

from typing import Any, Dict, Optional


class PolyLibError(Exception):
    """Base exception for polylib errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidArgumentError(PolyLibError, ValueError):
    """Raised when an argument is structurally malformed"""

    def __init__(self, message: str, argument: Optional[str] = None):
        details = {"argument": argument} if argument else {}
        super().__init__(message=message, details=details)


class NullArgumentError(InvalidArgumentError):
    """Raised when a required argument is None"""

    def __init__(self, argument: str):
        super().__init__(f"{argument} can't be None", argument=argument)


class IndexOutOfRangeError(PolyLibError, IndexError):
    """Raised when an index falls outside the coefficient range"""

    def __init__(self, index: int, length: int):
        super().__init__(
            message=f"index {index} is out of range [0, {length})",
            details={"index": index, "length": length}
        )


class ConversionOverflowError(PolyLibError, OverflowError):
    """Raised when a conversion result does not fit a signed 32-bit integer"""

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)
