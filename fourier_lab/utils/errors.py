"""
Exceptions raised by the Fourier lab core.

Every public operation validates its inputs up front and raises one of
these; nothing is clamped or silently corrected.
"""

from typing import Any, Optional


class FourierLabError(Exception):
    """Base exception for all Fourier lab errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class InvalidParameterError(FourierLabError, ValueError):
    """Raised when a parameter is outside its contract (e.g. sr <= 0, bad bin index)."""

    def __init__(self, message: str, parameter: Optional[str] = None, value: Any = None):
        super().__init__(message, details={"parameter": parameter, "value": value})
        self.parameter = parameter
        self.value = value


class LengthMismatchError(FourierLabError, ValueError):
    """Raised when spectrum arrays disagree with the transform length."""

    def __init__(
        self,
        message: str,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        super().__init__(message, details={"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual
