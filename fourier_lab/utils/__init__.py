"""
Error types and logging helpers shared by the Fourier lab modules.
"""

from fourier_lab.utils.errors import (
    FourierLabError,
    InvalidParameterError,
    LengthMismatchError,
)
from fourier_lab.utils.logging import JSONFormatter, get_logger, setup_logging

__all__ = [
    "FourierLabError",
    "InvalidParameterError",
    "LengthMismatchError",
    "JSONFormatter",
    "get_logger",
    "setup_logging",
]
