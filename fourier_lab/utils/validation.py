"""Boundary checks shared by the core operations."""

from __future__ import annotations

import math
import numbers

import numpy as np

from fourier_lab.utils.errors import InvalidParameterError


def require_finite(name: str, value) -> float:
    """Return ``value`` as a float, rejecting non-numbers, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a real number", parameter=name, value=value)
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}", parameter=name, value=value)
    return float(value)


def require_positive(name: str, value) -> float:
    """Return ``value`` as a float, rejecting non-finite or non-positive numbers."""
    value = require_finite(name, value)
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive and finite, got {value}", parameter=name, value=value)
    return float(value)


def require_index(name: str, value, lower: int = 0, upper: int | None = None) -> int:
    """Return ``value`` as an int in ``[lower, upper)``; ``upper=None`` means unbounded."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer", parameter=name, value=value)
    value = int(value)
    if value < lower or (upper is not None and value >= upper):
        bound = "inf" if upper is None else upper
        raise InvalidParameterError(
            f"{name}={value} outside valid range [{lower}, {bound})",
            parameter=name,
            value=value,
        )
    return value


def as_samples(y, name: str = "y") -> np.ndarray:
    """Convert a real, one-dimensional sample sequence to a float64 array."""
    arr = np.asarray(y)
    if arr.size == 0:
        return np.zeros(0, dtype=float)
    if arr.ndim != 1:
        raise InvalidParameterError(
            f"{name} must be one-dimensional, got shape {arr.shape}", parameter=name, value=arr.shape
        )
    if np.iscomplexobj(arr):
        raise InvalidParameterError(f"{name} must be real-valued", parameter=name, value=str(arr.dtype))
    try:
        return arr.astype(float)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must contain numbers", parameter=name, value=str(arr.dtype)) from exc


def frozen(arr: np.ndarray) -> np.ndarray:
    """Mark ``arr`` read-only and return it."""
    arr.setflags(write=False)
    return arr
