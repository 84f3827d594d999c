"""
Composite test waveforms: a fixed 10 Hz primary plus a scaled 20 Hz secondary.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

import numpy as np
from scipy import signal

from fourier_lab.config import PRIMARY_FREQ, SECONDARY_FREQ
from fourier_lab.utils.errors import InvalidParameterError
from fourier_lab.utils.logging import get_logger
from fourier_lab.utils.validation import frozen, require_finite, require_positive

logger = get_logger(__name__)


class Waveform(NamedTuple):
    t: np.ndarray
    y: np.ndarray


def sine(f: float, t: np.ndarray) -> np.ndarray:
    return np.sin(2 * np.pi * f * t)


def triangle(f: float, t: np.ndarray) -> np.ndarray:
    # Symmetric ramp: -1 at t=0, +1 at half period.
    return signal.sawtooth(2 * np.pi * f * t, width=0.5)


def square(f: float, t: np.ndarray) -> np.ndarray:
    """sign(sin(2*pi*f*t)), evaluated on the cycle phase so exact zero crossings give 0."""
    phase = np.mod(f * t, 1.0)
    out = np.where(phase < 0.5, 1.0, -1.0)
    out[(phase == 0.0) | (phase == 0.5)] = 0.0
    return out


SHAPES: dict[str, Callable[[float, np.ndarray], np.ndarray]] = {
    "sine": sine,
    "triangle": triangle,
    "square": square,
}


def time_axis(sr: float, n: int) -> np.ndarray:
    """Return ``n`` sample times spaced ``1/sr`` apart, starting at zero."""
    return np.arange(n) / sr


def generate_waveform(sr: float, duration: float, shape: str = "sine", secondary_amplitude: float = 0.0) -> Waveform:
    """
    Build ``shape(10, t) + secondary_amplitude * shape(20, t)`` over ``round(sr * duration)`` samples.

    Raises:
        InvalidParameterError: non-positive ``sr``/``duration`` or an unknown shape.
    """
    sr = require_positive("sr", sr)
    duration = require_positive("duration", duration)
    if shape not in SHAPES:
        raise InvalidParameterError(
            f"Unknown waveform shape '{shape}', expected one of {sorted(SHAPES)}",
            parameter="shape",
            value=shape,
        )
    secondary_amplitude = require_finite("secondary_amplitude", secondary_amplitude)

    generator = SHAPES[shape]
    n = int(round(sr * duration))
    t = time_axis(sr, n)
    y = generator(PRIMARY_FREQ, t) + secondary_amplitude * generator(SECONDARY_FREQ, t)
    logger.debug("Generated %s waveform: N=%d sr=%s amp20=%.3f", shape, n, sr, secondary_amplitude)
    return Waveform(frozen(t), frozen(np.asarray(y, dtype=float)))
