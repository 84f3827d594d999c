"""
Per-sample terms of the forward transform at a single bin.

Summing ``real`` recovers ``real[k]`` of the spectrum and summing ``imag``
recovers ``imag[k]``, when the spectrum was taken with nfft equal to the
sample count. Plotting them shows which stretches of the waveform push the
bin up and which cancel it out.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from fourier_lab.spectrum import bin_count
from fourier_lab.utils.logging import get_logger
from fourier_lab.utils.validation import as_samples, frozen, require_finite, require_index

logger = get_logger(__name__)


class Contributions(NamedTuple):
    real: np.ndarray
    imag: np.ndarray


def compute_contributions(y, k: int) -> Contributions:
    """
    ``y[n]*cos(2*pi*k*n/N)`` and ``-y[n]*sin(2*pi*k*n/N)`` for every sample n.

    Raises:
        InvalidParameterError: ``k`` outside ``[0, N // 2)``.
    """
    samples = as_samples(y)
    n_samples = len(samples)
    k = require_index("k", k, upper=bin_count(n_samples))

    n = np.arange(n_samples)
    angle = 2 * np.pi * ((k * n) % n_samples) / n_samples
    real = samples * np.cos(angle)
    imag = -samples * np.sin(angle)

    logger.debug("Contributions for bin %d over %d samples", k, n_samples)
    return Contributions(frozen(real), frozen(imag))


def basis_components(t, frequency: float) -> tuple[np.ndarray, np.ndarray]:
    """Sine and cosine templates at ``frequency`` Hz on time axis ``t``."""
    frequency = require_finite("frequency", frequency)
    t = as_samples(t, "t")
    return np.sin(2 * np.pi * frequency * t), np.cos(2 * np.pi * frequency * t)
