"""
Inverse of the one-sided transform in :mod:`fourier_lab.spectrum`.

    y_hat[n] = (1/nfft) * sum_k scale(k) * (real[k]*cos(2*pi*k*n/nfft) - imag[k]*sin(2*pi*k*n/nfft))

Real signals have conjugate-symmetric spectra, so each retained bin stands
in for its negative-frequency mirror and is counted twice. DC and (for even
nfft) Nyquist have no mirror and are counted once.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from fourier_lab.spectrum import bin_count, phase_matrix
from fourier_lab.utils.errors import LengthMismatchError
from fourier_lab.utils.logging import get_logger
from fourier_lab.utils.validation import as_samples, frozen, require_index, require_positive
from fourier_lab.waveform import time_axis

logger = get_logger(__name__)


class Reconstruction(NamedTuple):
    t: np.ndarray
    y: np.ndarray


def bin_scale(bins: int, nfft: int) -> np.ndarray:
    """Weights for the one-sided inverse: 1 for DC and Nyquist, 2 elsewhere."""
    scale = np.full(bins, 2.0)
    if bins:
        scale[0] = 1.0
    if nfft % 2 == 0 and nfft // 2 < bins:
        scale[nfft // 2] = 1.0
    return scale


def reconstruct(real, imag, nfft: int, sr: float) -> Reconstruction:
    """
    Rebuild ``nfft`` time samples from one-sided ``real``/``imag`` arrays.

    The time axis is ``n / sr`` for n < nfft, which need not line up in
    duration with the signal that produced the spectrum when nfft differs
    from its length.

    Raises:
        InvalidParameterError: non-positive ``nfft`` or ``sr``.
        LengthMismatchError: ``real``/``imag`` lengths differ from ``nfft // 2``.
    """
    nfft = require_index("nfft", nfft, lower=1)
    sr = require_positive("sr", sr)
    real = as_samples(real, "real")
    imag = as_samples(imag, "imag")

    bins = bin_count(nfft)
    for name, arr in (("real", real), ("imag", imag)):
        if len(arr) != bins:
            raise LengthMismatchError(
                f"{name} has {len(arr)} bins but nfft={nfft} needs {bins}",
                expected=bins,
                actual=len(arr),
            )

    scale = bin_scale(bins, nfft)
    angles = phase_matrix(nfft, bins)
    y = ((scale * real) @ np.cos(angles) - (scale * imag) @ np.sin(angles)) / nfft

    logger.debug("Reconstructed %d samples from %d bins (sr=%s)", nfft, bins, sr)
    return Reconstruction(frozen(time_axis(sr, nfft)), frozen(y))
