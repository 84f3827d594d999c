"""Shared fixtures for the Fourier lab tests."""

import numpy as np
import pytest

from fourier_lab import generate_waveform

SR = 256


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


@pytest.fixture
def sine_wave():
    """10 Hz sine, 256 samples at 256 Hz."""
    return generate_waveform(SR, 1.0, "sine", 0.0)


@pytest.fixture
def two_tone_wave():
    """10 Hz + 20 Hz sines of equal amplitude."""
    return generate_waveform(SR, 1.0, "sine", 1.0)


@pytest.fixture
def square_wave():
    return generate_waveform(SR, 1.0, "square", 0.0)


@pytest.fixture
def band_limited(rng):
    """Factory for random real signals whose spectrum sits entirely below bin n // 2."""

    def make(n):
        idx = np.arange(n)
        y = np.full(n, rng.normal())
        for k in range(1, n // 2):
            amp, phase = rng.normal(), rng.uniform(-np.pi, np.pi)
            y += amp * np.cos(2 * np.pi * k * idx / n + phase)
        return y

    return make
