"""
Fourier lab core: waveform generation, one-sided DFT, per-bin contributions
and inverse reconstruction, all by direct summation.
"""

from fourier_lab.contributions import Contributions, basis_components, compute_contributions
from fourier_lab.reconstruction import Reconstruction, reconstruct
from fourier_lab.spectrum import Spectrum, bin_frequency, compute_spectrum, peak_bins, select_band
from fourier_lab.utils.errors import FourierLabError, InvalidParameterError, LengthMismatchError
from fourier_lab.waveform import SHAPES, Waveform, generate_waveform

__all__ = [
    "Contributions",
    "FourierLabError",
    "InvalidParameterError",
    "LengthMismatchError",
    "Reconstruction",
    "SHAPES",
    "Spectrum",
    "Waveform",
    "basis_components",
    "bin_frequency",
    "compute_contributions",
    "compute_spectrum",
    "generate_waveform",
    "peak_bins",
    "reconstruct",
    "select_band",
]

__version__ = "0.1.0"
