"""
Defaults and UI ranges for the Fourier lab.

The core never reads these; they are what the Streamlit app feeds it.
Logging can be tuned without code changes:

- FOURIER_LAB_LOG_LEVEL  : DEBUG, INFO, WARNING, ... (default INFO)
- FOURIER_LAB_LOG_FORMAT : "text" or "json" (default text)
"""

import os

# === Composite waveform ===
DEFAULT_SR = 256          # samples per second
DEFAULT_DURATION = 1.0    # seconds
PRIMARY_FREQ = 10.0       # Hz, fixed amplitude 1
SECONDARY_FREQ = 20.0     # Hz, scaled by the amplitude slider
DEFAULT_SHAPE = "sine"
AMPLITUDE_RANGE = (0.0, 1.0)
AMPLITUDE_STEP = 0.01

# === Transform ===
NFFT_CHOICES = (32, 64, 128, 256, 512, 1024)
DEFAULT_NFFT = 256
DEFAULT_BIN = 10          # bin 10 is 10 Hz at the default sr/nfft

# === Sine wave explanation tab ===
EXPLAIN_SR = 100
EXPLAIN_DURATION = 2.0
EXPLAIN_FREQ_RANGE = (1.0, 50.0)
EXPLAIN_FREQ_STEP = 0.5

# === Logging ===
LOG_LEVEL = os.environ.get("FOURIER_LAB_LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get("FOURIER_LAB_LOG_FORMAT", "text")
