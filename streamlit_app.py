from __future__ import annotations

import numpy as np
import streamlit as st
from streamlit_plotly_events import plotly_events

from fourier_lab import (
    SHAPES,
    basis_components,
    bin_frequency,
    compute_contributions,
    compute_spectrum,
    generate_waveform,
    peak_bins,
    reconstruct,
    select_band,
)
from fourier_lab import config, figures
from fourier_lab.utils.logging import get_logger, setup_logging

st.set_page_config(page_title="Fourier Visualizer", layout="wide")
setup_logging(level=config.LOG_LEVEL, log_format=config.LOG_FORMAT)
logger = get_logger("streamlit_app")

SHAPE_DESCRIPTIONS = {
    "sine": "Pure sines: each component lands in exactly one bin.",
    "triangle": "Triangle waves carry odd harmonics that fall off as 1/n², so the extra peaks fade quickly.",
    "square": "Square waves carry odd harmonics that fall off as 1/n, so peaks at 30, 50, 70 Hz… stay visible.",
}


def ensure_session_state():
    if "selected_bin" not in st.session_state:
        st.session_state.selected_bin = config.DEFAULT_BIN


def clamp_bin(k: int, bins: int) -> int:
    return int(min(max(k, 0), bins - 1))


ensure_session_state()

# -----------------------------
# Sidebar Signal Controls
# -----------------------------
with st.sidebar:
    st.header("Signal")
    st.info(
        f"The waveform is a fixed {config.PRIMARY_FREQ:.0f} Hz component plus a {config.SECONDARY_FREQ:.0f} Hz "
        "component whose amplitude you control."
    )
    shape = st.selectbox(
        "Waveform shape",
        options=list(SHAPES.keys()),
        index=list(SHAPES.keys()).index(config.DEFAULT_SHAPE),
    )
    st.caption(SHAPE_DESCRIPTIONS[shape])

    amp20 = st.slider(
        f"{config.SECONDARY_FREQ:.0f}Hz Amplitude",
        min_value=config.AMPLITUDE_RANGE[0],
        max_value=config.AMPLITUDE_RANGE[1],
        value=0.0,
        step=config.AMPLITUDE_STEP,
    )
    st.caption("At zero the spectrum shows a single peak; raise it to watch a second peak grow at 20 Hz.")

    nfft = st.select_slider(
        "Transform length (nfft)",
        options=list(config.NFFT_CHOICES),
        value=config.DEFAULT_NFFT,
        help="Longer than the signal zero-pads (finer bins); shorter truncates the signal.",
    )
    st.caption("Zero padding interpolates the spectrum but does not add new frequency information.")

# -----------------------------
# Shared Pipeline
# -----------------------------
sr = config.DEFAULT_SR
wave = generate_waveform(sr, config.DEFAULT_DURATION, shape, amp20)
n_samples = len(wave.y)
num_bins = n_samples // 2
spectrum = compute_spectrum(wave.y, sr, nfft)
logger.debug("Pipeline refreshed: shape=%s amp20=%.2f nfft=%d", shape, amp20, nfft)

tab_sine, tab_complex, tab_fft, tab_recon = st.tabs(
    ["1. Sine Wave Explanation", "2. Complex Explanation", "3. FFT Visualizer", "4. Reconstruction"]
)

# -----------------------------
# Tab 1: Single Sine
# -----------------------------
with tab_sine:
    st.subheader("A single-frequency sine wave")
    sine_freq = st.slider(
        "Wave Frequency (Hz)",
        min_value=config.EXPLAIN_FREQ_RANGE[0],
        max_value=config.EXPLAIN_FREQ_RANGE[1],
        value=config.PRIMARY_FREQ,
        step=config.EXPLAIN_FREQ_STEP,
    )
    explain_t = np.arange(int(config.EXPLAIN_SR * config.EXPLAIN_DURATION)) / config.EXPLAIN_SR
    explain_sine, _ = basis_components(explain_t, sine_freq)
    st.plotly_chart(
        figures.sine_wave_figure(explain_t, explain_sine, sine_freq, config.EXPLAIN_DURATION),
        use_container_width=True,
    )
    st.markdown(
        f"x(t) = sin(2π · {sine_freq:.1f} t) oscillates {sine_freq:.1f} times per second.\n\n"
        "To test whether a frequency is present, hold a template sine of that frequency against the signal, "
        "multiply them sample by sample and add up the products. A large sum means the frequency is there; "
        "a sum near zero means it is not."
    )

# -----------------------------
# Tab 2: Complex Template
# -----------------------------
with tab_complex:
    st.subheader("Why two templates per frequency")
    st.info(
        "A sine template misses a component that happens to be shifted by a quarter cycle. Matching against "
        "cos and −sin together, i.e. the real and imaginary parts of e^(−i2πft), catches every phase."
    )
    st.plotly_chart(figures.complex_basis_figure(wave.t, config.PRIMARY_FREQ), use_container_width=True)
    st.latex(r"X[k] = \sum_{n=0}^{N-1} y[n]\cos\left(\frac{2\pi kn}{N}\right) - i\sum_{n=0}^{N-1} y[n]\sin\left(\frac{2\pi kn}{N}\right)")
    st.caption("Magnitude √(Re² + Im²) says how much of the frequency is present; atan2(Im, Re) gives its phase.")

# -----------------------------
# Tab 3: FFT Visualizer
# -----------------------------
with tab_fft:
    st.session_state.selected_bin = clamp_bin(st.session_state.selected_bin, num_bins)
    selected_bin = st.slider(
        "Selected frequency bin",
        min_value=0,
        max_value=num_bins - 1,
        value=st.session_state.selected_bin,
        step=1,
    )
    st.session_state.selected_bin = selected_bin
    selected_hz = bin_frequency(selected_bin, sr, n_samples)
    st.write(f"Selected Frequency: **{selected_hz:.2f} Hz** (Index: {selected_bin})")

    col_sine, col_cos = st.columns(2)
    with col_sine:
        show_sine = st.checkbox("Show Sine Component", value=True)
    with col_cos:
        show_cosine = st.checkbox("Show Cosine Component", value=True)

    basis = basis_components(wave.t, selected_hz)
    contributions = compute_contributions(wave.y, selected_bin)

    st.plotly_chart(figures.waveform_figure(wave, basis, show_sine, show_cosine), use_container_width=True)
    st.plotly_chart(
        figures.contributions_figure(wave.t, contributions, selected_hz, show_sine, show_cosine),
        use_container_width=True,
    )
    st.caption(
        f"Sum of cosine contributions = {contributions.real.sum():.3f}, "
        f"sum of sine contributions = {contributions.imag.sum():.3f}. "
        "Those two sums are exactly the real and imaginary parts of this bin."
    )

    highlight = int(round(selected_hz * nfft / sr))
    spectrum_events = plotly_events(
        figures.spectrum_figure(spectrum, highlight if highlight < len(spectrum.freq) else None),
        click_event=True,
        hover_event=False,
        select_event=False,
        key="spectrum_events",
        override_height=500,
    )
    st.caption("Click a bar to select that frequency.")
    if spectrum_events:
        clicked_hz = spectrum_events[0].get("x", selected_hz)
        clicked_bin = clamp_bin(int(round(clicked_hz * n_samples / sr)), num_bins)
        if clicked_bin != selected_bin:
            st.session_state.selected_bin = clicked_bin
            st.rerun()

    peaks = peak_bins(spectrum, count=5, threshold=0.05)
    if peaks:
        st.success("Strongest peaks: " + ", ".join(f"{spectrum.freq[k]:.2f} Hz" for k in peaks))

# -----------------------------
# Tab 4: Reconstruction
# -----------------------------
with tab_recon:
    st.info("Keep a band of the one-sided spectrum and run the inverse transform to see what survives.")
    nyquist = sr / 2
    low, high = st.slider(
        "Band to keep (Hz)",
        min_value=0.0,
        max_value=float(nyquist),
        value=(0.0, float(nyquist)),
        step=float(sr) / nfft,
    )
    band = select_band(spectrum, low, high)
    rebuilt = reconstruct(band.real, band.imag, nfft, sr)

    st.plotly_chart(figures.band_figure(spectrum, band), use_container_width=True)
    st.plotly_chart(figures.reconstruction_figure(wave, rebuilt), use_container_width=True)
    if nfft == n_samples and low == 0.0 and high == nyquist:
        error = float(np.max(np.abs(rebuilt.y - wave.y)))
        st.caption(f"Full band at matching length: max reconstruction error {error:.2e}.")
    else:
        st.caption(
            "The inverse always produces nfft samples. With padding or truncation, or with bins removed, "
            "the result only approximates the original."
        )
