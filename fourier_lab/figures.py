"""Plotly figures for the Streamlit lab. Pure builders: data in, ``go.Figure`` out."""

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from fourier_lab.contributions import Contributions
from fourier_lab.reconstruction import Reconstruction
from fourier_lab.spectrum import Spectrum
from fourier_lab.waveform import Waveform

SINE_COLOR = "green"
COSINE_COLOR = "orange"
HIGHLIGHT_COLOR = "#d62728"
BASE_COLOR = "#1f77b4"


def sine_wave_figure(t: np.ndarray, y: np.ndarray, frequency: float, duration: float) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(x=t, y=y, mode="lines", name=f"{frequency:.1f}Hz Wave", line=dict(color="blue"))
    )
    fig.update_layout(
        title=f"{frequency:.1f}Hz Sine Wave",
        xaxis=dict(title="Time (s)", range=[0, duration]),
        yaxis=dict(range=[-1.5, 1.5]),
        height=300,
    )
    return fig


def complex_basis_figure(t: np.ndarray, frequency: float) -> go.Figure:
    """cos and -sin of one frequency: the real and imaginary parts of exp(-i*2*pi*f*t)."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(x=t, y=np.cos(2 * np.pi * frequency * t), name="Real part: cos", line=dict(color=COSINE_COLOR))
    )
    fig.add_trace(
        go.Scatter(x=t, y=-np.sin(2 * np.pi * frequency * t), name="Imaginary part: -sin", line=dict(color=SINE_COLOR))
    )
    fig.update_layout(title=f"e^(-i·2π·{frequency:.1f}·t)", xaxis_title="Time (s)", height=300)
    return fig


def waveform_figure(
    wave: Waveform,
    basis: tuple[np.ndarray, np.ndarray] | None = None,
    show_sine: bool = True,
    show_cosine: bool = True,
) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=wave.t, y=wave.y, mode="lines", name="Waveform", line=dict(color=BASE_COLOR)))
    if basis is not None:
        sine, cosine = basis
        if show_sine:
            fig.add_trace(go.Scatter(x=wave.t, y=sine, mode="lines", name="Sine Component", line=dict(color=SINE_COLOR)))
        if show_cosine:
            fig.add_trace(
                go.Scatter(x=wave.t, y=cosine, mode="lines", name="Cosine Component", line=dict(color=COSINE_COLOR))
            )
    fig.update_layout(
        title="Waveform with Components",
        xaxis_title="Time (s)",
        height=300,
        legend=dict(x=1, xanchor="right", y=1),
    )
    return fig


def contributions_figure(
    t: np.ndarray,
    contributions: Contributions,
    frequency: float,
    show_sine: bool = True,
    show_cosine: bool = True,
) -> go.Figure:
    fig = go.Figure()
    if show_sine:
        fig.add_trace(
            go.Scatter(x=t, y=contributions.imag, mode="lines", name="Sine Contribution", line=dict(color=SINE_COLOR))
        )
    if show_cosine:
        fig.add_trace(
            go.Scatter(
                x=t, y=contributions.real, mode="lines", name="Cosine Contribution", line=dict(color=COSINE_COLOR)
            )
        )
    fig.update_layout(
        title=f"Sample Contributions to {frequency:.2f} Hz",
        xaxis_title="Time (s)",
        yaxis_title="Contribution Value",
        height=300,
        legend=dict(x=1, xanchor="right", y=1),
    )
    return fig


def spectrum_figure(spectrum: Spectrum, selected_bin: int | None = None) -> go.Figure:
    """Magnitude bars over phase, with the selected bin drawn in red."""
    fig = make_subplots(rows=2, cols=1, shared_xaxes=True, subplot_titles=("Magnitude", "Phase"))
    fig.add_trace(go.Bar(x=spectrum.freq, y=spectrum.magnitude, name="|X(f)|", marker_color=BASE_COLOR), row=1, col=1)
    if selected_bin is not None and 0 <= selected_bin < len(spectrum.freq):
        fig.add_trace(
            go.Bar(
                x=[spectrum.freq[selected_bin]],
                y=[spectrum.magnitude[selected_bin]],
                name="Selected bin",
                marker_color=HIGHLIGHT_COLOR,
            ),
            row=1,
            col=1,
        )
    fig.add_trace(go.Scatter(x=spectrum.freq, y=spectrum.phase, name="∠X(f)", line=dict(color="#2ca02c")), row=2, col=1)
    fig.update_layout(
        title="Frequency Spectrum",
        xaxis2_title="Frequency (Hz)",
        yaxis2_title="Phase (rad)",
        barmode="overlay",
        hovermode="x",
        height=500,
    )
    return fig


def band_figure(spectrum: Spectrum, band: Spectrum) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(x=spectrum.freq, y=spectrum.magnitude, name="Full spectrum", marker_color=BASE_COLOR))
    kept = np.asarray(band.magnitude) > 0
    fig.add_trace(
        go.Bar(
            x=np.asarray(band.freq)[kept],
            y=np.asarray(band.magnitude)[kept],
            name="Selected band",
            marker_color=HIGHLIGHT_COLOR,
        )
    )
    fig.update_layout(title="Band selection", xaxis_title="Frequency (Hz)", yaxis_title="Magnitude", barmode="overlay")
    return fig


def reconstruction_figure(original: Waveform, reconstruction: Reconstruction) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=original.t, y=original.y, name="Original"))
    fig.add_trace(
        go.Scatter(x=reconstruction.t, y=reconstruction.y, name="Reconstructed", line=dict(color=HIGHLIGHT_COLOR))
    )
    fig.update_layout(title="Time-domain comparison", xaxis_title="Time (s)", yaxis_title="Amplitude")
    return fig
