"""Tests for per-sample bin contributions."""

import numpy as np
import pytest

from fourier_lab import InvalidParameterError, basis_components, compute_contributions, compute_spectrum


class TestComputeContributions:
    def test_lengths_follow_input(self, sine_wave):
        contributions = compute_contributions(sine_wave.y, 10)

        assert len(contributions.real) == 256
        assert len(contributions.imag) == 256

    def test_terms_match_closed_form(self, rng):
        y = rng.normal(size=20)
        real, imag = compute_contributions(y, 3)
        n = np.arange(20)

        np.testing.assert_allclose(real, y * np.cos(2 * np.pi * 3 * n / 20), atol=1e-12)
        np.testing.assert_allclose(imag, -y * np.sin(2 * np.pi * 3 * n / 20), atol=1e-12)

    @pytest.mark.parametrize("n", [16, 33, 64])
    def test_sums_equal_spectrum_bins(self, rng, n):
        y = rng.normal(size=n)
        spectrum = compute_spectrum(y, 10, n)

        for k in range(n // 2):
            contributions = compute_contributions(y, k)
            assert contributions.real.sum() == pytest.approx(spectrum.real[k], abs=1e-9)
            assert contributions.imag.sum() == pytest.approx(spectrum.imag[k], abs=1e-9)

    def test_matching_bin_accumulates_energy(self, sine_wave):
        contributions = compute_contributions(sine_wave.y, 10)

        assert np.all(contributions.imag <= 1e-12)
        assert contributions.imag.sum() == pytest.approx(-128.0, rel=1e-9)

    def test_unrelated_bin_cancels(self, sine_wave):
        contributions = compute_contributions(sine_wave.y, 13)

        assert abs(contributions.real.sum()) < 1e-9
        assert abs(contributions.imag.sum()) < 1e-9
        assert np.max(np.abs(contributions.imag)) > 0.5

    def test_dc_bin_is_the_samples(self):
        real, imag = compute_contributions([1.0, -2.0, 3.0, 0.5], 0)

        np.testing.assert_allclose(real, [1.0, -2.0, 3.0, 0.5])
        np.testing.assert_allclose(imag, 0.0, atol=1e-15)

    def test_result_is_read_only(self, sine_wave):
        contributions = compute_contributions(sine_wave.y, 10)

        with pytest.raises(ValueError):
            contributions.real[0] = 1.0


class TestValidation:
    @pytest.mark.parametrize("k", [-1, 128, 500])
    def test_rejects_out_of_range_bin(self, sine_wave, k):
        with pytest.raises(InvalidParameterError) as exc_info:
            compute_contributions(sine_wave.y, k)
        assert exc_info.value.parameter == "k"

    def test_rejects_non_integer_bin(self, sine_wave):
        with pytest.raises(InvalidParameterError):
            compute_contributions(sine_wave.y, 10.0)

    def test_empty_input_has_no_valid_bin(self):
        with pytest.raises(InvalidParameterError):
            compute_contributions([], 0)

    def test_single_sample_has_no_valid_bin(self):
        with pytest.raises(InvalidParameterError):
            compute_contributions([1.0], 0)


class TestBasisComponents:
    def test_templates(self):
        t = np.array([0.0, 0.25, 0.5])
        sine, cosine = basis_components(t, 1.0)

        np.testing.assert_allclose(sine, [0.0, 1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(cosine, [1.0, 0.0, -1.0], atol=1e-12)

    def test_rejects_non_finite_frequency(self):
        with pytest.raises(InvalidParameterError):
            basis_components(np.zeros(4), float("inf"))
