"""Tests for piecewise-linear length normalisation."""

import numpy as np
import pytest

from src.auscult_system.exceptions import InvalidParameterError
from src.auscult_system.schemas import Waveform
from src.auscultation.resample import resample, resample_waveform


@pytest.fixture
def waveform():
    rng = np.random.default_rng(42)
    t = np.linspace(0, 2.0, 2001)
    return t, rng.normal(0, 1, 2001)


class TestResample:
    def test_triangle(self):
        out = resample([0, 1, 2], [0, 10, 0], 5)
        np.testing.assert_allclose(out, [0, 5, 10, 5, 0])

    @pytest.mark.parametrize("n", [1, 2, 100, 1000, 20000])
    def test_output_length(self, waveform, n):
        t, y = waveform
        assert len(resample(t, y, n)) == n

    def test_single_sample_is_first_value(self, waveform):
        t, y = waveform
        np.testing.assert_array_equal(resample(t, y, 1), [y[0]])

    def test_identity_at_native_length(self, waveform):
        t, y = waveform
        np.testing.assert_array_equal(resample(t, y, len(y)), y)

    def test_endpoints_preserved(self, waveform):
        t, y = waveform
        out = resample(t, y, 37)
        assert out[0] == y[0]
        assert out[-1] == y[-1]

    def test_ramp_stays_linear(self):
        y = np.arange(11, dtype=float)
        out = resample(np.arange(11), y, 21)
        np.testing.assert_allclose(out, np.linspace(0, 10, 21))

    def test_single_input_sample_upsampled(self):
        np.testing.assert_array_equal(resample([0.0], [3.0], 4), [3.0, 3.0, 3.0, 3.0])

    def test_accepts_lists(self):
        out = resample([0, 1], [1.0, 2.0], 3)
        assert isinstance(out, np.ndarray)


class TestResampleErrors:
    def test_zero_target(self):
        with pytest.raises(InvalidParameterError):
            resample([0, 1], [0, 1], 0)

    def test_empty_input(self):
        with pytest.raises(InvalidParameterError):
            resample([], [], 5)

    def test_length_mismatch(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            resample([0, 1, 2], [0, 1], 5)
        assert exc_info.value.name == "t"


class TestResampleWaveform:
    def test_wraps_resample(self, waveform):
        t, y = waveform
        wave = Waveform(t=t, y=y, fs=1000.0)
        np.testing.assert_array_equal(resample_waveform(wave, 50), resample(t, y, 50))

    def test_waveform_rejects_mismatched_arrays(self):
        with pytest.raises(ValueError):
            Waveform(t=np.zeros(3), y=np.zeros(2), fs=1.0)
