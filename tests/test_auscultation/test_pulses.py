"""Tests for the sinc pulse shaper and overlay helpers."""

import numpy as np
import pytest

from src.auscultation.pulses import (
    generate_pulse,
    half_sine_window,
    overlay,
    reversed_half_sine_window,
)


class TestGeneratePulse:
    def test_length_is_floor_of_fs_times_duration(self):
        assert len(generate_pulse(50.0, 0.1, 1000.0, 0.8)) == 100
        assert len(generate_pulse(50.0, 0.0999, 1000.0, 0.8)) == 99

    def test_peak_at_centre_equals_amplitude(self):
        pulse = generate_pulse(50.0, 0.125, 1000.0, 0.8)
        assert len(pulse) == 125
        assert pulse[62] == pytest.approx(0.8)
        assert np.max(np.abs(pulse)) == pytest.approx(0.8)

    def test_symmetric(self):
        pulse = generate_pulse(60.0, 0.05, 1000.0, 0.5)
        np.testing.assert_allclose(pulse, pulse[::-1], atol=1e-12)

    def test_at_least_one_sample(self):
        assert len(generate_pulse(40.0, 0.0, 1000.0, 0.25)) == 1

    def test_amplitude_scales_linearly(self):
        a = generate_pulse(45.0, 0.04, 1000.0, 1.0)
        b = generate_pulse(45.0, 0.04, 1000.0, 0.22)
        np.testing.assert_allclose(b, 0.22 * a)


class TestOverlay:
    def test_adds_in_place(self):
        buf = np.zeros(10)
        overlay(buf, np.ones(3), 2)
        np.testing.assert_array_equal(buf, [0, 0, 1, 1, 1, 0, 0, 0, 0, 0])

    def test_accumulates(self):
        buf = np.ones(4)
        overlay(buf, np.ones(4), 0)
        np.testing.assert_array_equal(buf, [2, 2, 2, 2])

    def test_clipped_at_end(self):
        buf = np.zeros(10)
        overlay(buf, np.ones(5), 8)
        assert buf.sum() == 2
        assert buf[8] == buf[9] == 1

    def test_start_past_end_is_noop(self):
        buf = np.zeros(5)
        overlay(buf, np.ones(5), 5)
        assert not buf.any()

    def test_negative_start_clipped(self):
        buf = np.zeros(5)
        overlay(buf, np.arange(1.0, 5.0), -2)
        np.testing.assert_array_equal(buf, [3, 4, 0, 0, 0])


class TestWindows:
    def test_half_sine(self):
        np.testing.assert_allclose(
            half_sine_window(4), np.sin(np.pi * np.arange(4) / 4),
        )
        assert half_sine_window(4)[0] == 0.0

    def test_reversed_half_sine(self):
        w = reversed_half_sine_window(4)
        np.testing.assert_allclose(w, np.sin(np.pi * (4 - np.arange(4)) / 4))
        assert w[0] == pytest.approx(0.0, abs=1e-12)

    def test_empty(self):
        assert len(half_sine_window(0)) == 0
