"""Tests for label font size fitting."""

import pytest

from mindplot.text import TextFit, estimate_text_width, fit_text


def proportional(size, text):
    return size * 0.6


def test_fits_box_height():
    fitted = fit_text(proportional, 100, 40, "label", min_size=4, max_size=500)
    assert fitted.height <= 40
    assert fitted.width <= 100
    assert fitted.height == pytest.approx(39.84375)
    assert fitted.width == pytest.approx(39.84375 * 0.6)


def test_fits_box_width():
    def per_char(size, text):
        return len(text) * size * 0.6

    fitted = fit_text(per_char, 30, 100, "hello")
    assert fitted.width <= 30
    assert 9 < fitted.height <= 10


def test_measures_exactly_iterations_plus_one_times():
    calls = []

    def measure(size, text):
        calls.append(size)
        return size * 0.6

    fit_text(measure, 100, 40, "label", iterations=10)
    assert len(calls) == 11

    calls.clear()
    fit_text(measure, 100, 40, "label", iterations=3)
    assert len(calls) == 4


def test_first_probe_is_midpoint():
    probes = []

    def measure(size, text):
        probes.append(size)
        return 0.0

    fit_text(measure, 100, 40, "label", min_size=4, max_size=500)
    assert probes[0] == 252


def test_text_that_never_fits_clamps_to_min_size():
    fitted = fit_text(proportional, 100, 2, "label", min_size=4, max_size=500)
    assert fitted == TextFit(width=4 * 0.6, height=4)


def test_zero_iterations_returns_min_size():
    fitted = fit_text(proportional, 100, 40, "label", iterations=0)
    assert fitted.height == 4


def test_measure_receives_text():
    seen = set()

    def measure(size, text):
        seen.add(text)
        return 1.0

    fit_text(measure, 100, 40, "marko")
    assert seen == {"marko"}


def test_estimate_text_width():
    assert estimate_text_width("abcd", 10, 0.5) == 20
    assert estimate_text_width("", 10) == 0
