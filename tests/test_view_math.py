import pytest

from rim.config import SCALE_MAX, SCALE_MIN
from rim.view_math import (
    in_scale_band,
    scale_for_level,
    scaled_dimensions,
    zoom_in_offset,
    zoom_out_offset,
)


def test_scale_for_level():
    assert scale_for_level(0) == 1.0
    assert scale_for_level(1) == pytest.approx(1 / 1.2)
    assert scale_for_level(-2) == pytest.approx(1.44)


def test_scale_strictly_decreases_with_level():
    scales = [scale_for_level(level) for level in range(-19, 31)]
    assert all(a > b for a, b in zip(scales, scales[1:]))
    assert all(in_scale_band(s) for s in scales)


def test_band_edges():
    assert in_scale_band(SCALE_MIN)
    assert not in_scale_band(SCALE_MAX)
    assert not in_scale_band(scale_for_level(31))
    assert not in_scale_band(scale_for_level(-20))


def test_scaled_dimensions_rounds_half_up():
    assert scaled_dimensions((800, 600), 1.0) == (800, 600)
    assert scaled_dimensions((800, 600), 1.2) == (667, 500)
    assert scaled_dimensions((5, 3), 2.0) == (3, 2)


def test_zoom_in_offset():
    assert zoom_in_offset((100, 50), (800, 600), 5) == (100, 70)
    assert zoom_in_offset((0, 0), (0, 0), 5) == (0, 0)


def test_zoom_out_offset():
    assert zoom_out_offset((100, 50), (800, 600), 5) == (-83, 0)
    assert zoom_out_offset((700, 500), (800, 600), 5) == (-183, -133)


def test_zoom_out_offset_clamps_near_origin():
    # half extent is 80 px wide: anything at or below contributes nothing
    assert zoom_out_offset((80, 60), (800, 600), 5) == (0, 0)
    assert zoom_out_offset((86, 66), (800, 600), 5) == (-81, -61)
