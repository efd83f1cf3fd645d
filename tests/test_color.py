import colorsys

import numpy as np
import pytest

from neonheart.color import (
    GLOW_INTENSITY,
    GLOW_RADIUS,
    MIN_DISTANCE,
    glow,
    hsv_to_rgb,
    rainbow_color,
    tonemap,
)


def test_glow_is_one_at_radius():
    assert glow(GLOW_RADIUS) == pytest.approx(1.0)


def test_glow_follows_inverse_power_law():
    assert glow(2 * GLOW_RADIUS) == pytest.approx(0.5 ** GLOW_INTENSITY)
    d = np.array([0.01, 0.1, 1.0])
    assert np.all(np.diff(glow(d)) < 0)


def test_glow_at_zero_distance_is_finite():
    g = glow(0.0)
    assert np.isfinite(g)
    assert g == pytest.approx((GLOW_RADIUS / MIN_DISTANCE) ** GLOW_INTENSITY)


@pytest.mark.parametrize("h", [0.0, 0.05, 1 / 6, 0.3, 0.5, 0.66, 0.8, 0.99])
@pytest.mark.parametrize("s, v", [(1.0, 1.0), (0.5, 0.8), (0.0, 0.3)])
def test_hsv_matches_colorsys(h, s, v):
    assert hsv_to_rgb(h, s, v) == pytest.approx(colorsys.hsv_to_rgb(h, s, v), abs=1e-12)


def test_hsv_broadcasts_over_hue():
    rgb = hsv_to_rgb(np.array([0.0, 1 / 3, 2 / 3]))
    assert rgb == pytest.approx(np.eye(3))


def test_rainbow_repeats_every_ten_time_units():
    for t in [0.0, 1.25, 3.7, 123.4]:
        assert rainbow_color(t + 10.0) == pytest.approx(rainbow_color(t), abs=1e-9)


def test_rainbow_is_red_at_time_zero():
    assert rainbow_color(0.0) == pytest.approx([1.0, 0.0, 0.0])


def test_tonemap_bounded_and_increasing():
    x = np.linspace(0.0, 20.0, 2001)
    y = tonemap(x)
    assert y[0] == 0.0
    assert np.all((y >= 0.0) & (y < 1.0))
    assert np.all(np.diff(y) > 0)


def test_tonemap_scrubs_non_finite_values():
    y = tonemap(np.array([np.nan, np.inf, -np.inf, -2.0]))
    assert y == pytest.approx(np.zeros(4))
