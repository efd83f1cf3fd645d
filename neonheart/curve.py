"""Parametric heart outline sampled into a scrolling window of Bezier segments."""

import numpy as np

from neonheart.bezier import sd_bezier

POINT_COUNT = 8
SCROLL_SPEED = -0.5     # Negative: the window slides backwards along the outline
SEGMENT_LENGTH = 0.25   # Curve-parameter spacing between consecutive samples
SCROLL_TURN = 6.28      # frac(SCROLL_SPEED * t) is stretched over one turn


def frac(x):
    """Fractional part in [0, 1), also for negative x."""
    return x - np.floor(x)


def heart_position(u) -> np.ndarray:
    """Point(s) on the classic heart curve for curve parameter u.

    x = 16 sin^3(u), y = -(13 cos u - 5 cos 2u - 2 cos 3u - cos 4u).
    Returns shape (..., 2).
    """
    u = np.asarray(u, dtype=np.float64)
    s = np.sin(u)
    x = 16.0 * s * s * s
    y = -(13.0 * np.cos(u) - 5.0 * np.cos(2.0 * u)
          - 2.0 * np.cos(3.0 * u) - np.cos(4.0 * u))
    return np.stack([x, y], axis=-1)


def sample_window(time: float, phase: float, count: int = POINT_COUNT) -> np.ndarray:
    """Evenly spaced samples of the heart, scrolled by time. Shape (count, 2)."""
    scroll = frac(SCROLL_SPEED * time) * SCROLL_TURN
    u = phase + np.arange(count, dtype=np.float64) * SEGMENT_LENGTH + scroll
    return heart_position(u)


def segment_distance(pos, time: float, phase: float, scale: float) -> np.ndarray:
    """Minimum distance from pos to the piecewise-Bezier heart instance.

    Each sample is the control point of one quadratic segment running between
    the midpoints on either side of it. The first segment starts and ends at
    midpoint(p0, p1).
    """
    points = sample_window(time, phase)

    c = (points[0] + points[1]) / 2.0
    dist = None
    for i in range(len(points) - 1):
        c_prev = c
        c = (points[i] + points[i + 1]) / 2.0
        d = sd_bezier(pos, scale * c_prev, scale * points[i], scale * c)
        dist = d if dist is None else np.minimum(dist, d)
    return np.maximum(0.0, dist)
