"""Exact distance from points to a quadratic Bezier segment.

The squared distance from P to B(t) has a cubic derivative in t. It is solved
in closed form so every query point costs the same: Cardano for one real
root, the trigonometric method for three.

All functions broadcast over query points shaped (..., 2).
"""

import numpy as np

# sqrt(3), kept at the precision the root selection was tuned with
SQRT3 = 1.732050808

# Below this |A - 2B + C|^2 the curve is treated as the straight line A..C
DEGENERATE_EPSILON = 1e-12


def _dot(u: np.ndarray, v: np.ndarray) -> np.ndarray:
    return np.sum(u * v, axis=-1)


def sd_segment(pos, A, B) -> np.ndarray:
    """Distance from pos to the line segment A..B."""
    pos = np.asarray(pos, dtype=np.float64)
    A = np.asarray(A, dtype=np.float64)
    B = np.asarray(B, dtype=np.float64)
    pa = pos - A
    ba = B - A
    length_sq = float(np.dot(ba, ba))
    if length_sq < DEGENERATE_EPSILON:
        return np.sqrt(_dot(pa, pa))
    h = np.clip(_dot(pa, ba) / length_sq, 0.0, 1.0)
    offset = pa - ba * h[..., None]
    return np.sqrt(_dot(offset, offset))


def sd_bezier(pos, A, B, C) -> np.ndarray:
    """Minimum distance from pos to the quadratic Bezier (A, B, C), t in [0, 1].

    Args:
        pos: Query point(s), shape (2,) or (..., 2).
        A: Start point.
        B: Control point.
        C: End point.

    Returns:
        Distances with the leading shape of pos.
    """
    pos = np.asarray(pos, dtype=np.float64)
    A = np.asarray(A, dtype=np.float64)
    B = np.asarray(B, dtype=np.float64)
    C = np.asarray(C, dtype=np.float64)

    a = B - A
    b = A - 2.0 * B + C
    c = a * 2.0
    d = A - pos

    bb = float(np.dot(b, b))
    if bb < DEGENERATE_EPSILON:
        return sd_segment(pos, A, C)

    kk = 1.0 / bb
    kx = kk * float(np.dot(a, b))
    ky = kk * (2.0 * float(np.dot(a, a)) + _dot(d, b)) / 3.0
    kz = kk * _dot(d, a)

    p = ky - kx * kx
    p3 = p * p * p
    q = kx * (2.0 * kx * kx - 3.0 * ky) + kz
    h = q * q + 4.0 * p3

    def sq_dist(t):
        t = t[..., None]
        qos = d + (c + b * t) * t
        return _dot(qos, qos)

    with np.errstate(invalid="ignore", divide="ignore"):
        # One real root
        sh = np.sqrt(np.maximum(h, 0.0))
        t = np.cbrt((sh - q) / 2.0) + np.cbrt((-sh - q) / 2.0) - kx
        one_root = sq_dist(np.clip(t, 0.0, 1.0))

        # Three real roots (only selected where h < 0, which implies p < 0)
        z = np.sqrt(np.maximum(-p, 0.0))
        denom = p * z * 2.0
        ratio = np.divide(q, denom, out=np.zeros_like(h), where=denom != 0.0)
        v = np.arccos(np.clip(ratio, -1.0, 1.0)) / 3.0
        m = np.cos(v)
        n = np.sin(v) * SQRT3
        three_roots = np.minimum(
            np.minimum(
                sq_dist(np.clip((m + m) * z - kx, 0.0, 1.0)),
                sq_dist(np.clip((-n - m) * z - kx, 0.0, 1.0)),
            ),
            sq_dist(np.clip((n - m) * z - kx, 0.0, 1.0)),
        )

    return np.sqrt(np.where(h >= 0.0, one_root, three_roots))
