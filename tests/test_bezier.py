import numpy as np
import pytest

from neonheart.bezier import sd_bezier, sd_segment


def _sampled_distance(pos, A, B, C, steps=20001):
    t = np.linspace(0.0, 1.0, steps)[:, None]
    curve = (1 - t) ** 2 * np.asarray(A) + 2 * t * (1 - t) * np.asarray(B) + t ** 2 * np.asarray(C)
    return np.min(np.linalg.norm(curve - np.asarray(pos), axis=1))


CURVES = [
    ((0.0, 0.0), (1.0, 2.0), (2.0, 0.0)),
    ((-1.0, -1.0), (3.0, 0.5), (0.0, 2.0)),
    ((0.2, 0.1), (0.0, -0.4), (-0.3, 0.3)),
]


@pytest.mark.parametrize("A, B, C", CURVES)
def test_matches_dense_sampling(A, B, C):
    rng = np.random.default_rng(7)
    queries = rng.uniform(-3.0, 3.0, size=(200, 2))
    exact = sd_bezier(queries, A, B, C)
    for q, d in zip(queries, exact):
        assert d == pytest.approx(_sampled_distance(q, A, B, C), rel=1e-4, abs=1e-6)


def test_three_root_case_inside_the_bend():
    # A point inside a sharp bend sees two competing local minima
    A, B, C = (-1.0, 0.0), (0.0, 4.0), (1.0, 0.0)
    pos = (0.0, 1.2)
    assert sd_bezier(pos, A, B, C) == pytest.approx(
        _sampled_distance(pos, A, B, C), rel=1e-4)


def test_endpoints_are_on_curve():
    A, B, C = (0.0, 0.0), (1.0, 2.0), (2.0, 0.0)
    assert sd_bezier(A, A, B, C) == pytest.approx(0.0, abs=1e-7)
    assert sd_bezier(C, A, B, C) == pytest.approx(0.0, abs=1e-7)


def test_scalar_query_returns_scalar_shape():
    d = sd_bezier((0.5, 0.5), (0.0, 0.0), (1.0, 2.0), (2.0, 0.0))
    assert np.ndim(d) == 0


def test_grid_query_keeps_leading_shape():
    pos = np.zeros((4, 5, 2))
    d = sd_bezier(pos, (0.0, 1.0), (1.0, 2.0), (2.0, 1.0))
    assert d.shape == (4, 5)
    assert np.all(np.isfinite(d))


def test_straight_line_control_falls_back_to_segment():
    # B is the midpoint of A and C: A - 2B + C == 0
    A, B, C = (0.0, 0.0), (1.0, 0.0), (2.0, 0.0)
    assert sd_bezier((1.0, 3.0), A, B, C) == pytest.approx(3.0)
    assert sd_bezier((-4.0, 0.0), A, B, C) == pytest.approx(4.0)
    assert sd_bezier((5.0, 4.0), A, B, C) == pytest.approx(5.0)


def test_collapsed_curve_is_point_distance():
    P = (1.0, 1.0)
    assert sd_bezier((4.0, 5.0), P, P, P) == pytest.approx(5.0)


def test_segment_distance():
    assert sd_segment((0.5, 2.0), (0.0, 0.0), (1.0, 0.0)) == pytest.approx(2.0)
    assert sd_segment((3.0, 4.0), (0.0, 0.0), (0.0, 0.0)) == pytest.approx(5.0)
