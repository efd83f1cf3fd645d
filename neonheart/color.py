"""Glow falloff, rainbow hue and tone mapping."""

import numpy as np

from neonheart.curve import frac

GLOW_RADIUS = 0.008
GLOW_INTENSITY = 1.3
MIN_DISTANCE = 1e-6     # Distance floor so a pixel on the curve stays finite
HUE_RATE = 0.1          # Hue wraps every 1 / HUE_RATE time units
GAMMA = 0.4545

_K = np.array([1.0, 2.0 / 3.0, 1.0 / 3.0, 3.0])


def glow(distance, radius: float = GLOW_RADIUS, intensity: float = GLOW_INTENSITY):
    """Inverse power-law brightness for a distance to the curve."""
    distance = np.maximum(np.asarray(distance, dtype=np.float64), MIN_DISTANCE)
    return (radius / distance) ** intensity


def hsv_to_rgb(h, s=1.0, v=1.0) -> np.ndarray:
    """HSV -> RGB using the branchless six-sector formula. All inputs in [0, 1].

    Broadcasts over h; returns shape (..., 3).
    """
    h = np.asarray(h, dtype=np.float64)[..., None]
    p = np.abs(frac(h + _K[:3]) * 6.0 - _K[3])
    mixed = np.clip(p - _K[0], 0.0, 1.0)
    return v * (_K[0] + (mixed - _K[0]) * s)


def rainbow_color(time: float) -> np.ndarray:
    """Fully saturated color whose hue advances linearly with time."""
    return hsv_to_rgb(frac(time * HUE_RATE), 1.0, 1.0)


def tonemap(color) -> np.ndarray:
    """Exposure (1 - e^-x) then gamma. Non-finite input counts as zero glow."""
    color = np.nan_to_num(np.asarray(color, dtype=np.float64),
                          nan=0.0, posinf=0.0, neginf=0.0)
    color = 1.0 - np.exp(-np.maximum(color, 0.0))
    return color ** GAMMA
