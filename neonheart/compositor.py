"""Per-pixel frame evaluation: heart instances -> glow -> tone-mapped RGB."""

from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np

from neonheart.color import glow, rainbow_color, tonemap
from neonheart.curve import segment_distance

PHASE_OFFSETS = (0.0, 3.4)   # One heart instance per curve-parameter offset
VIEWPORT_SCALE = 0.000015    # Curve units -> screen units, per pixel of height
Y_OFFSET = 0.02


@dataclass(frozen=True)
class FrameContext:
    """Everything one frame's evaluation reads. Built once per frame."""

    time: float
    width: int
    height: int

    @property
    def scale(self) -> float:
        return VIEWPORT_SCALE * self.height


def screen_positions(width: int, height: int, rows: slice = slice(None)) -> np.ndarray:
    """Aspect-corrected, centred positions for every pixel. Shape (rows, width, 2).

    Row 0 is the top of the image. Pixel centres sit at +0.5, matching a
    fragment shader whose origin is the bottom-left corner.
    """
    row_idx = np.arange(height, dtype=np.float64)[rows]
    col_idx = np.arange(width, dtype=np.float64)
    uv_x = (col_idx + 0.5) / width
    uv_y = (height - row_idx - 0.5) / height

    x = 0.5 - uv_x
    y = (0.5 - uv_y) / (width / height) + Y_OFFSET
    xx, yy = np.meshgrid(x, y)
    return np.stack([xx, yy], axis=-1)


def shade(pos, time: float, scale: float, phases=PHASE_OFFSETS) -> np.ndarray:
    """Final display color for position(s) pos. Shape (..., 3), values in [0, 1]."""
    pos = np.asarray(pos, dtype=np.float64)
    rainbow = rainbow_color(time)
    col = np.zeros(pos.shape[:-1] + (3,))
    for phase in phases:
        dist = segment_distance(pos, time, phase, scale)
        col += glow(dist)[..., None] * rainbow
    return tonemap(col)


def render_frame(ctx: FrameContext, phases=PHASE_OFFSETS, workers: int = 1,
                 pool: Executor | None = None) -> np.ndarray:
    """Evaluate every pixel of a frame. Returns (height, width, 3) floats in [0, 1].

    With workers > 1 the image is split into horizontal bands evaluated on
    pool, or on a short-lived thread pool when none is given. Bands only read
    ctx, so no locking is needed.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    def band(rows: slice) -> np.ndarray:
        pos = screen_positions(ctx.width, ctx.height, rows)
        return shade(pos, ctx.time, ctx.scale, phases)

    if workers == 1 or ctx.height < 2:
        return band(slice(None))

    bounds = np.linspace(0, ctx.height, min(workers, ctx.height) + 1).astype(int)
    slices = [slice(lo, hi) for lo, hi in zip(bounds[:-1], bounds[1:])]
    if pool is not None:
        return np.concatenate(list(pool.map(band, slices)), axis=0)
    with ThreadPoolExecutor(max_workers=workers) as temp_pool:
        return np.concatenate(list(temp_pool.map(band, slices)), axis=0)
