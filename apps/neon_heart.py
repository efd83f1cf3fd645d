"""Neon Heart - two rainbow hearts chasing each other around a glowing outline."""

from concurrent.futures import ThreadPoolExecutor

from neonheart import Canvas, FrameContext, render_frame, run
from neonheart.config import load_settings
from neonheart.overlay import draw_caption

SETTINGS = load_settings()

# Shared by every frame; only created when rendering is split across threads
_pool: ThreadPoolExecutor | None = None


def _get_pool(workers: int) -> ThreadPoolExecutor | None:
    global _pool
    if workers < 2:
        return None
    if _pool is None:
        _pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="neonheart")
    return _pool


def render(canvas: Canvas, t: float, frame: int) -> None:
    ctx = FrameContext(time=t, width=canvas.width, height=canvas.height)
    pool = _get_pool(SETTINGS.workers)
    canvas.blit(render_frame(ctx, workers=SETTINGS.workers, pool=pool))
    draw_caption(canvas, SETTINGS.caption)


if __name__ == "__main__":
    try:
        run(render, fps=SETTINGS.fps, title="Neon Heart", scale=SETTINGS.scale,
            width=SETTINGS.width, height=SETTINGS.height)
    finally:
        if _pool is not None:
            _pool.shutdown()
