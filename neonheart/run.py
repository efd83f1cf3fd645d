"""Main run loop - ties together Canvas, Simulator and FrameClock."""

from typing import Callable

from neonheart.canvas import Canvas
from neonheart.clock import FrameClock
from neonheart.simulator import Simulator

# Callback: fn(canvas, time_seconds, frame_number) -> None
RenderFn = Callable[[Canvas, float, int], None]


def run(render: RenderFn, fps: int = 30, title: str = "Neon Heart",
        scale: int = 4, width: int = 160, height: int = 120) -> None:
    """Runs the render loop until the window is closed or Ctrl-C.

    Args:
        render: Callback called each frame with (canvas, animation_time, frame_number).
                The canvas size can change between frames when the window is resized.
        fps: Frame-rate cap (default 30). Animation time follows the wall clock
             regardless of the rate actually achieved.
        title: Window title.
        scale: Window pixels per canvas pixel (default 4).
        width: Initial canvas width in pixels.
        height: Initial canvas height in pixels.
    """
    canvas = Canvas(width, height)
    sim = Simulator(canvas, scale=scale, title=title)
    clock = FrameClock()
    frame = 0

    print(f"[run] {title}: {width}x{height} x{scale} @ {fps} fps")
    try:
        while True:
            # Time is fixed before the frame is evaluated and read-only after
            t = clock.tick()
            render(canvas, t, frame)

            if not sim.update():
                break

            sim.tick(fps)
            frame += 1
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()
        print(f"[run] Stopped after {frame} frames ({clock.time:.1f}s)")
