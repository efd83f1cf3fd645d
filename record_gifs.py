#!/usr/bin/env python3
"""Record the heart animation to an animated GIF by rendering frames headlessly.

Usage: python record_gifs.py
Output: media/demo-*.gif
"""

import os
import traceback

# Prevent pygame from opening windows or printing its banner
os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

from pathlib import Path
from PIL import Image

from neonheart.canvas import Canvas
from neonheart.clock import FrameClock

ROOT = Path(__file__).parent
MEDIA_DIR = ROOT / "media"

# GIF settings
SCALE = 2          # Upscale factor
SIZE = (192, 192)  # Render resolution
DURATION_S = 4.0   # Seconds of animation per GIF
GIF_FPS = 20       # Frames per second in the GIF


def canvas_to_image(canvas: Canvas, scale: int = SCALE) -> Image.Image:
    """Convert a Canvas buffer to a scaled-up PIL Image."""
    img = Image.frombytes("RGB", (canvas.width, canvas.height), canvas.get_buffer())
    if scale > 1:
        img = img.resize(
            (canvas.width * scale, canvas.height * scale),
            Image.NEAREST,
        )
    return img


def render_gif(name: str, render_fn, fps: float = GIF_FPS,
               duration: float = DURATION_S, size: tuple[int, int] = SIZE,
               out_dir: Path = MEDIA_DIR, scale: int = SCALE) -> Path:
    """Render frames on a fixed-step clock and save as animated GIF."""
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / f"demo-{name}.gif"
    n_frames = max(1, int(duration * fps))
    clock = FrameClock()
    frames = []

    canvas = Canvas(*size)
    for i in range(n_frames):
        t = clock.time
        canvas.clear()
        render_fn(canvas, t, i)
        frames.append(canvas_to_image(canvas, scale))
        clock.advance(1.0 / fps)

    # Save as GIF (duration in ms per frame)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / fps),
        loop=0,
        optimize=True,
    )
    print(f"[record] Saved {out_path} ({len(frames)} frames, {duration}s)")
    return out_path


def record_neon_heart():
    from apps.neon_heart import render
    render_gif("neon-heart", render)


RECORDINGS = [
    ("neon-heart", record_neon_heart),
]


def main() -> None:
    print(f"[record] Recording demo GIFs to {MEDIA_DIR}/")

    for name, fn in RECORDINGS:
        try:
            print(f"[record] Recording {name}...")
            fn()
        except Exception as e:
            print(f"[record] ERROR recording {name}: {e}")
            traceback.print_exc()

    print(f"[record] Done! GIFs saved to {MEDIA_DIR}/")


if __name__ == "__main__":
    main()
