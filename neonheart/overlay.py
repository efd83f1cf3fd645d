"""Signature caption: white bitmap text with a neon halo per character."""

from neonheart.canvas import Canvas, Color

NEON_COLORS: list[Color] = [
    (0, 255, 255),    # cyan
    (255, 0, 255),    # magenta
    (0, 255, 0),      # lime
    (255, 255, 0),    # yellow
    (0, 0, 255),      # blue
    (255, 165, 0),    # orange
    (255, 192, 203),  # pink
    (255, 0, 0),      # red
    (0, 128, 0),      # green
    (238, 130, 238),  # violet
]
HALO_STRENGTH = 0.8
TEXT_COLOR: Color = (255, 255, 255)

_NEIGHBOURS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


def _brighten(canvas: Canvas, x: int, y: int, color: Color) -> None:
    current = canvas.get(x, y)
    canvas.set(x, y, tuple(max(c, n) for c, n in zip(current, color)))


def draw_caption(canvas: Canvas, text: str, margin: int = 2) -> None:
    """Draw text in the bottom-left corner, halos first so glyphs stay on top.

    Characters that would run past the right margin are dropped.
    """
    y = canvas.height - margin - 5
    x = margin
    while text and x + Canvas.text_width(text) > canvas.width - margin:
        text = text[:-1]
    if not text:
        return

    for i, ch in enumerate(text):
        base = NEON_COLORS[i % len(NEON_COLORS)]
        halo = tuple(int(c * HALO_STRENGTH) for c in base)
        for px, py in canvas.glyph_pixels(x + i * 4, y, ch):
            for dx, dy in _NEIGHBOURS:
                _brighten(canvas, px + dx, py + dy, halo)

    canvas.text(x, y, text, TEXT_COLOR)
