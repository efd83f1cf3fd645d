"""Glowing rainbow heart renderer: distance-field core plus a pygame preview."""

from neonheart.canvas import Canvas
from neonheart.clock import FrameClock
from neonheart.compositor import FrameContext, render_frame
from neonheart.run import run

__all__ = ["Canvas", "FrameClock", "FrameContext", "render_frame", "run"]
