"""Runtime settings from the environment (optionally a .env at the project root).

Only window and scheduling settings live here. The curve, glow and color
constants are part of the rendering and are not configurable.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent


@dataclass(frozen=True)
class Settings:
    width: int = 160
    height: int = 120
    scale: int = 4
    fps: int = 30
    workers: int = 1
    caption: str = ""


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read NEONHEART_* variables. With environ=None, .env is loaded first."""
    if environ is None:
        load_dotenv(ROOT / ".env")
        environ = os.environ
    defaults = Settings()
    return Settings(
        width=_positive_int(environ, "NEONHEART_WIDTH", defaults.width),
        height=_positive_int(environ, "NEONHEART_HEIGHT", defaults.height),
        scale=_positive_int(environ, "NEONHEART_SCALE", defaults.scale),
        fps=_positive_int(environ, "NEONHEART_FPS", defaults.fps),
        workers=_positive_int(environ, "NEONHEART_WORKERS", defaults.workers),
        caption=environ.get("NEONHEART_CAPTION", defaults.caption),
    )
