from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

# ----- Board & grid -----
CANVAS_SIZE = 400                       # logical units
CELL_SIZE = 20
TILE_COUNT = CANVAS_SIZE // CELL_SIZE   # 20x20 cells

# ----- Timing -----
TICK_MS = 500
INDICATOR_MS = 600
SCORE_PULSE_MS = 300

# ----- Rules -----
FOOD_SCORE = 10
MIN_SWIPE_DISTANCE = 40  # px

# ----- Storage -----
HIGH_SCORE_KEY = "snake-high-score"
DEFAULT_STORAGE = Path.home() / ".swipe_snake" / "storage.json"

# ----- Colors -----
BG         = (15, 23, 42)
HEAD       = (0x10, 0xB9, 0x81)
BODY       = (0x05, 0x96, 0x69)
FOOD       = (0xF4, 0x3F, 0x5E)
EYE        = (255, 255, 255)
TEXT       = (226, 232, 240)
TEXT_DIM   = (148, 163, 184)
ACCENT     = (250, 204, 21)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)


def _env_int(name: str, default: Optional[int], positive: bool = False) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if positive and value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


def _env_float(name: str, default: Optional[float], positive: bool = False) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default
    if positive and not value > 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = TICK_MS
    swipe_threshold: int = MIN_SWIPE_DISTANCE
    storage_path: Path = field(default_factory=lambda: DEFAULT_STORAGE)
    pixel_ratio: Optional[float] = None  # None -> derive from window size
    fps: int = 60

    @classmethod
    def from_env(cls) -> "Config":
        """Defaults overridden by SNAKE_* environment variables."""
        storage = os.environ.get("SNAKE_STORAGE")
        return cls(
            seed=_env_int("SNAKE_SEED", None),
            tick_ms=_env_int("SNAKE_TICK_MS", TICK_MS, positive=True),
            storage_path=Path(storage).expanduser() if storage else DEFAULT_STORAGE,
            pixel_ratio=_env_float("SNAKE_PIXEL_RATIO", None, positive=True),
        )
