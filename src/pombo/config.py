"""Configuration loading from environment variables."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from .constants import (
    BIRD_SIZE, BIRD_X, CELEBRATION_SCORE, GAP_SIZE, GRAVITY, JUMP_IMPULSE,
    MIN_PIPE_HEIGHT, PIPE_SPAWN_INTERVAL_MS, PIPE_SPEED, PIPE_WIDTH,
    SCREEN_HEIGHT, SCREEN_WIDTH,
)


def gap_top_range(height: float, gap_size: float, min_height: float) -> Tuple[int, int]:
    """Inclusive whole-pixel bounds for gap_top; empty when low > high."""
    return math.ceil(min_height), math.floor(height - gap_size - min_height)


def min_playfield_height(gap_size: float, min_height: float) -> int:
    """Smallest whole-pixel height whose gap_top_range is non-empty."""
    return math.ceil(math.ceil(min_height) + gap_size + min_height)


def validate_playfield(width: float, height: float, gap_size: float, min_height: float) -> None:
    """Rejects dimensions that cannot hold a pipe gap with its margins."""
    for name, value in (("width", width), ("height", height)):
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"playfield {name} must be a positive finite number, got {value!r}")
    low, high = gap_top_range(height, gap_size, min_height)
    if low > high:
        raise ValueError(
            f"playfield height {height} cannot fit a {gap_size}px gap "
            f"with {min_height}px barriers")


@dataclass(frozen=True)
class GameConfig:
    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    pipe_speed: float = PIPE_SPEED
    spawn_interval_ms: float = PIPE_SPAWN_INTERVAL_MS
    pipe_width: float = PIPE_WIDTH
    gap_size: float = GAP_SIZE
    min_pipe_height: float = MIN_PIPE_HEIGHT
    bird_x: float = BIRD_X
    bird_size: float = BIRD_SIZE
    celebration_score: int = CELEBRATION_SCORE
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    seed: Optional[int] = None
    log_level: str = "info"

    def __post_init__(self):
        for name in ("gravity", "jump_impulse", "pipe_speed", "spawn_interval_ms"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite")
        if self.pipe_speed <= 0:
            raise ValueError("pipe_speed must be > 0")
        if self.spawn_interval_ms <= 0:
            raise ValueError("spawn_interval_ms must be > 0")
        if self.pipe_width <= 0 or self.bird_size <= 0 or self.gap_size <= 0:
            raise ValueError("pipe_width, bird_size and gap_size must be > 0")
        if self.min_pipe_height < 0:
            raise ValueError("min_pipe_height must be >= 0")
        if self.celebration_score < 1:
            raise ValueError("celebration_score must be >= 1")
        validate_playfield(self.width, self.height, self.gap_size, self.min_pipe_height)


def _env(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


def load_config() -> GameConfig:
    """Load configuration from .env and environment variables."""
    load_dotenv()

    return GameConfig(
        gravity=_env("POMBO_GRAVITY", float, GRAVITY),
        jump_impulse=_env("POMBO_JUMP_IMPULSE", float, JUMP_IMPULSE),
        pipe_speed=_env("POMBO_PIPE_SPEED", float, PIPE_SPEED),
        spawn_interval_ms=_env("POMBO_SPAWN_INTERVAL_MS", float, PIPE_SPAWN_INTERVAL_MS),
        width=_env("POMBO_WIDTH", int, SCREEN_WIDTH),
        height=_env("POMBO_HEIGHT", int, SCREEN_HEIGHT),
        seed=_env("POMBO_SEED", int, None),
        log_level=os.environ.get("POMBO_LOG_LEVEL", "info"),
    )
