"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .constants import BIRD_SIZE, BIRD_X, SCREEN_HEIGHT, SCREEN_WIDTH


class GamePhase(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    TERMINAL = "terminal"


@dataclass
class Entity:
    """The player-controlled body. Only y and velocity ever change."""
    y: float = SCREEN_HEIGHT / 2
    velocity: float = 0.0
    x: float = BIRD_X
    size: float = BIRD_SIZE

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.size

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.size


@dataclass
class Obstacle:
    """A pipe pair. The passable gap spans [gap_top, gap_top + gap_size)."""
    id: int
    x: float
    gap_top: float
    passed: bool = False


@dataclass(frozen=True)
class Barrier:
    """Axis-aligned rectangle for one half of a pipe pair."""
    left: float
    right: float
    top: float
    bottom: float


@dataclass
class Playfield:
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to the presentation layer after each frame."""
    phase: GamePhase
    entity_x: float
    entity_y: float
    velocity: float
    entity_size: float
    obstacles: Tuple[Tuple[float, float], ...] = field(default_factory=tuple)
    score: int = 0
    celebrating: bool = False
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT

    def to_client_state(self):
        """Prepares a minimal state dictionary for the renderer."""
        return {
            "phase": self.phase.value,
            "x": self.entity_x,
            "y": round(self.entity_y, 2),
            "v": round(self.velocity, 2),
            "pipes": [
                {"x": round(x, 2), "gap_top": gap_top}
                for x, gap_top in self.obstacles
            ],
            "score": self.score,
            "celebrating": self.celebrating,
        }
