"""
obstacle_stream.py: Pipe spawning, scrolling and recycling.
"""

import itertools
import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .config import GameConfig, gap_top_range
from .data_models import Obstacle

logger = logging.getLogger(__name__)


@dataclass
class ObstacleStream:
    """
    Ordered pipes, oldest (leftmost) first.
    Spawning is driven by frame timestamps in ms, so pipe density does not
    depend on how often the driver calls in.
    """
    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)
    pipes: List[Obstacle] = field(default_factory=list)
    last_spawn_time: Optional[float] = None
    _ids: Iterator[int] = field(default_factory=itertools.count, init=False, repr=False)

    def __iter__(self):
        return iter(self.pipes)

    def __len__(self):
        return len(self.pipes)

    def spawn_range(self, play_height: float) -> Tuple[int, int]:
        """Inclusive bounds for a new pipe's gap_top."""
        return gap_top_range(play_height, self.config.gap_size, self.config.min_pipe_height)

    def _spawn_pipe(self, play_width: float, play_height: float) -> Obstacle:
        """Generates a new pipe at the right edge of the playfield."""
        low, high = self.spawn_range(play_height)
        gap_top = self.rng.randint(low, high)
        pipe = Obstacle(id=next(self._ids), x=float(play_width), gap_top=float(gap_top))
        self.pipes.append(pipe)
        logger.debug("Spawned pipe %d at x=%.1f gap_top=%d", pipe.id, pipe.x, gap_top)
        return pipe

    def maybe_spawn(self, now: float, play_width: float, play_height: float) -> Optional[Obstacle]:
        """
        Appends a pipe once more than spawn_interval_ms has elapsed since the
        previous spawn. The first call after clear() only starts the timer.
        """
        if self.last_spawn_time is None:
            self.last_spawn_time = now
            return None
        if now - self.last_spawn_time <= self.config.spawn_interval_ms:
            return None
        self.last_spawn_time = now
        return self._spawn_pipe(play_width, play_height)

    def advance(self) -> int:
        """Scrolls every pipe left and drops those fully off-screen."""
        speed = self.config.pipe_speed
        for pipe in self.pipes:
            pipe.x -= speed

        live = [p for p in self.pipes if p.x + self.config.pipe_width > 0]
        dropped = len(self.pipes) - len(live)
        if dropped:
            logger.debug("Recycled %d pipe(s)", dropped)
        self.pipes = live
        return dropped

    def clear(self):
        """Drops all pipes and re-arms the spawn timer."""
        self.pipes = []
        self.last_spawn_time = None

    def render_pairs(self) -> Tuple[Tuple[float, float], ...]:
        return tuple((p.x, p.gap_top) for p in self.pipes)
