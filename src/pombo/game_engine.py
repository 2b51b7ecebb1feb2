"""
game_engine.py: The phase controller that owns one game session.
"""

import logging
import random
from typing import Optional

from .config import GameConfig, validate_playfield
from .data_models import Entity, GamePhase, GameSnapshot, Playfield
from .obstacle_stream import ObstacleStream
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Idle -> Active -> Terminal -> (restart) -> Active.

    The driver calls on_frame() once per display refresh and reads the
    returned snapshot. Each step is one atomic update of entity, pipes and
    score; a terminal condition ends the step where it is detected.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        if rng is None:
            rng = random.Random(self.config.seed)
        self.physics = PhysicsCore(self.config)
        self.stream = ObstacleStream(config=self.config, rng=rng)
        self.playfield = Playfield(width=self.config.width, height=self.config.height)

        self.phase = GamePhase.IDLE
        self.entity = self._fresh_entity()
        self.score = 0
        self.celebrating = False
        self._celebration_fired = False
        self.frame_count = 0

    def _fresh_entity(self) -> Entity:
        return Entity(
            y=self.playfield.height / 2,
            velocity=0.0,
            x=self.config.bird_x,
            size=self.config.bird_size,
        )

    # -------- External API --------

    def on_frame(self, timestamp_ms: float) -> GameSnapshot:
        """Advances exactly one step while Active; otherwise a no-op."""
        if self.phase is GamePhase.ACTIVE:
            self.step(timestamp_ms)
        return self.snapshot()

    def on_activate(self):
        """Start/restart outside of play, flap during play."""
        if self.phase is GamePhase.ACTIVE:
            self.entity = self.physics.apply_impulse(self.entity)
        else:
            self.restart()

    def on_resize(self, width: float, height: float):
        validate_playfield(width, height, self.config.gap_size, self.config.min_pipe_height)
        self.playfield = Playfield(width=width, height=height)
        logger.debug("Playfield resized to %sx%s", width, height)

    def on_dismiss_celebration(self):
        self.celebrating = False

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            phase=self.phase,
            entity_x=self.entity.x,
            entity_y=self.entity.y,
            velocity=self.entity.velocity,
            entity_size=self.entity.size,
            obstacles=self.stream.render_pairs(),
            score=self.score,
            celebrating=self.celebrating,
            width=self.playfield.width,
            height=self.playfield.height,
        )

    # -------- Session control --------

    def session_context(self):
        """Log tag fields read by logger.HumanFormatter."""
        return {"phase": self.phase.value, "frame": self.frame_count, "score": self.score}

    def restart(self):
        """Re-initializes the session and enters Active."""
        previous = self.phase
        self.entity = self._fresh_entity()
        self.stream.clear()
        self.score = 0
        self.celebrating = False
        self._celebration_fired = False
        self.frame_count = 0
        self.phase = GamePhase.ACTIVE
        logger.info("Game started (from %s)", previous.value,
                    extra={"session": self.session_context()})

    def _end_session(self, reason: str):
        self.phase = GamePhase.TERMINAL
        logger.info("Game over: %s after %d frames. Final score: %d",
                    reason, self.frame_count, self.score,
                    extra={"session": self.session_context()})

    # -------- Simulation --------

    def step(self, now: float):
        """
        One simulation step. Order is fixed:
        integrate -> bounds -> spawn -> advance -> collide -> score.
        """
        if self.phase is not GamePhase.ACTIVE:
            return
        self.frame_count += 1
        play_width, play_height = self.playfield.width, self.playfield.height

        # 1. Entity integration; an illegal position is never committed
        moved = self.physics.integrate(self.entity)
        if self.physics.out_of_bounds(moved.y, play_height, moved.size):
            self._end_session("left the playfield")
            return
        self.entity = moved

        # 2. Spawn then move pipes
        self.stream.maybe_spawn(now, play_width, play_height)
        self.stream.advance()

        # 3. Collision check
        if self.physics.check_collision(self.entity, self.stream, play_height):
            self._end_session("hit a pipe")
            return

        # 4. Score update
        passed = self.physics.collect_passes(self.entity, self.stream)
        for _ in range(passed):
            self._add_point()

    def _add_point(self):
        self.score += 1
        if not self._celebration_fired and self.score >= self.config.celebration_score:
            self._celebration_fired = True
            self.celebrating = True
            logger.info("Score reached %d", self.score,
                        extra={"session": self.session_context()})
