"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Tuple

from .config import GameConfig
from .data_models import Barrier, Entity, Obstacle


@dataclass
class PhysicsCore:
    """
    Fixed-rule physics shared by the game engine and its tests.
    All quantities are per frame; there is no delta time.
    """
    config: GameConfig = field(default_factory=GameConfig)

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """
        Semi-implicit Euler: velocity first, then position with the new velocity.
        """
        velocity += self.config.gravity
        y += velocity
        return y, velocity

    def integrate(self, entity: Entity) -> Entity:
        y, velocity = self.apply_gravity_and_movement(entity.y, entity.velocity)
        return replace(entity, y=y, velocity=velocity)

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.config.jump_impulse

    def apply_impulse(self, entity: Entity) -> Entity:
        # Overwrites, never adds: repeated flaps do not stack.
        return replace(entity, velocity=self.flap())

    @staticmethod
    def out_of_bounds(y: float, play_height: float, size: float) -> bool:
        """Ceiling at 0, floor where the box's bottom edge meets play_height."""
        return y < 0 or y > play_height - size

    def barriers(self, pipe: Obstacle, play_height: float) -> Tuple[Barrier, Barrier]:
        left, right = pipe.x, pipe.x + self.config.pipe_width
        upper = Barrier(left=left, right=right, top=0.0, bottom=pipe.gap_top)
        lower = Barrier(left=left, right=right,
                        top=pipe.gap_top + self.config.gap_size, bottom=play_height)
        return upper, lower

    def hits_pipe(self, entity: Entity, pipe: Obstacle, play_height: float) -> bool:
        """Strict overlap test; sharing an edge is not a hit."""
        upper, lower = self.barriers(pipe, play_height)
        if not (entity.right > upper.left and entity.left < upper.right):
            return False
        return entity.top < upper.bottom or entity.bottom > lower.top

    def check_collision(self, entity: Entity, pipes: Iterable[Obstacle], play_height: float) -> bool:
        """Checks every live pipe in sequence order."""
        for pipe in pipes:
            if self.hits_pipe(entity, pipe, play_height):
                return True
        return False

    @staticmethod
    def collect_passes(entity: Entity, pipes: Iterable[Obstacle]) -> int:
        """
        Marks pipes whose leading edge has crossed the bird's x.
        Returns how many were newly passed this step.
        """
        newly_passed = 0
        for pipe in pipes:
            if not pipe.passed and pipe.x < entity.x:
                pipe.passed = True
                newly_passed += 1
        return newly_passed
