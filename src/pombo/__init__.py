"""
Flappy Pombo: a side-scrolling pipe-dodging game.
Split into physics core, obstacle stream, phase controller and pygame client.
"""

from .config import GameConfig, load_config
from .data_models import Entity, GamePhase, GameSnapshot, Obstacle, Playfield
from .game_engine import GameEngine
from .obstacle_stream import ObstacleStream
from .physics_core import PhysicsCore

__all__ = [
    "Entity",
    "GameConfig",
    "GameEngine",
    "GamePhase",
    "GameSnapshot",
    "Obstacle",
    "ObstacleStream",
    "PhysicsCore",
    "Playfield",
    "load_config",
]
