"""Single-player Flappy Bird on an 80x50 character grid."""

from .data_models import (
    GameMode, InputKey, Player, Obstacle, PlayerError, AlreadyDead, FallingTooFast
)
from .high_score import HighScore
from .obstacle_generator import ObstacleGenerator, initial_obstacles
from .session import GameSession

__all__ = [
    "GameMode", "InputKey", "Player", "Obstacle", "PlayerError", "AlreadyDead",
    "FallingTooFast", "HighScore", "ObstacleGenerator", "initial_obstacles", "GameSession",
]
