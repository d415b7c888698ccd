"""
data_models.py: Data structures and rules for the player and the obstacles.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from .constants import (
    GRAVITY_STEP, MAX_FALL_VELOCITY, FLAP_VELOCITY, MAX_FLAP_VELOCITY,
    PLAYER_START_X, PLAYER_START_Y, SCREEN_HEIGHT
)


class GameMode(Enum):
    """Top-level modes of a game session."""
    MENU = auto()
    PLAYING = auto()
    ENDED = auto()


class InputKey(Enum):
    """The discrete inputs a tick can receive (at most one per tick)."""
    FLAP = auto()
    START = auto()
    QUIT = auto()


class PlayerError(Exception):
    """Base class for rejected player actions."""


class AlreadyDead(PlayerError):
    def __init__(self):
        super().__init__("Player is already dead")


class FallingTooFast(PlayerError):
    def __init__(self):
        super().__init__("Can't flap while falling too fast")


@dataclass
class Player:
    """
    The player entity. `x` is the world distance travelled, `y` the row
    (0 is the top of the screen, growing downwards).
    """
    x: int = PLAYER_START_X
    y: int = PLAYER_START_Y
    velocity: float = 0.0
    alive: bool = True

    def advance(self) -> bool:
        """
        Runs one physics tick: gravity, one column forward, vertical move.

        Returns False when nothing moved (already dead) or when the player
        hit the top boundary, which kills it.
        """
        if not self.alive:
            return False

        # Only the passive accumulation is capped; a flap may lower it again.
        if self.velocity < MAX_FALL_VELOCITY:
            self.velocity += GRAVITY_STEP

        self.x += 1
        self.y += int(self.velocity)

        if self.y < 0:
            self.y = 0
            self.alive = False
            return False
        return True

    def impulse(self):
        """Flap: sets the velocity to FLAP_VELOCITY, or raises a PlayerError."""
        if not self.alive:
            raise AlreadyDead()
        if self.velocity > MAX_FLAP_VELOCITY:
            raise FallingTooFast()

        self.velocity = FLAP_VELOCITY

    def kill(self):
        self.alive = False

    def reset(self, x: int = PLAYER_START_X, y: int = PLAYER_START_Y):
        self.x = x
        self.y = y
        self.velocity = 0.0
        self.alive = True

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def is_alive(self) -> bool:
        return self.alive


@dataclass(frozen=True)
class Obstacle:
    """A vertical wall at world column `x` with a gap of `size` rows centered on `gap_y`."""
    x: int
    gap_y: int
    size: int

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"Obstacle gap size must be positive, got {self.size}")

    @property
    def half_size(self) -> int:
        return self.size // 2

    def hits(self, player: Player) -> bool:
        """True when the player is in this wall's column and outside the gap band."""
        if player.x != self.x:
            return False
        above_gap = player.y < self.gap_y - self.half_size
        below_gap = player.y > self.gap_y + self.half_size
        return above_gap or below_gap

    def wall_rows(self, height: int = SCREEN_HEIGHT) -> Tuple[range, range]:
        """Rows covered by the top and bottom wall segments."""
        top = range(0, self.gap_y - self.half_size)
        bottom = range(self.gap_y + self.half_size, height)
        return top, bottom
