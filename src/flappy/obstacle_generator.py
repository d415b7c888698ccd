"""
obstacle_generator.py: Background producer of obstacles, decoupled from the frame loop.

The producer thread pushes obstacles into a FIFO queue at a fixed real-time
interval; the session drains that queue without blocking once per tick.
"""

import logging
import queue
import random
import threading
from typing import List, Optional, Tuple

from .constants import (
    GAP_Y_RANGE, GAP_SIZE_RANGE, OBSTACLE_INTERVAL, OBSTACLE_SPACING,
    INITIAL_OBSTACLES, SCREEN_WIDTH
)
from .data_models import Obstacle

logger = logging.getLogger(__name__)


def random_obstacle(rng, x: int) -> Obstacle:
    """Builds an obstacle at world column `x` with a random gap."""
    gap_y = rng.randrange(*GAP_Y_RANGE)
    size = rng.randrange(*GAP_SIZE_RANGE)
    return Obstacle(x=x, gap_y=gap_y, size=size)


def initial_obstacles(rng, start_x: int = SCREEN_WIDTH, count: int = INITIAL_OBSTACLES,
                      spacing: int = OBSTACLE_SPACING) -> Tuple[List[Obstacle], int]:
    """
    Builds the first batch synchronously so there is something on screen
    before the generator catches up. Returns the batch and the next world x.
    """
    obstacles = []
    x = start_x
    for _ in range(count):
        obstacles.append(random_obstacle(rng, x))
        x += spacing
    return obstacles, x


class ObstacleGenerator:
    """Produces an unbounded stream of obstacles on a daemon thread."""

    def __init__(self, start_x: int, rng=None, interval: float = OBSTACLE_INTERVAL,
                 spacing: int = OBSTACLE_SPACING):
        self.next_x = start_x
        self.rng = rng if rng is not None else random.Random()
        self.interval = interval
        self.spacing = spacing

        self.queue: "queue.Queue[Obstacle]" = queue.Queue()
        self.stopped = threading.Event()
        self.thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def start(self):
        if self.thread is not None:
            raise RuntimeError("ObstacleGenerator can only be started once")
        self.thread = threading.Thread(target=self._produce_loop, name="obstacle-generator",
                                       daemon=True)
        self.thread.start()

    def stop(self, join: bool = False, timeout: Optional[float] = None):
        """Signals the producer to exit; it wakes immediately from its wait."""
        self.stopped.set()
        if join and self.thread is not None:
            self.thread.join(timeout)

    def drain(self) -> List[Obstacle]:
        """Returns every obstacle produced so far, in arrival order, without blocking."""
        drained = []
        while True:
            try:
                drained.append(self.queue.get_nowait())
            except queue.Empty:
                return drained

    def _produce_loop(self):
        logger.debug("Obstacle generator started at x=%d", self.next_x)
        while not self.stopped.is_set():
            self.queue.put(random_obstacle(self.rng, self.next_x))
            self.next_x += self.spacing
            # Cancellable sleep: returns early once stop() is called.
            self.stopped.wait(self.interval)
        logger.debug("Obstacle generator stopped at x=%d", self.next_x)
