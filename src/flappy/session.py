"""
session.py: The game session state machine (menu, playing, ended).

One call to `tick` per rendered frame. Physics runs at its own fixed rate:
elapsed time is accumulated and the player advances once every
FRAME_DURATION milliseconds, while flaps are applied on the frame they arrive.
"""

import logging
import random
from typing import List, Optional

from .canvas import Canvas
from .constants import (
    FRAME_DURATION, SCREEN_WIDTH, SCREEN_HEIGHT, CULL_MARGIN, OBSTACLE_INTERVAL,
    LIGHT_BLUE, YELLOW, RED, BLACK, PLAYER_GLYPH, WALL_GLYPH
)
from .data_models import GameMode, InputKey, Obstacle, Player, PlayerError
from .high_score import HighScore
from .obstacle_generator import ObstacleGenerator, initial_obstacles

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the player, the active obstacles, the score and the obstacle
    generator. Only the HighScore outlives a restart.
    """

    def __init__(self, high_score: HighScore, rng=None,
                 generator_interval: float = OBSTACLE_INTERVAL, threaded: bool = True):
        self.high_score = high_score
        self.rng = rng if rng is not None else random.Random()
        self.generator_interval = generator_interval
        self.threaded = threaded        # False keeps the generator idle (tests feed its queue)

        self.mode = GameMode.MENU
        self.quit_requested = False
        self.player = Player()
        self.frame_time = 0.0
        self.score = 0
        self.obstacles: List[Obstacle] = []
        self.generator: Optional[ObstacleGenerator] = None
        self._spawn_obstacles()

    # ----------------- Lifecycle -----------------

    def _spawn_obstacles(self):
        """Initial batch now, then a fresh generator continuing after it."""
        if self.generator is not None:
            self.generator.stop()

        self.obstacles, next_x = initial_obstacles(self.rng, SCREEN_WIDTH)
        # Each generator thread owns an rng seeded from the session rng.
        generator_rng = random.Random(self.rng.getrandbits(64))
        self.generator = ObstacleGenerator(next_x, rng=generator_rng,
                                           interval=self.generator_interval)
        if self.threaded:
            self.generator.start()

    def restart(self):
        """Starts a new run. Everything but the high score is rebuilt."""
        self.player = Player()
        self.frame_time = 0.0
        self.score = 0
        self._spawn_obstacles()
        self._set_mode(GameMode.PLAYING)
        logger.info("Session restarted")

    def close(self):
        if self.generator is not None:
            self.generator.stop()

    def _set_mode(self, mode: GameMode):
        if mode is not self.mode:
            logger.info("Mode transition: %s -> %s", self.mode.name, mode.name)
        self.mode = mode

    def _end_game(self, reason: str):
        self.player.kill()
        self._set_mode(GameMode.ENDED)
        logger.info("Game over (%s) with score %d", reason, self.score)
        self.high_score.submit(self.score)

    # ----------------- Per-tick update -----------------

    def tick(self, canvas: Canvas, frame_time_ms: float, key: Optional[InputKey] = None):
        """Advances the session by one rendered frame."""
        if self.mode is GameMode.MENU:
            self._main_menu(canvas, key)
        elif self.mode is GameMode.PLAYING:
            self._play(canvas, frame_time_ms, key)
        elif self.mode is GameMode.ENDED:
            self._dead(canvas, key)
        else:
            raise ValueError(f"Unknown game mode: {self.mode}")

    def _handle_menu_key(self, key: Optional[InputKey]):
        if key is InputKey.START:
            self.restart()
        elif key is InputKey.QUIT:
            self.quit_requested = True

    def _main_menu(self, canvas: Canvas, key: Optional[InputKey]):
        canvas.cls()
        canvas.print_centered(15, "■ WELCOME TO FLAPPY BIRD! ■")
        canvas.print_centered(40, "Avoid obstacles and press SPACE to flap your wings")
        canvas.print_centered(20, "(P) Play Game")
        canvas.print_centered(22, "(Q) Quit Game")
        self._handle_menu_key(key)

    def _play(self, canvas: Canvas, frame_time_ms: float, key: Optional[InputKey]):
        canvas.cls_bg(LIGHT_BLUE)

        # 1. Fixed-rate physics
        blocked = False
        self.frame_time += frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            blocked = not self.player.advance()

        # 2. Flap input is not gated by the physics rate
        if key is InputKey.FLAP:
            try:
                self.player.impulse()
            except PlayerError as e:
                logger.info("Flap ignored: %s", e)

        # 3. Render
        self._render_player(canvas)
        canvas.print(0, 1, f"Score: {self.score}")
        for obstacle in self.obstacles:
            self._render_obstacle(canvas, obstacle)

        # 4. Cull obstacles far behind the player
        self.obstacles = [o for o in self.obstacles if o.x - self.player.x > -CULL_MARGIN]

        # 5. Score the obstacle just passed
        if self.obstacles and self.player.x > self.obstacles[0].x:
            self.score += 1
            self.obstacles.pop(0)

        # 6. Take in newly generated obstacles
        self.obstacles.extend(self.generator.drain())

        # 7. Hit the top, fell off the bottom or hit a wall
        if blocked:
            self._end_game("hit the top")
        elif self.player.y > SCREEN_HEIGHT:
            self._end_game("fell off the screen")
        elif any(o.hits(self.player) for o in self.obstacles):
            self._end_game("hit an obstacle")

    def _dead(self, canvas: Canvas, key: Optional[InputKey]):
        canvas.cls()
        canvas.print_centered(15, "You're dead! >.<")
        canvas.print_centered(
            20, f"You earned {self.score} points! (Highest: {self.high_score.score})")
        canvas.print_centered(25, "(P) Play Again")
        canvas.print_centered(27, "(Q) Quit Game")
        self._handle_menu_key(key)

    # ----------------- Rendering helpers -----------------

    def _render_player(self, canvas: Canvas):
        if not self.player.alive:
            return
        canvas.set(0, self.player.y, YELLOW, BLACK, PLAYER_GLYPH)

    def _render_obstacle(self, canvas: Canvas, obstacle: Obstacle):
        screen_x = obstacle.x - self.player.x
        top, bottom = obstacle.wall_rows()
        for y in top:
            canvas.set(screen_x, y, RED, BLACK, WALL_GLYPH)
        for y in bottom:
            canvas.set(screen_x, y, RED, BLACK, WALL_GLYPH)
