#!/usr/bin/env python3
"""
flappy_client.py

Pygame window, character-grid rendering and the frame loop that drives a GameSession.
"""

import argparse
import logging
import random
from typing import Dict, Optional

import pygame

from .canvas import Canvas, Color
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, CELL_SIZE, RENDER_FPS, WINDOW_TITLE, BLACK, WHITE
)
from .data_models import InputKey
from .high_score import HighScore
from .session import GameSession

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[int, InputKey] = {
    pygame.K_SPACE: InputKey.FLAP,
    pygame.K_p: InputKey.START,
    pygame.K_q: InputKey.QUIT,
}

# ----------------- Grid Canvas (pygame backend) -----------------

class PygameCanvas(Canvas):
    """Draws the character grid onto a pygame surface, one CELL_SIZE square per cell."""

    def __init__(self, surface: pygame.Surface, cell_size: int = CELL_SIZE):
        self.surface = surface
        self.cell_size = cell_size
        self.font = pygame.font.Font(None, cell_size + 4)
        self._glyph_cache: Dict[tuple, pygame.Surface] = {}

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        key = (glyph, fg)
        if key not in self._glyph_cache:
            self._glyph_cache[key] = self.font.render(glyph, True, fg)
        return self._glyph_cache[key]

    def cls(self):
        self.surface.fill(BLACK)

    def cls_bg(self, color: Color):
        self.surface.fill(color)

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        # Cells outside the grid are silently clipped.
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            return
        rect = self._cell_rect(x, y)
        pygame.draw.rect(self.surface, bg, rect)
        text = self._glyph(glyph, fg)
        self.surface.blit(text, text.get_rect(center=rect.center))

    def print(self, x: int, y: int, text: str):
        for offset, char in enumerate(text):
            self.set(x + offset, y, WHITE, BLACK, char)

    def print_centered(self, y: int, text: str):
        self.print((SCREEN_WIDTH - len(text)) // 2, y, text)


# ----------------- Game Client (window / frame loop) -----------------

class FlappyClient:
    def __init__(self, seed: Optional[int] = None):
        pygame.init()
        self.screen = pygame.display.set_mode(
            (SCREEN_WIDTH * CELL_SIZE, SCREEN_HEIGHT * CELL_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)

        self.canvas = PygameCanvas(self.screen)
        self.clock = pygame.time.Clock()
        self.window_closed = False

        # The high score is shared by every session this process runs.
        self.high_score = HighScore()
        self.session = GameSession(self.high_score, rng=random.Random(seed))

    def poll_input(self) -> Optional[InputKey]:
        """Returns the first mapped key pressed this frame."""
        key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.window_closed = True
            if event.type == pygame.KEYDOWN and key is None:
                key = KEY_BINDINGS.get(event.key)
        return key

    def run(self):
        """The main client execution loop."""
        try:
            while not self.session.quit_requested:
                frame_time_ms = self.clock.tick(RENDER_FPS)
                key = self.poll_input()
                # Closing the window quits from any mode.
                if self.window_closed:
                    break
                self.session.tick(self.canvas, float(frame_time_ms), key)
                pygame.display.flip()
        finally:
            self.session.close()
            pygame.quit()
        print(f"Thanks for playing! Best score: {self.high_score.score}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Terminal-style Flappy Bird.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle generation")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    client = FlappyClient(seed=args.seed)
    try:
        client.run()
    except KeyboardInterrupt:
        print("Interrupted, quitting.")


if __name__ == "__main__":
    main()
