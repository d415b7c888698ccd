"""
canvas.py: The drawing interface the session renders through.

Coordinates are character cells: column `x`, row `y`, origin top-left.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import BLACK, WHITE

Color = Tuple[int, int, int]


class Canvas(ABC):
    """Grid drawing backend."""

    @abstractmethod
    def cls(self):
        """Clears the screen to black."""

    @abstractmethod
    def cls_bg(self, color: Color):
        """Clears the screen to the given background color."""

    @abstractmethod
    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        """Places a single glyph."""

    @abstractmethod
    def print(self, x: int, y: int, text: str):
        """Prints text starting at a cell."""

    @abstractmethod
    def print_centered(self, y: int, text: str):
        """Prints text horizontally centered on a row."""


@dataclass(frozen=True)
class DrawCommand:
    kind: str                   # "cls", "cls_bg", "set", "print" or "print_centered"
    x: Optional[int] = None
    y: Optional[int] = None
    text: str = ""
    fg: Color = WHITE
    bg: Color = BLACK


class RecordingCanvas(Canvas):
    """Keeps every draw command in memory; used headless and in tests."""

    def __init__(self):
        self.commands: List[DrawCommand] = []

    def cls(self):
        self.commands.append(DrawCommand("cls"))

    def cls_bg(self, color: Color):
        self.commands.append(DrawCommand("cls_bg", bg=color))

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        self.commands.append(DrawCommand("set", x, y, glyph, fg, bg))

    def print(self, x: int, y: int, text: str):
        self.commands.append(DrawCommand("print", x, y, text))

    def print_centered(self, y: int, text: str):
        self.commands.append(DrawCommand("print_centered", y=y, text=text))

    def clear(self):
        self.commands.clear()

    def texts(self) -> List[str]:
        return [c.text for c in self.commands if c.kind in ("print", "print_centered")]

    def glyphs(self, glyph: Optional[str] = None) -> List[DrawCommand]:
        return [c for c in self.commands
                if c.kind == "set" and (glyph is None or c.text == glyph)]
