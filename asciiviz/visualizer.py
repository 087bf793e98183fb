"""Visualizer base classes and the character canvas they draw on."""

from __future__ import annotations

import shutil
from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from typing import Sequence


class Color(IntEnum):
    """Sixteen-colour console palette."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    GREY = 7
    DARKGREY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15


class AudioDataStyle(Enum):
    """Kind of audio data a visualizer consumes."""

    WAVEFORM = "waveform"
    SPECTRUM = "spectrum"


_BLANK = " "


def _to_char(char: str | int) -> str:
    if isinstance(char, int):
        return bytes([char & 0xFF]).decode("cp437")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


class Canvas:
    """An in-memory grid of coloured characters."""

    def __init__(self, width: int | None = None, height: int | None = None) -> None:
        if width is None or height is None:
            size = shutil.get_terminal_size()
            width = size.columns if width is None else width
            height = size.lines if height is None else height
        self.cursor_visible = True
        self.width = 0
        self.height = 0
        self._cells: list[list[tuple[str, Color | None]]] = []
        self.reinit(width, height)

    def reinit(self, width: int, height: int) -> None:
        """Resize the canvas, discarding its contents."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self.clear()

    def clear(self) -> None:
        """Blank every cell."""
        self._cells = [[(_BLANK, None)] * self.width for _ in range(self.height)]

    def draw(self, char: str | int, x: float, y: float, color: Color) -> None:
        """Put a character at (x, y); positions off the canvas are ignored."""
        glyph = _to_char(char)
        col, row = int(x), int(y)
        if 0 <= col < self.width and 0 <= row < self.height:
            self._cells[row][col] = (glyph, Color(color))

    def _cell(self, x: int, y: int) -> tuple[str, Color | None]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the canvas")
        return self._cells[y][x]

    def char_at(self, x: int, y: int) -> str:
        """Character at (x, y), a space if nothing was drawn there."""
        return self._cell(x, y)[0]

    def color_at(self, x: int, y: int) -> Color | None:
        """Colour at (x, y), or None if nothing was drawn there."""
        return self._cell(x, y)[1]

    def render(self) -> str:
        """The canvas as plain text, one line per row."""
        return "\n".join("".join(ch for ch, _ in row) for row in self._cells)


class Visualizer(ABC):
    """Base class for anything that turns audio data into a picture."""

    def __init__(self, audio_data_size: int, style: AudioDataStyle) -> None:
        self.audio_data_size = audio_data_size
        self.audio_data_style = style
        self.frames = 0

    @abstractmethod
    def update(self, dt: float, data: Sequence[float], is_active: bool) -> bool:
        """Draw one frame from the given audio data."""

    @abstractmethod
    def width(self) -> int:
        """Drawable width."""

    @abstractmethod
    def height(self) -> int:
        """Drawable height."""

    def on_resize(self, new_width: int, new_height: int) -> None:
        """Called when the display changes size."""

    def update_pre(self) -> None:
        """Called before every update; counts the frames started."""
        self.frames += 1

    def update_post(self) -> bool:
        """Called after every update; False stops the display."""
        return True


class ASCIIVisualizer(Visualizer):
    """Visualizer that draws characters on a console canvas."""

    def __init__(
        self,
        audio_data_size: int,
        style: AudioDataStyle,
        canvas: Canvas | None = None,
    ) -> None:
        super().__init__(audio_data_size, style)
        self.canvas = canvas if canvas is not None else Canvas()

    def width(self) -> int:
        """Canvas width, never negative."""
        return max(0, self.canvas.width)

    def height(self) -> int:
        """Canvas height, never negative."""
        return max(0, self.canvas.height)

    def on_resize(self, new_width: int, new_height: int) -> None:
        """Resize and clear the canvas, hiding the cursor."""
        self.canvas.reinit(new_width, new_height)
        self.canvas.clear()
        self.canvas.cursor_visible = False