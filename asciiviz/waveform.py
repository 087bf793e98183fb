"""Mirrored solid-block waveform bars."""

from __future__ import annotations

import math
from typing import Sequence

from asciiviz.visualizer import ASCIIVisualizer, AudioDataStyle, Canvas, Color

_SYMBOL = 219  # solid block
_HEIGHT_SCALAR = 5.4
_HEIGHT_MINIMUM = 2.0


class VisualizerWaveform(ASCIIVisualizer):
    """Draws a bar per sample, centred if the window has grown since creation."""

    def __init__(self, canvas: Canvas | None = None) -> None:
        canvas = canvas if canvas is not None else Canvas()
        super().__init__(canvas.width, AudioDataStyle.WAVEFORM, canvas)
        self.starting_width = canvas.width
        self.canvas.cursor_visible = False

    def update(self, dt: float, data: Sequence[float], is_active: bool) -> bool:
        """Draw bars mirrored around the middle row."""
        width = self.width()
        half_height = self.height() // 2
        offset = max(0, (width - self.starting_width) // 2)
        columns = min(width, self.starting_width)
        if len(data) < columns:
            raise IndexError(f"expected at least {columns} values, got {len(data)}")

        for i, sample in enumerate(data[:columns]):
            y_height = sample * _HEIGHT_SCALAR + _HEIGHT_MINIMUM
            x = i + offset
            for j in range(max(0, math.ceil(y_height))):
                # The upper half is drawn last so the lower shadow stays smaller.
                self.canvas.draw(_SYMBOL, x, half_height + j, Color.BLUE)
                self.canvas.draw(_SYMBOL, x, half_height - j, Color.LIGHTBLUE)
        return True