"""A drifting cloud of characters fed by the audio spectrum."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, Sequence

from asciiviz.visualizer import ASCIIVisualizer, AudioDataStyle, Canvas, Color

CIRRUS_DATA_SIZE = 256

_MOVE_SPEED = 4.0  # characters per second
_DECAY = 6.0
_INPUT_SCALAR = 80.0


def _bounce(start: int, size: int) -> Iterator[int]:
    """Walk indices up to the end of a buffer and back, forever."""
    index = start
    invert = False
    while True:
        yield index
        if not invert:
            if index >= size - 1:
                invert = True
            else:
                index += 1
        elif index <= 0:
            invert = False
        else:
            index -= 1


class VisualizerCirrus(ASCIIVisualizer):
    """Accumulates spectrum energy and paints it across the whole screen."""

    def __init__(self, canvas: Canvas | None = None) -> None:
        super().__init__(CIRRUS_DATA_SIZE, AudioDataStyle.SPECTRUM, canvas)
        self.canvas.cursor_visible = False
        self.start_offset = 0.0
        self.workspace = [0.0] * CIRRUS_DATA_SIZE

    def _intake(self, dt: float, data: Sequence[float]) -> None:
        if len(data) < CIRRUS_DATA_SIZE:
            raise IndexError(
                f"expected at least {CIRRUS_DATA_SIZE} values, got {len(data)}"
            )
        change = 1 - _DECAY * dt
        # The lowest bucket is noisy, so the first slot borrows the second.
        sources = [data[1], *data[1:CIRRUS_DATA_SIZE]]
        self.workspace = [
            value * change + sample * _INPUT_SCALAR * dt
            for value, sample in zip(self.workspace, sources)
        ]

    def _paint(self, x: int, y: int, value: float) -> None:
        draw = self.canvas.draw
        if value > 3:
            draw("X", x, y, Color.LIGHTMAGENTA)
        elif value > 1:
            draw("+", x, y, Color.LIGHTMAGENTA)
            draw("+", x, y - 1, Color.LIGHTMAGENTA)
        elif value > 0.6:
            draw("=", x, y, Color.LIGHTMAGENTA)
            draw("=", x, y + 1, Color.LIGHTMAGENTA)
        elif value > 0.3:
            draw("o", x, y, Color.MAGENTA)
        elif value > 0.2:
            draw("-", x, y, Color.MAGENTA)
        elif value > 0.1:
            draw(".", x, y, Color.MAGENTA)

    def update(self, dt: float, data: Sequence[float], is_active: bool) -> bool:
        """Decay the stored energy, add the new data and redraw."""
        self._intake(dt, data)

        width, height = self.width(), self.height()
        cells = ((x, y) for y in range(height) for x in range(width))
        indices = _bounce(int(self.start_offset), CIRRUS_DATA_SIZE)
        for (x, y), index in zip(cells, islice(indices, width * height)):
            self._paint(x, y, self.workspace[index])

        self.start_offset += dt * _MOVE_SPEED
        if self.start_offset >= CIRRUS_DATA_SIZE:
            self.start_offset = 0.0
        return True