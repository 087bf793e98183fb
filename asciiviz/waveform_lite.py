"""A sparse waveform drawn as a single dotted line."""

from __future__ import annotations

from typing import Sequence

from asciiviz.visualizer import ASCIIVisualizer, AudioDataStyle, Canvas, Color

DEFAULT_DATA_SIZE = 1024
SCALE_FACTOR = 8

_SYMBOL = "o"


class VisualizerWaveformLite(ASCIIVisualizer):
    """Downsamples the waveform and plots one point per bin around the middle row."""

    def __init__(
        self,
        canvas: Canvas | None = None,
        data_size: int = DEFAULT_DATA_SIZE,
    ) -> None:
        if data_size <= 0 or data_size % SCALE_FACTOR:
            raise ValueError(
                f"data size must be a positive multiple of {SCALE_FACTOR}, got {data_size}"
            )
        super().__init__(data_size, AudioDataStyle.WAVEFORM, canvas)
        self.canvas.cursor_visible = False
        self.workspace = [0.0] * (data_size // SCALE_FACTOR)

    def update(self, dt: float, data: Sequence[float], is_active: bool) -> bool:
        """Plot the last sample of every bin, centred horizontally."""
        size = self.audio_data_size
        if len(data) < size:
            raise IndexError(f"expected at least {size} values, got {len(data)}")

        height_scalar = 5.0 * SCALE_FACTOR
        half_height = self.height() // 2
        width = self.width()
        x_start = width // 2 - (size // SCALE_FACTOR) // 2

        self.workspace = [
            data[last] * height_scalar / SCALE_FACTOR
            for last in range(SCALE_FACTOR - 1, size, SCALE_FACTOR)
        ]

        for i, value in enumerate(self.workspace):
            x = x_start + i
            if 0 < x < width:
                self.canvas.draw(_SYMBOL, x, int(half_height - value), Color.LIGHTBLUE)
        return True