"""Spectrum bars with a dim reflection underneath."""

from __future__ import annotations

from typing import Sequence

from asciiviz.visualizer import ASCIIVisualizer, AudioDataStyle, Canvas, Color

_MIN_HEIGHT = 55  # below this detail stops mattering
_OVERALL_SCALAR = 1.5
_LEFT_GLYPH = 174
_RIGHT_GLYPH = 175


class VisualizerSpectrum(ASCIIVisualizer):
    """One bar per column, coloured by height, mirrored below a reflection line."""

    def __init__(self, canvas: Canvas | None = None) -> None:
        canvas = canvas if canvas is not None else Canvas()
        super().__init__(canvas.width, AudioDataStyle.SPECTRUM, canvas)
        self.canvas.cursor_visible = False

    def update(self, dt: float, data: Sequence[float], is_active: bool) -> bool:
        """Draw a bar for every column from values in the range 0 to 1."""
        width = self.width()
        if len(data) < width:
            raise IndexError(f"expected at least {width} values, got {len(data)}")
        height = max(_MIN_HEIGHT, self.height())

        data_scalar = (height / 5.0) * 2 * _OVERALL_SCALAR
        shadow_scalar = data_scalar / 3 * _OVERALL_SCALAR
        start_height = int((self.height() / 5.0) * 3 * 1.1)

        for x, value in enumerate(data[:width]):
            top = int(round(value * data_scalar))
            bottom = int(round(value * shadow_scalar))
            glyph = _LEFT_GLYPH if x % 2 == 0 else _RIGHT_GLYPH

            for y in range(bottom):
                self.canvas.draw(glyph, x, start_height + y, Color.DARKGREY)

            for y in range(top):
                fraction = y / float(top)
                if fraction > 0.7:
                    color = Color.GREY
                elif fraction > 0.4:
                    color = Color.LIGHTCYAN
                else:
                    color = Color.BLUE
                self.canvas.draw(glyph, x, start_height - y, color)
        return True