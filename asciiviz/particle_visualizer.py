"""Two particle fountains pushed apart by the music."""

from __future__ import annotations

import random
from typing import Sequence

from asciiviz.particles import Particle, ParticleSystem
from asciiviz.visualizer import ASCIIVisualizer, AudioDataStyle, Canvas, Color

DEFAULT_DATA_SIZE = 1024

_Glyph = tuple[Color, str]


class VisualSystem(ParticleSystem[_Glyph]):
    """Particle system whose particles fall, fade in colour and draw themselves."""

    def __init__(
        self,
        x: float,
        y: float,
        canvas: Canvas,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(30, 200, 10, True, (Color.GREY, "p"))
        self.canvas = canvas
        self.rng = rng if rng is not None else random.Random()
        self.set_pos(x, y)

    def on_update_end(self) -> None:
        """Apply gravity, recolour by remaining life and draw every particle."""
        for particle in self.particles:
            particle.vel_y += 0.0008
            life_fraction = particle.life / float(self.max_life)
            color = Color.LIGHTCYAN if life_fraction > 0.45 else Color.CYAN
            particle.data = (color, particle.data[1])
            self.canvas.draw(particle.data[1], particle.pos_x, particle.pos_y, color)

    def adjust_particle(self, particle: Particle[_Glyph]) -> None:
        """Give a new particle a random velocity and a random glyph."""
        particle.vel_x = (self.rng.randrange(20) - 10) / 160.0
        particle.vel_y = (self.rng.randrange(20) - 10) / 160.0
        code = self.rng.randrange(255 - 32) + 32
        particle.data = (particle.data[0], bytes([code]).decode("cp437"))


class VisualizerParticle(ASCIIVisualizer):
    """Moves two particle systems apart and speeds up spawning with volume."""

    def __init__(
        self,
        canvas: Canvas | None = None,
        rng: random.Random | None = None,
        data_size: int = DEFAULT_DATA_SIZE,
    ) -> None:
        super().__init__(data_size, AudioDataStyle.WAVEFORM, canvas)
        rng = rng if rng is not None else random.Random()
        width, height = self.width(), self.height()
        self.vs1 = VisualSystem(width / 2.0, height / 4.0, self.canvas, rng)
        self.vs2 = VisualSystem(width / 2.0, height / 4.0, self.canvas, rng)
        self.canvas.cursor_visible = False

    def on_resize(self, new_width: int, new_height: int) -> None:
        """Resize the canvas and recentre both systems."""
        super().on_resize(new_width, new_height)
        for system in (self.vs1, self.vs2):
            system.set_pos(new_width / 2.0, new_height / 4.0)

    def update(self, dt: float, data: Sequence[float], is_active: bool) -> bool:
        """Place and pace both systems from the first eight samples, then step them."""
        if len(data) < 8:
            raise IndexError(f"expected at least 8 values, got {len(data)}")
        average = sum(data[:8]) / 8.0
        width = self.width()
        position = average * (width / 2.3)
        intensity = average * 8 * 50
        spawn_delay = int(100 - intensity)

        self.vs1.pos_x = width / 2.0 + position
        self.vs2.pos_x = width / 2.0 - position
        for system in (self.vs1, self.vs2):
            system.spawn_delay = spawn_delay
            system.update()
        return True