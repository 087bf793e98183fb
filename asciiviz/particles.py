"""A small generic particle system driven one step per update."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

PARTICLE_LIFE_DEFAULT = 100


@dataclass
class Particle(Generic[T]):
    """A single particle carrying arbitrary payload data."""

    data: T
    pos_x: float = 0.0
    pos_y: float = 0.0
    vel_x: float = 0.0
    vel_y: float = 0.0
    life: int = PARTICLE_LIFE_DEFAULT
    active: bool = True


class ParticleSystem(Generic[T]):
    """Spawns, moves and retires particles; subclasses customise via hooks."""

    def __init__(
        self,
        max_particles: int,
        life: int,
        spawn_delay: int,
        loops: bool,
        default: T,
    ) -> None:
        self.pos_x = 0.0
        self.pos_y = 0.0
        self.max_particles = max_particles
        self.max_life = life
        self.spawn_delay = spawn_delay
        self.spawn_counter = 0
        self.is_looping = loops
        self.default = default
        self.particles: list[Particle[T]] = []

    def update(self) -> None:
        """Advance the system by one step."""
        self.on_update_start()

        if self.is_looping:
            if self.spawn_delay == 0:
                while len(self.particles) < self.max_particles:
                    self.add_particle()
            else:
                self.spawn_counter += 1
                if self.spawn_counter >= self.spawn_delay:
                    self.add_particle()
                    self.spawn_counter = 0

        for particle in self.particles:
            particle.life -= 1
            if particle.life < 0:
                particle.active = False
            particle.pos_x += particle.vel_x
            particle.pos_y += particle.vel_y

        self.particles = [p for p in self.particles if p.active]

        self.on_update_end()

    def add_particle(self) -> Particle[T]:
        """Create a particle at the system position and add it."""
        particle = Particle(
            copy.copy(self.default),
            self.pos_x,
            self.pos_y,
            0.0,
            1.0,
            self.max_life,
        )
        self.adjust_particle(particle)
        self.particles.append(particle)
        return particle

    def adjust_particle(self, particle: Particle[T]) -> None:
        """Hook for customising a freshly created particle."""

    def on_update_start(self) -> None:
        """Hook run at the start of every update."""

    def on_update_end(self) -> None:
        """Hook run at the end of every update."""

    def set_pos(self, x: float, y: float) -> None:
        """Move the spawn point."""
        self.pos_x = x
        self.pos_y = y