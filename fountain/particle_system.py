"""Fixed-size particle pool.

Owns ``num_particles`` slots indexed ``0..N-1``. Slots are filled once by
``populate()`` and never added or removed afterwards; ``recycle()`` writes
a fresh ``Transform`` into retired slots in place.

Recycling keeps each slot's shape by default, so a slot that started as a
pumpkin glyph stays a pumpkin. Pass ``reshuffle_on_recycle=True`` to draw
a new shape as well.

Minimal public API: ``populate()``, ``draw_and_update()``, ``recycle()``
plus the spawn helpers used by both.
"""

from __future__ import annotations

from typing import List

from fountain.constants import (
    CIRCLE_THRESHOLD,
    DEFAULT_FONT_FAMILY,
    GLYPH_THRESHOLD,
    GLYPH_SIZE_MAX,
    GLYPH_SIZE_MIN,
    GRAVITY_ACCEL,
    NUM_PARTICLES,
    SPAWN_CIRCLE_RADIUS,
    SPAWN_SPEED_MAX,
    SPAWN_UPWARD_BOOST,
    SPAWN_X_RANGE,
    SPAWN_Y_RANGE,
)
from fountain.logger import get_logger
from fountain.particle import Particle, Transform, advance
from fountain.rng_service import RNGService
from fountain.shapes import Shape, create_circle, create_glyph, create_rectangle
from fountain.surface import DrawingSurface
from fountain.text_buffer import TextBufferCache
from fountain.vector_math import Vector2, random_unit_vector, scale

log = get_logger("particles")


class ParticleSystem:
    def __init__(
        self,
        surface: DrawingSurface,
        text_cache: TextBufferCache,
        width: float,
        height: float,
        rng: RNGService | None = None,
        num_particles: int = NUM_PARTICLES,
        gravity: float = GRAVITY_ACCEL,
        font_family: str = DEFAULT_FONT_FAMILY,
        reshuffle_on_recycle: bool = False,
    ):
        self.surface = surface
        self.text_cache = text_cache
        self.width = width
        self.height = height
        self.rng = rng or RNGService.get()
        self.num_particles = num_particles
        self.gravity = gravity
        self.font_family = font_family
        self.reshuffle_on_recycle = reshuffle_on_recycle
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    # ---- Spawn helpers ----
    def spawn_point(self) -> Vector2:
        return Vector2(self.width / 2, self.height)

    def spawn_velocity(self) -> Vector2:
        """Upward-biased launch velocity; ``y`` is always negative."""
        direction = random_unit_vector(SPAWN_X_RANGE, SPAWN_Y_RANGE, rng=self.rng)
        if direction.y > 0:
            direction = Vector2(direction.x, -direction.y)
        speed = self.rng.uniform(0, SPAWN_SPEED_MAX)
        vel = scale(speed, direction)
        return Vector2(vel.x, vel.y - SPAWN_UPWARD_BOOST)

    def spawn_transform(self) -> Transform:
        return Transform(
            pos=self.spawn_point(),
            vel=self.spawn_velocity(),
            accel=Vector2(0, self.gravity),
            active=True,
        )

    def spawn_shape(self) -> Shape:
        """Single draw over ordered thresholds: circle, glyph, rectangle."""
        p = self.rng.random()
        if p < CIRCLE_THRESHOLD:
            return create_circle(
                radius=SPAWN_CIRCLE_RADIUS,
                fill_color=self.rng.random_color(),
                border_color=self.rng.random_color(),
            )
        if p < GLYPH_THRESHOLD:
            return create_glyph(
                self.text_cache,
                text=self.rng.random_emoji(),
                fill_color=self.rng.random_color(),
                size=self.rng.randint(GLYPH_SIZE_MIN, GLYPH_SIZE_MAX - 1),
                font_family=self.font_family,
            )
        return create_rectangle(
            fill_color=self.rng.random_color(),
            border_color=self.rng.random_color(),
        )

    def spawn_particle(self) -> Particle:
        return Particle(self.spawn_transform(), self.spawn_shape())

    # ---- Pool lifecycle ----
    def populate(self) -> None:
        self.particles = [self.spawn_particle() for _ in range(self.num_particles)]
        log.info(f"Particle pool populated with {self.num_particles} particles at {tuple(self.spawn_point())}")

    def recycle(self) -> int:
        """Re-launch every retired slot in place; returns how many were recycled."""
        recycled = 0
        for p in self.particles:
            if p.transform.active:
                continue
            p.transform = self.spawn_transform()
            if self.reshuffle_on_recycle:
                p.shape = self.spawn_shape()
            recycled += 1
        return recycled

    def draw_and_update(self) -> None:
        # Draw first: a particle shows where the previous tick left it.
        for p in self.particles:
            p.draw(self.surface)
            advance(p.transform, self.width, self.height)

    def get_counts(self) -> dict:
        active = sum(1 for p in self.particles if p.transform.active)
        return {"active": active, "retired": len(self.particles) - active}


__all__ = ["ParticleSystem"]
