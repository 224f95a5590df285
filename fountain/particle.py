"""Particle entity & per-tick physics.

A particle couples a mutable ``Transform`` with an immutable shape. Motion
is Euler-integrated in pixels per tick; there is no delta-time scaling.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fountain.constants import BOTTOM_SLACK
from fountain.shapes import Shape
from fountain.surface import DrawingSurface
from fountain.vector_math import Vector2, add


@dataclass
class Transform:
    pos: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    vel: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    accel: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    active: bool = True


@dataclass
class Particle:
    transform: Transform
    shape: Shape

    @property
    def active(self) -> bool:
        return self.transform.active

    def draw(self, surface: DrawingSurface) -> None:
        self.shape.draw(surface, self.transform.pos)


def advance(transform: Transform, screen_width: float, screen_height: float) -> None:
    """Advance ``transform`` by one tick.

    A particle above the top edge or more than ``BOTTOM_SLACK`` pixels below
    the bottom edge is retired instead of moved. Horizontal position is
    never checked. Positions are truncated toward zero after each step.
    """
    if not transform.active:
        return

    y = transform.pos.y
    if y < 0 or y > screen_height + BOTTOM_SLACK:
        transform.active = False
        return

    moved = add(transform.pos, transform.vel)
    transform.pos = Vector2(int(moved.x), int(moved.y))
    transform.vel = add(transform.vel, transform.accel)


__all__ = ["Transform", "Particle", "advance"]
