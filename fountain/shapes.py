"""Shape renderers.

Each shape is an immutable style record with a ``draw(surface, pos)``
method. Rectangles and glyph buffers are anchored at their top-left
corner; circles are anchored at their center.

``GlyphShape`` carries the buffer pre-rendered by ``create_glyph``; it is
excluded from equality so two glyphs with the same style compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Tuple, Union

from fountain.constants import DEFAULT_FONT_FAMILY
from fountain.surface import DrawingSurface
from fountain.text_buffer import TextBufferCache
from fountain.vector_math import Vector2

Color = Tuple[float, ...]


@dataclass(frozen=True)
class RectangleShape:
    width: int = 30
    height: int = 30
    border_width: int = 5
    fill_color: Color = (200, 220, 255, 0.9)
    border_color: Color = (80, 80, 155, 0.9)

    kind = "rectangle"

    def draw(self, surface: DrawingSurface, pos: Vector2) -> None:
        rect = (pos.x, pos.y, self.width, self.height)
        surface.fill_rect(rect, self.fill_color)
        surface.stroke_rect(rect, self.border_color, self.border_width)


@dataclass(frozen=True)
class CircleShape:
    radius: int = 20
    border_width: int = 5
    fill_color: Color = (250, 220, 255, 0.9)
    border_color: Color = (155, 80, 155, 0.9)

    kind = "circle"

    def draw(self, surface: DrawingSurface, pos: Vector2) -> None:
        center = (pos.x, pos.y)
        surface.fill_circle(center, self.radius, self.fill_color)
        surface.stroke_circle(center, self.radius, self.border_color, self.border_width)


@dataclass(frozen=True)
class GlyphShape:
    text: str = "M"
    size: int = 20
    font_family: str = DEFAULT_FONT_FAMILY
    fill_color: Color = (250, 220, 255)
    buffer: Any = field(default=None, compare=False, repr=False)

    kind = "glyph"

    def draw(self, surface: DrawingSurface, pos: Vector2) -> None:
        surface.draw_image_at(self.buffer, (pos.x, pos.y))


Shape = Union[RectangleShape, CircleShape, GlyphShape]


def create_rectangle(**style) -> RectangleShape:
    return RectangleShape(**style)


def create_circle(**style) -> CircleShape:
    return CircleShape(**style)


def create_glyph(text_cache: TextBufferCache, **style) -> GlyphShape:
    """Build a glyph and pre-render its text exactly once."""
    shape = GlyphShape(**style)
    buffer = text_cache.render_to_buffer(shape.text, shape.size, shape.font_family, shape.fill_color)
    return replace(shape, buffer=buffer)


def draw_shape(shape: Shape, pos: Vector2, surface: DrawingSurface) -> None:
    shape.draw(surface, pos)


__all__ = [
    "RectangleShape",
    "CircleShape",
    "GlyphShape",
    "Shape",
    "create_rectangle",
    "create_circle",
    "create_glyph",
    "draw_shape",
]
