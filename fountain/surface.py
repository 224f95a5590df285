"""Drawing surface interface & pygame adapter.

Shapes, the text buffer cache and the animation loop depend on the narrow
``DrawingSurface`` protocol instead of pygame directly. This keeps them
testable with a recording fake (see ``tests/conftest.py``) while
``PygameSurface`` does the real work at run time.

Colors are ``(r, g, b)`` or ``(r, g, b, a)`` with ``a`` in [0, 1]. Colors
with ``a < 1`` are blended through a small SRCALPHA scratch surface since
``pygame.draw`` writes alpha instead of blending on opaque targets.

Circles are ``2r + 1`` pixels across, so circle scratch surfaces are too.

Strokes are centered on the outline (half the width inside, half outside)
to match how a canvas strokes paths; ``pygame.draw`` alone would draw the
whole width inside.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Tuple

import pygame

from fountain.constants import BACKGROUND_COLOR
from fountain.logger import get_logger

log = get_logger("surface")

ColorLike = Sequence[float]
Rect = Tuple[float, float, float, float]
Point = Tuple[float, float]


class SurfaceUnavailableError(RuntimeError):
    """The host handle cannot provide a 2D drawing surface."""


class DrawingSurface(Protocol):
    @property
    def width(self) -> int: ...
    @property
    def height(self) -> int: ...
    def clear(self) -> None: ...
    def fill_rect(self, rect: Rect, color: ColorLike) -> None: ...
    def stroke_rect(self, rect: Rect, color: ColorLike, width: int) -> None: ...
    def fill_circle(self, center: Point, radius: float, color: ColorLike) -> None: ...
    def stroke_circle(self, center: Point, radius: float, color: ColorLike, width: int) -> None: ...
    def draw_image_at(self, buffer: Any, pos: Point) -> None: ...
    def create_offscreen_buffer(self, width: int, height: int) -> Any: ...
    def measure_text(self, text: str, font_size: int, font_family: str) -> Tuple[int, int]: ...
    def render_text(
        self, buffer: Any, text: str, font_size: int, font_family: str, color: ColorLike, y_middle: float
    ) -> None: ...


def to_rgba(color: ColorLike) -> Tuple[int, int, int, int]:
    """Convert an ``(r, g, b[, a])`` color with float alpha to pygame's 0-255 form."""
    r, g, b = (int(c) for c in color[:3])
    a = color[3] if len(color) > 3 else 1
    return r, g, b, max(0, min(255, round(a * 255)))


class PygameSurface:
    """``DrawingSurface`` over a ``pygame.Surface``."""

    def __init__(self, target: pygame.Surface, background=BACKGROUND_COLOR) -> None:
        self.target = target
        self.background = tuple(background)
        # Font objects double as the text measurement facility; created lazily.
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    @property
    def width(self) -> int:
        return self.target.get_width()

    @property
    def height(self) -> int:
        return self.target.get_height()

    def clear(self) -> None:
        self.target.fill(self.background)

    # ---- Primitive drawing ----
    def _blend(self, size: Tuple[int, int], dest: Point, rgba, paint) -> None:
        scratch = pygame.Surface(size, pygame.SRCALPHA)
        paint(scratch, rgba)
        self.target.blit(scratch, (int(dest[0]), int(dest[1])))

    def fill_rect(self, rect: Rect, color: ColorLike) -> None:
        x, y, w, h = (int(v) for v in rect)
        rgba = to_rgba(color)
        if rgba[3] == 255:
            pygame.draw.rect(self.target, rgba[:3], (x, y, w, h))
            return
        self._blend((w, h), (x, y), rgba, lambda s, c: s.fill(c))

    def stroke_rect(self, rect: Rect, color: ColorLike, width: int) -> None:
        x, y, w, h = (int(v) for v in rect)
        half = width // 2
        outer = pygame.Rect(x - half, y - half, w + width, h + width)
        rgba = to_rgba(color)
        if rgba[3] == 255:
            pygame.draw.rect(self.target, rgba[:3], outer, width)
            return
        self._blend(
            outer.size,
            outer.topleft,
            rgba,
            lambda s, c: pygame.draw.rect(s, c, s.get_rect(), width),
        )

    def fill_circle(self, center: Point, radius: float, color: ColorLike) -> None:
        cx, cy = int(center[0]), int(center[1])
        r = int(radius)
        rgba = to_rgba(color)
        if rgba[3] == 255:
            pygame.draw.circle(self.target, rgba[:3], (cx, cy), r)
            return
        self._blend((r * 2 + 1, r * 2 + 1), (cx - r, cy - r), rgba, lambda s, c: pygame.draw.circle(s, c, (r, r), r))

    def stroke_circle(self, center: Point, radius: float, color: ColorLike, width: int) -> None:
        cx, cy = int(center[0]), int(center[1])
        outer = int(radius) + width // 2
        rgba = to_rgba(color)
        if rgba[3] == 255:
            pygame.draw.circle(self.target, rgba[:3], (cx, cy), outer, width)
            return
        self._blend(
            (outer * 2 + 1, outer * 2 + 1),
            (cx - outer, cy - outer),
            rgba,
            lambda s, c: pygame.draw.circle(s, c, (outer, outer), outer, width),
        )

    def draw_image_at(self, buffer: pygame.Surface, pos: Point) -> None:
        self.target.blit(buffer, (int(pos[0]), int(pos[1])))

    # ---- Off-screen buffers & text ----
    def create_offscreen_buffer(self, width: int, height: int) -> pygame.Surface:
        return pygame.Surface((int(width), int(height)), pygame.SRCALPHA)

    def _font(self, font_size: int, font_family: str) -> pygame.font.Font:
        key = (font_family, int(font_size))
        font = self._fonts.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(font_family, int(font_size))
            self._fonts[key] = font
        return font

    def measure_text(self, text: str, font_size: int, font_family: str) -> Tuple[int, int]:
        return self._font(font_size, font_family).size(text)

    def render_text(
        self,
        buffer: pygame.Surface,
        text: str,
        font_size: int,
        font_family: str,
        color: ColorLike,
        y_middle: float,
    ) -> None:
        rgba = to_rgba(color)
        rendered = self._font(font_size, font_family).render(text, True, rgba[:3])
        if rgba[3] < 255:
            rendered.set_alpha(rgba[3])
        buffer.blit(rendered, (0, int(y_middle - rendered.get_height() / 2)))


def bind_surface(handle, width: int | None = None, height: int | None = None, fullscreen: bool = True, **kwargs):
    """Turn a host surface handle into a ``PygameSurface``.

    In full-screen mode the window is resized to ``width x height`` when the
    handle is the display surface; other surfaces keep their own size.

    Raises:
        SurfaceUnavailableError: if ``handle`` is not a live ``pygame.Surface``.
    """
    if not isinstance(handle, pygame.Surface):
        raise SurfaceUnavailableError(f"No 2D drawing surface available from {type(handle).__name__}")
    try:
        size = handle.get_size()
    except pygame.error as e:  # display surface already quit
        raise SurfaceUnavailableError(str(e)) from e
    if fullscreen and width and height and size != (width, height):
        if handle is pygame.display.get_surface():
            handle = pygame.display.set_mode((width, height), handle.get_flags())
            log.info(f"Display resized to {width}x{height}")
        else:
            log.warn(f"Cannot resize off-screen surface; keeping {size[0]}x{size[1]}")
    return PygameSurface(handle, **kwargs)


__all__ = [
    "DrawingSurface",
    "PygameSurface",
    "SurfaceUnavailableError",
    "bind_surface",
    "to_rgba",
]
