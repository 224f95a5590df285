"""Off-screen text pre-rendering.

Glyph shapes render their text once into a buffer sized to the measured
bounding box and blit that buffer every frame afterwards, so text layout
never runs inside the frame loop. Buffers are not shared: every
``render_to_buffer`` call allocates a new one, owned by the caller.

Measurement goes through the drawing surface's font objects, created
lazily on first use and kept for the lifetime of the surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fountain.constants import DEFAULT_FONT_FAMILY
from fountain.surface import ColorLike, DrawingSurface


@dataclass(frozen=True)
class TextMetrics:
    width: int
    height: int


class TextBufferCache:
    def __init__(self, surface: DrawingSurface) -> None:
        self.surface = surface
        self._stats = {"measure_calls": 0, "buffers_created": 0}

    def measure(self, text: str, font_size: int, font_family: str = DEFAULT_FONT_FAMILY) -> TextMetrics:
        self._stats["measure_calls"] += 1
        w, h = self.surface.measure_text(text, font_size, font_family)
        return TextMetrics(int(w), int(h))

    def render_to_buffer(
        self,
        text: str = "A",
        font_size: int = 24,
        font_family: str = DEFAULT_FONT_FAMILY,
        fill_color: ColorLike = (250, 220, 255),
    ) -> Any:
        m = self.measure(text, font_size, font_family)
        buffer = self.surface.create_offscreen_buffer(m.width, m.height)
        # Vertical middle of the text sits at half the buffer height.
        self.surface.render_text(buffer, text, font_size, font_family, fill_color, m.height / 2)
        self._stats["buffers_created"] += 1
        return buffer

    def get_stats(self) -> dict:
        return dict(self._stats)


__all__ = ["TextBufferCache", "TextMetrics"]
