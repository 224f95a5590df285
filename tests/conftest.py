import os
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module imports (fountain, app)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless SDL so pygame surfaces & fonts work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class FakeBuffer:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.text = None


class RecordingSurface:
    """DrawingSurface stand-in that records every call.

    Text "measures" half the font size wide per character and one font
    size tall. Set ``record=False`` for long runs where only state matters.
    """

    def __init__(self, width=800, height=600, record=True):
        self.width = width
        self.height = height
        self.record = record
        self.calls = []

    def _rec(self, *call):
        if self.record:
            self.calls.append(call)

    def names(self):
        return [c[0] for c in self.calls]

    def clear(self):
        self._rec("clear")

    def fill_rect(self, rect, color):
        self._rec("fill_rect", tuple(rect), tuple(color))

    def stroke_rect(self, rect, color, width):
        self._rec("stroke_rect", tuple(rect), tuple(color), width)

    def fill_circle(self, center, radius, color):
        self._rec("fill_circle", tuple(center), radius, tuple(color))

    def stroke_circle(self, center, radius, color, width):
        self._rec("stroke_circle", tuple(center), radius, tuple(color), width)

    def draw_image_at(self, buffer, pos):
        self._rec("draw_image_at", buffer, tuple(pos))

    def create_offscreen_buffer(self, width, height):
        self._rec("create_offscreen_buffer", width, height)
        return FakeBuffer(width, height)

    def measure_text(self, text, font_size, font_family):
        self._rec("measure_text", text, font_size, font_family)
        return (len(text) * font_size // 2, font_size)

    def render_text(self, buffer, text, font_size, font_family, color, y_middle):
        buffer.text = text
        self._rec("render_text", text, font_size, font_family, tuple(color), y_middle)


class ManualScheduler:
    """FrameScheduler that runs frames only when told to."""

    def __init__(self):
        self.pending = None
        self.requests = 0

    def request_frame(self, callback):
        self.pending = callback
        self.requests += 1

    def run(self, frames=1):
        for _ in range(frames):
            callback, self.pending = self.pending, None
            if callback is None:
                return
            callback()


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def manual_scheduler():
    return ManualScheduler()


@pytest.fixture
def default_settings(tmp_path):
    from fountain.settings import Settings

    return Settings(path=str(tmp_path / "no_settings.json"))
