"""Frame scheduling.

``request_frame(callback)`` asks for ``callback`` to run once before the
next present; the animation re-requests on every tick to keep looping.
``PygameFrameScheduler.run()`` is the host loop: it polls events, paces
frames with ``pygame.time.Clock`` and flips the display. Closing the
window (or reaching ``max_frames``) ends the loop.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

import pygame

from fountain.constants import FPS
from fountain.logger import get_logger

log = get_logger("scheduler")

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> None: ...


class PygameFrameScheduler:
    def __init__(self, fps: int = FPS, max_frames: int | None = None) -> None:
        self.fps = fps
        self.max_frames = max_frames
        self.frames_run = 0
        self.running = False
        self._pending: Optional[FrameCallback] = None
        self._clock = pygame.time.Clock()

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending = callback

    def run_once(self) -> bool:
        """Run one frame; returns False once nothing is scheduled."""
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback()
        self.frames_run += 1
        return True

    def run(self) -> None:
        self.running = True
        log.info(f"Frame loop started ({self.fps} fps cap)")
        while self.running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
            if not self.running:
                break
            self._clock.tick(self.fps)
            if not self.run_once():
                break
            if pygame.display.get_surface() is not None:
                pygame.display.flip()
            if self.max_frames is not None and self.frames_run >= self.max_frames:
                break
        self.running = False
        log.info(f"Frame loop finished after {self.frames_run} frames")

    def stop(self) -> None:
        self.running = False


__all__ = ["FrameScheduler", "PygameFrameScheduler", "FrameCallback"]
