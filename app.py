"""Application entry harness.

Opens a pygame window (full-screen when configured), starts the fountain
animation on it and runs the frame loop until the window is closed.
"""

from __future__ import annotations

import pygame

from fountain.animation import start
from fountain.logger import get_logger
from fountain.scheduler import PygameFrameScheduler
from fountain.settings import Settings

log = get_logger("app")


def main() -> int:
    settings = Settings()
    pygame.init()
    pygame.display.set_caption("Emoji Fountain")
    if settings.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode(settings.window_size, pygame.RESIZABLE)
    width, height = screen.get_size()

    scheduler = PygameFrameScheduler(fps=settings.fps)
    anim = start(screen, width, height, scheduler=scheduler, settings=settings)
    if anim is None:
        pygame.quit()
        return 1

    scheduler.run()
    anim.stop()

    # Graceful shutdown
    pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
