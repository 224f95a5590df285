"""Per-frame animation loop.

Each tick, in order:

1. Clear the whole surface.
2. For every pool slot: draw at the current position, then advance physics.
3. Every ``recycle_interval`` ticks (counter modulo, starting with tick 0):
   re-launch retired particles.
4. Request the next frame.

``start()`` wires a host surface handle, the pool and a scheduler
together. If the handle cannot be drawn on, the error is logged once and
no frame is ever scheduled.
"""

from __future__ import annotations

from typing import Optional

from fountain.constants import LOG_THROTTLE_FRAMES
from fountain.logger import get_logger
from fountain.particle_system import ParticleSystem
from fountain.rng_service import RNGService
from fountain.scheduler import FrameScheduler, PygameFrameScheduler
from fountain.settings import Settings
from fountain.surface import DrawingSurface, SurfaceUnavailableError, bind_surface
from fountain.text_buffer import TextBufferCache

log = get_logger("anim")


class Animation:
    def __init__(
        self,
        surface: DrawingSurface,
        scheduler: FrameScheduler,
        settings: Settings | None = None,
        rng: RNGService | None = None,
        text_cache: TextBufferCache | None = None,
    ):
        self.surface = surface
        self.scheduler = scheduler
        self.settings = settings or Settings()
        if rng is None:
            rng = RNGService.get()
            if self.settings.seed is not None:
                rng.seed(self.settings.seed)
        self.rng = rng
        self.text_cache = text_cache or TextBufferCache(surface)
        self.particles = ParticleSystem(
            surface,
            self.text_cache,
            surface.width,
            surface.height,
            rng=rng,
            num_particles=self.settings.num_particles,
            gravity=self.settings.gravity,
            font_family=self.settings.font_family,
            reshuffle_on_recycle=self.settings.reshuffle_on_recycle,
        )
        self.recycle_interval = self.settings.recycle_interval
        self.frame_idx = 0
        self.running = False

    def begin(self) -> None:
        self.particles.populate()
        self.running = True
        self.scheduler.request_frame(self.tick)

    def tick(self) -> None:
        if not self.running:
            return
        self.surface.clear()
        self.particles.draw_and_update()

        if self.frame_idx % self.recycle_interval == 0:
            self.particles.recycle()

        # Hot loop: throttle logs
        if self.frame_idx % LOG_THROTTLE_FRAMES == 0:
            log.debug(f"Frame {self.frame_idx} | {self.particles.get_counts()}")

        self.frame_idx += 1
        self.scheduler.request_frame(self.tick)

    def stop(self) -> None:
        """Stop re-requesting frames; the pending one becomes a no-op."""
        if self.running:
            log.info(f"Animation stopped after {self.frame_idx} frames")
        self.running = False


def start(
    surface_handle,
    width: int | None = None,
    height: int | None = None,
    fullscreen: bool | None = None,
    scheduler: FrameScheduler | None = None,
    settings: Settings | None = None,
    rng: RNGService | None = None,
) -> Optional[Animation]:
    """Bind ``surface_handle``, populate the pool and schedule the first tick.

    With ``fullscreen`` (default: ``settings.fullscreen``) the surface is
    sized to ``width x height``; otherwise its own dimensions are used.
    Returns the running ``Animation``, or ``None`` when no drawing surface
    is available.
    """
    settings = settings or Settings()
    if fullscreen is None:
        fullscreen = settings.fullscreen
    try:
        surface = bind_surface(
            surface_handle,
            width,
            height,
            fullscreen=fullscreen,
            background=settings.background_color,
        )
    except SurfaceUnavailableError as e:
        log.error("No drawing surface available; animation not started:", e)
        return None

    scheduler = scheduler or PygameFrameScheduler(fps=settings.fps)
    anim = Animation(surface, scheduler, settings=settings, rng=rng)
    anim.begin()
    log.info(f"Animation started on {surface.width}x{surface.height} surface")
    return anim


__all__ = ["Animation", "start"]
