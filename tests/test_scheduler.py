import pygame
import pytest

import app
from fountain.scheduler import PygameFrameScheduler


@pytest.fixture
def pygame_display():
    pygame.init()
    pygame.display.set_mode((64, 48))
    yield
    pygame.quit()


def test_run_once_runs_pending_callback_once():
    sched = PygameFrameScheduler()
    calls = []
    sched.request_frame(lambda: calls.append(1))
    assert sched.run_once() is True
    assert sched.run_once() is False
    assert calls == [1]


def test_run_stops_at_max_frames(pygame_display):
    sched = PygameFrameScheduler(fps=1000, max_frames=5)
    ticks = []

    def tick():
        ticks.append(len(ticks))
        sched.request_frame(tick)

    sched.request_frame(tick)
    sched.run()
    assert len(ticks) == 5
    assert sched.running is False


def test_run_stops_when_nothing_requested(pygame_display):
    sched = PygameFrameScheduler(fps=1000)
    sched.request_frame(lambda: None)
    sched.run()
    assert sched.frames_run == 1


def test_window_close_ends_loop(pygame_display):
    sched = PygameFrameScheduler(fps=1000)

    def tick():
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        sched.request_frame(tick)

    sched.request_frame(tick)
    sched.run()
    assert sched.frames_run == 1


def test_app_main_runs_bounded(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # no data/settings.json here
    monkeypatch.setattr(app, "PygameFrameScheduler", lambda fps: PygameFrameScheduler(fps=1000, max_frames=3))
    assert app.main() == 0
