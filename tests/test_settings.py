import json

from fountain import constants as C
from fountain.settings import Settings


def test_defaults_without_file(tmp_path):
    s = Settings(path=str(tmp_path / "missing.json"))
    assert s.num_particles == C.NUM_PARTICLES
    assert s.recycle_interval == C.RECYCLE_INTERVAL
    assert s.gravity == C.GRAVITY_ACCEL
    assert s.reshuffle_on_recycle is False
    assert s.seed is None
    assert not (tmp_path / "missing.json").exists()  # never written


def test_file_overlays_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"num_particles": 50, "seed": 7, "reshuffle_on_recycle": True, "unknown": 1}))
    s = Settings(path=str(path))
    assert s.num_particles == 50
    assert s.seed == 7
    assert s.reshuffle_on_recycle is True
    assert s.recycle_interval == C.RECYCLE_INTERVAL


def test_values_clamped(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"num_particles": 0, "recycle_interval": -4, "fps": 0}))
    s = Settings(path=str(path))
    assert (s.num_particles, s.recycle_interval, s.fps) == (1, 1, 1)


def test_bad_json_keeps_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    s = Settings(path=str(path))
    assert s.num_particles == C.NUM_PARTICLES
    assert path.read_text() == "{not json"


def test_bad_values_keep_defaults_per_key(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "fps": "fast",
                "background_color": 5,
                "seed": [1, 2],
                "gravity": "heavy",
                "window_width": None,
                "num_particles": 40,
            }
        )
    )
    s = Settings(path=str(path))
    assert s.fps == C.FPS
    assert s.background_color == C.BACKGROUND_COLOR
    assert s.seed is None
    assert s.gravity == C.GRAVITY_ACCEL
    assert s.window_width == C.DEFAULT_WINDOW_SIZE[0]
    # Valid keys still apply
    assert s.num_particles == 40


def test_bad_values_are_warned(tmp_path, monkeypatch):
    import io

    from fountain import settings as settings_module

    buf = io.StringIO()
    monkeypatch.setattr(settings_module.log, "stream", buf)
    path = tmp_path / "settings.json"
    path.write_text('{"fps": "fast", "recycle_interval": Infinity, "background_color": [1, 2]}')
    s = Settings(path=str(path))
    assert (s.fps, s.recycle_interval, s.background_color) == (C.FPS, C.RECYCLE_INTERVAL, C.BACKGROUND_COLOR)
    out = buf.getvalue()
    assert out.count("WARN") == 3
    assert "'fps'" in out and "'recycle_interval'" in out and "'background_color'" in out
