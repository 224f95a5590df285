import json
import os

from fountain import constants as C
from fountain.logger import get_logger

log = get_logger("settings")


class Settings:
    """Animation configuration.

    Defaults come from ``fountain.constants``; an optional JSON file
    overlays them. The file is only ever read: the animation keeps no
    persistent state.
    """

    SETTINGS_FILE = "data/settings.json"

    def __init__(self, path: str | None = None):
        self.num_particles = C.NUM_PARTICLES
        self.recycle_interval = C.RECYCLE_INTERVAL
        self.fullscreen = False
        self.window_width, self.window_height = C.DEFAULT_WINDOW_SIZE
        self.fps = C.FPS
        self.gravity = C.GRAVITY_ACCEL
        self.font_family = C.DEFAULT_FONT_FAMILY
        # Recycled particles keep their shape unless this is set.
        self.reshuffle_on_recycle = False
        self.seed = None
        self.background_color = C.BACKGROUND_COLOR
        if path is not None:
            self.SETTINGS_FILE = path
        self.load_settings()

    def load_settings(self):
        """Overlay values from the JSON file, if there is one."""
        if not os.path.exists(self.SETTINGS_FILE):
            log.debug("No settings file at", self.SETTINGS_FILE, "- using defaults")
            return
        try:
            with open(self.SETTINGS_FILE, "r") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            log.warn("Error loading settings; using defaults", e)
            return
        if not isinstance(data, dict):
            log.warn("Settings file is not a JSON object; using defaults")
            return
        self.apply(data)

    def apply(self, data: dict):
        """Overlay ``data``; a key whose value cannot be converted keeps its current value."""
        self._set(data, "num_particles", _at_least_one)
        self._set(data, "recycle_interval", _at_least_one)
        self._set(data, "fullscreen", bool)
        self._set(data, "window_width", _at_least_one)
        self._set(data, "window_height", _at_least_one)
        self._set(data, "fps", _at_least_one)
        self._set(data, "gravity", float)
        self._set(data, "font_family", str)
        self._set(data, "reshuffle_on_recycle", bool)
        self._set(data, "seed", _seed)
        self._set(data, "background_color", _rgb)
        log.debug("Settings applied", sorted(data.keys()))

    def _set(self, data: dict, key: str, convert):
        if key not in data:
            return
        try:
            setattr(self, key, convert(data[key]))
        except (TypeError, ValueError, OverflowError) as e:
            log.warn(f"Invalid value for {key!r} ({data[key]!r}); keeping {getattr(self, key)!r}", e)

    @property
    def window_size(self):
        return self.window_width, self.window_height


def _at_least_one(value) -> int:
    return max(1, int(value))


def _seed(value):
    if value is None or isinstance(value, (int, float, str)):
        return value
    raise TypeError(f"seed must be a number or string, not {type(value).__name__}")


def _rgb(value) -> tuple:
    color = tuple(int(c) for c in value)
    if len(color) != 3 or not all(0 <= c <= 255 for c in color):
        raise ValueError("background_color needs three channels in [0, 255]")
    return color
