"""Animation and tuning constants.

Centralizes numeric tuning values so the pool, physics and spawn logic
share one source of truth. ``Settings`` may override the ones marked
(configurable).
"""

# Pool
NUM_PARTICLES = 20  # fixed pool size (configurable)
RECYCLE_INTERVAL = 10  # retired particles are recycled every Nth tick (configurable)

# Physics (units are pixels per tick)
GRAVITY_ACCEL = 0.3  # downward acceleration per tick (configurable)
BOTTOM_SLACK = 70  # pixels below the screen before a falling particle retires

# Launch velocity
SPAWN_X_RANGE = 1  # horizontal spread of the launch direction
SPAWN_Y_RANGE = 6  # vertical spread of the launch direction
SPAWN_SPEED_MAX = 16  # speed is drawn from [0, SPAWN_SPEED_MAX)
SPAWN_UPWARD_BOOST = 2  # subtracted from vy after scaling

# Shape selection: one draw p in [0, 1); circle below the first threshold,
# glyph below the second, rectangle otherwise (5% / 90% / 5%).
CIRCLE_THRESHOLD = 0.05
GLYPH_THRESHOLD = 0.95
SPAWN_CIRCLE_RADIUS = 15
GLYPH_SIZE_MIN = 30  # inclusive
GLYPH_SIZE_MAX = 100  # exclusive
# SysFont preference list: pygame has no per-glyph fallback, so an emoji font
# must come first. Scalable fonts precede the bitmap-only Noto Color Emoji.
DEFAULT_FONT_FAMILY = "segoeuiemoji,applecoloremoji,symbola,notoemoji,notocoloremoji,arial"

# Colors
COLOR_CHANNEL_MIN = 60
COLOR_CHANNEL_MAX = 255
BACKGROUND_COLOR = (0, 0, 0)

# Host loop
FPS = 60
DEFAULT_WINDOW_SIZE = (1280, 720)
LOG_THROTTLE_FRAMES = 300  # pool counts are logged at most this often

# Inclusive code point ranges of common pictograph blocks.
EMOJI_RANGES = (
    (0x1F330, 0x1F335),
    (0x1F337, 0x1F37C),
    (0x1F380, 0x1F393),
    (0x1F3A0, 0x1F3C4),
    (0x1F3C6, 0x1F3CA),
    (0x1F3E0, 0x1F3F0),
    (0x1F400, 0x1F43E),
    (0x1F440, 0x1F440),
    (0x1F442, 0x1F4F7),
    (0x1F4F9, 0x1F4FC),
)

__all__ = [name for name in globals().keys() if name.isupper()]
