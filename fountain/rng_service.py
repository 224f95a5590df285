import random
from typing import Any, Sequence

from fountain.constants import COLOR_CHANNEL_MAX, COLOR_CHANNEL_MIN, EMOJI_RANGES
from fountain.logger import get_logger

log = get_logger("rng")

Color = tuple[int, int, int, float]


class RNGService:
    _instance: "RNGService | None" = None

    def __init__(self, seed: int | float | str | bytes | bytearray | None = None):
        self._generator = random.Random(seed)
        log.debug(f"RNG initialized with seed: {seed!r}")

    @classmethod
    def get(cls) -> "RNGService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def seed(self, a: int | float | str | bytes | bytearray | None = None) -> None:
        self._generator.seed(a)
        log.debug(f"RNG re-seeded: {a!r}")

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._generator.random()

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._generator.randint(a, b)

    def uniform(self, a: float, b: float) -> float:
        """Return a random floating point number N such that a <= N <= b for a <= b."""
        return self._generator.uniform(a, b)

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a random element from the non-empty sequence seq."""
        return self._generator.choice(seq)

    def random_color(self, alpha: bool = False) -> Color:
        """Return an ``(r, g, b, a)`` color with light-ish channels.

        Channels are drawn from [60, 255]; ``a`` is drawn from [0.5, 1.0)
        when ``alpha`` is set, else it is fully opaque.
        """
        a = 0.5 + self.random() / 2 if alpha else 1
        return (
            self.randint(COLOR_CHANNEL_MIN, COLOR_CHANNEL_MAX),
            self.randint(COLOR_CHANNEL_MIN, COLOR_CHANNEL_MAX),
            self.randint(COLOR_CHANNEL_MIN, COLOR_CHANNEL_MAX),
            a,
        )

    def random_emoji(self) -> str:
        """Pick a range uniformly, then a code point uniformly inside it."""
        low, high = self.choice(EMOJI_RANGES)
        return chr(self.randint(low, high))
