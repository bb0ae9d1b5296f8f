import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """The two draws dungeon generation needs.

    ``random.Random`` satisfies it, and so can a scripted stand-in.
    """

    def randint(self, a: int, b: int) -> int: ...

    def random(self) -> float: ...


class RNG(random.Random):
    """Seeded RNG to keep dungeons reproducible."""


def new_rng(seed: Optional[int] = None) -> RNG:
    rng = RNG()
    rng.seed(seed)
    return rng
