"""Random number sources for rolling dice."""
import random
from typing import Optional


class RandomSource:
    """Uniform die faces backed by the standard library generator."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def roll_face(self) -> int:
        """Return a face value in the range [1, 6]."""
        return self._random.randint(1, 6)
