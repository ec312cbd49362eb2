from dataclasses import dataclass
from typing import Optional

from .rng import RandomSource


@dataclass(frozen=True)
class DicePair:
    """The two dice revealed under the cup."""
    first: int
    second: int

    def __post_init__(self):
        if not all(1 <= v <= 6 for v in (self.first, self.second)):
            raise ValueError("All dice values must be between 1 and 6")

    @property
    def total(self) -> int:
        """Sum of both dice."""
        return self.first + self.second

    def __str__(self) -> str:
        return f"{self.first}-{self.second}"


class Dice:
    """Rolls a fresh pair of dice each round."""

    def __init__(self, source: Optional[RandomSource] = None):
        self.source = source or RandomSource()

    def roll(self) -> DicePair:
        """Roll both dice and return the result."""
        return DicePair(self.source.roll_face(), self.source.roll_face())

    def roll_specific(self, first: int, second: int) -> DicePair:
        """Create a roll with specific values (for testing/input)."""
        return DicePair(first, second)
