"""Even/odd evaluation of a dice pair."""
from enum import Enum

from .dice import DicePair


class Parity(Enum):
    """Outcome of a roll, also used for the player's call."""
    CHO = "even"
    HAN = "odd"


def evaluate(pair: DicePair) -> Parity:
    """CHO when the dice total is even, HAN when it is odd."""
    if pair.total % 2 == 0:
        return Parity.CHO
    return Parity.HAN


def matches(pair: DicePair, guess: Parity) -> bool:
    """Check whether a call agrees with the dice."""
    return evaluate(pair) == guess
