"""Japanese numerals used when the dealer reveals the dice."""
from enum import Enum
from typing import Optional

from .dice import DicePair


class NumeralToken(Enum):
    ICHI = 1
    NI = 2
    SAN = 3
    SHI = 4
    GO = 5
    ROKU = 6

    def __str__(self) -> str:
        return self.name


def label(face_value: int) -> Optional[NumeralToken]:
    """Numeral for a die face, or None when the value is not a face."""
    try:
        return NumeralToken(face_value)
    except ValueError:
        return None


def format_pair(pair: DicePair) -> str:
    """Render a pair as numerals, e.g. SAN-GO."""
    return f"{label(pair.first)}-{label(pair.second)}"
