"""Game configuration for Cho-Han."""
from dataclasses import dataclass


STARTING_PURSE = 5000
FEE_DIVISOR = 10  # House keeps a tenth of every winning bet
QUIT_TOKEN = "Q"


@dataclass(frozen=True)
class GameConfig:
    """Settings fixed for the lifetime of one game."""
    starting_purse: int = STARTING_PURSE
    fee_divisor: int = FEE_DIVISOR
    quit_token: str = QUIT_TOKEN

    def __post_init__(self):
        if self.starting_purse < 1:
            raise ValueError("Starting purse must be at least 1 mon")
        if self.fee_divisor < 1:
            raise ValueError("Fee divisor must be a positive integer")

    def house_fee(self, bet: int) -> int:
        """Fee collected on a winning bet, truncated to whole mon."""
        return bet // self.fee_divisor
