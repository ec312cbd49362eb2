"""The player's purse of mon."""
from dataclasses import dataclass


@dataclass
class Purse:
    """Holds the player's balance."""
    balance: int

    def __post_init__(self):
        if self.balance < 0:
            raise ValueError("Purse balance cannot be negative")

    def adjust(self, amount: int, is_win: bool):
        """Credit a win or debit a loss."""
        if amount < 0:
            raise ValueError(f"Cannot adjust purse by a negative amount ({amount})")
        if is_win:
            self.balance += amount
        else:
            if amount > self.balance:
                raise ValueError(f"Cannot take {amount} mon, only {self.balance} in purse")
            self.balance -= amount

    def is_game_over(self) -> bool:
        """An empty purse ends the game."""
        return self.balance == 0
