"""
Martingale betting strategy implementation.
"""
from typing import Optional
from ...core.game import RoundResult
from .base import Strategy, StrategyConfig


class MartingaleStrategy(Strategy):
    """Double the stake after every loss, back to the base after a win."""

    def setup(self, base_bet: int = 500, **kwargs):
        self.base_bet = base_bet
        self.current_bet = base_bet

    def reset(self):
        self.current_bet = self.base_bet

    def next_bet(self, balance: int, last_result: Optional[RoundResult]) -> int:
        if last_result is None or last_result.won:
            self.current_bet = self.base_bet
        else:
            self.current_bet = last_result.bet * 2
        return min(self.current_bet, balance)

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="Martingale",
            description="Double the bet after a loss, reset to the base bet after a win",
            parameters={"base_bet": 500}
        )
