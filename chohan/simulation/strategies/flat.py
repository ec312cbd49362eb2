"""
Flat betting strategy implementation.
"""
from typing import Optional
from ...core.game import RoundResult
from .base import Strategy, StrategyConfig


class FlatStrategy(Strategy):
    """Stake the same amount every round."""

    def setup(self, base_bet: int = 500, **kwargs):
        self.base_bet = base_bet

    def next_bet(self, balance: int, last_result: Optional[RoundResult]) -> int:
        return min(self.base_bet, balance)

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="Flat",
            description="Bet the same base amount every round",
            parameters={"base_bet": 500}
        )
