"""
All-in betting strategy implementation.
"""
from typing import Optional
from ...core.game import RoundResult
from .base import Strategy, StrategyConfig


class AllInStrategy(Strategy):
    """Stake the whole purse every round."""

    def setup(self, **kwargs):
        pass

    def next_bet(self, balance: int, last_result: Optional[RoundResult]) -> int:
        return balance

    @classmethod
    def get_default_config(cls) -> StrategyConfig:
        return StrategyConfig(
            name="AllIn",
            description="Bet the entire purse every round",
            parameters={}
        )
