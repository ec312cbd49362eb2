"""
Betting strategy implementations for Cho-Han sessions.
"""
from .base import Strategy, StrategyConfig
from .flat import FlatStrategy
from .martingale import MartingaleStrategy
from .allin import AllInStrategy

__all__ = [
    "Strategy",
    "StrategyConfig",
    "FlatStrategy",
    "MartingaleStrategy",
    "AllInStrategy",
]
