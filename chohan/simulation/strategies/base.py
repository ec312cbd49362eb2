"""
Base classes for betting strategy implementations.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional, Any
from dataclasses import dataclass

import numpy as np

from ...core.game import RoundResult
from ...core.parity import Parity


@dataclass
class StrategyConfig:
    """Configuration for a strategy."""
    name: str
    description: str
    parameters: Dict[str, Any]


class Strategy(ABC):
    """Abstract base class for betting strategies."""

    def __init__(self, config: Optional[StrategyConfig] = None, rng: Optional[np.random.Generator] = None):
        self.config = config or self.get_default_config()
        self.rng = rng or np.random.default_rng()
        self.setup(**self.config.parameters)

    @abstractmethod
    def setup(self, **kwargs):
        """Initialize strategy with parameters."""
        pass

    @abstractmethod
    def next_bet(self, balance: int, last_result: Optional[RoundResult]) -> int:
        """Decide how much to stake, given the purse and the previous round."""
        pass

    def next_guess(self) -> Parity:
        """Call CHO or HAN with equal probability."""
        return Parity.CHO if self.rng.integers(0, 2) == 0 else Parity.HAN

    def reset(self):
        """Forget any state carried between rounds of a session."""
        pass

    @classmethod
    @abstractmethod
    def get_default_config(cls) -> StrategyConfig:
        """Get default configuration for this strategy."""
        pass
