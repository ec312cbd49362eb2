"""
Registry for managing and accessing different betting strategies.
"""
from typing import Dict, Type, List, Optional

import numpy as np

from .strategies import (
    Strategy, StrategyConfig, FlatStrategy, MartingaleStrategy, AllInStrategy
)


class StrategyRegistry:
    """Registry for managing available strategies."""

    def __init__(self):
        self._strategies: Dict[str, Type[Strategy]] = {}
        self._register_default_strategies()

    def _register_default_strategies(self):
        """Register all built-in strategies."""
        self.register(FlatStrategy)
        self.register(MartingaleStrategy)
        self.register(AllInStrategy)

    def register(self, strategy_class: Type[Strategy]):
        """Register a new strategy class."""
        config = strategy_class.get_default_config()
        self._strategies[config.name.lower()] = strategy_class

    def get_strategy(self, name: str, rng: Optional[np.random.Generator] = None, **kwargs) -> Strategy:
        """Get a strategy instance by name with optional parameter overrides."""
        strategy_class = self._strategies.get(name.lower())
        if not strategy_class:
            raise ValueError(f"Unknown strategy: {name}")

        config = strategy_class.get_default_config()
        if kwargs:
            config.parameters.update(kwargs)

        return strategy_class(config, rng=rng)

    def list_strategies(self) -> List[str]:
        """List all available strategy names."""
        return list(self._strategies.keys())

    def get_all_strategies_info(self) -> Dict[str, StrategyConfig]:
        """Get information about all registered strategies."""
        return {
            name: strategy_class.get_default_config()
            for name, strategy_class in self._strategies.items()
        }


# Global registry instance
strategy_registry = StrategyRegistry()
