"""Simulation module for Cho-Han."""
from .simulator import NumpyRandomSource, SessionSimulator, SimulationResult
from .strategies import Strategy
from .strategy_registry import strategy_registry

__all__ = [
    "NumpyRandomSource",
    "SessionSimulator",
    "SimulationResult",
    "Strategy",
    "strategy_registry",
]
