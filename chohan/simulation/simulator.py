"""Monte Carlo simulation of betting sessions."""
import numpy as np
from typing import Dict, Optional, Union
from dataclasses import dataclass

from ..core.config import GameConfig
from ..core.dice import Dice
from ..core.game import ChoHanGame, RoundResult
from ..core.logger import get_logger
from .strategies import Strategy
from .strategy_registry import strategy_registry


logger = get_logger("simulation")


class NumpyRandomSource:
    """Die faces drawn from a numpy generator."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def roll_face(self) -> int:
        return int(self.rng.integers(1, 7))


@dataclass
class SimulationResult:
    """Results from a batch of simulated sessions."""
    strategy_name: str
    num_sessions: int
    starting_purse: int
    final_balances: np.ndarray
    rounds_played: np.ndarray
    fees_paid: np.ndarray
    bankrupt_count: int

    @property
    def mean_balance(self) -> float:
        return float(np.mean(self.final_balances))

    @property
    def std_balance(self) -> float:
        return float(np.std(self.final_balances))

    @property
    def percentiles(self) -> Dict[int, float]:
        return {p: float(np.percentile(self.final_balances, p)) for p in (25, 50, 75)}

    @property
    def bankrupt_rate(self) -> float:
        return self.bankrupt_count / self.num_sessions

    @property
    def avg_rounds(self) -> float:
        return float(np.mean(self.rounds_played))

    @property
    def avg_fees(self) -> float:
        return float(np.mean(self.fees_paid))

    def __str__(self) -> str:
        return (
            f"Simulation Results ({self.num_sessions} sessions, {self.strategy_name}):\n"
            f"  Mean Final Purse: {self.mean_balance:.1f}\n"
            f"  Std Deviation: {self.std_balance:.1f}\n"
            f"  25th Percentile: {self.percentiles[25]:.1f}\n"
            f"  50th Percentile: {self.percentiles[50]:.1f}\n"
            f"  75th Percentile: {self.percentiles[75]:.1f}\n"
            f"  Bankrupt Rate: {self.bankrupt_rate:.1%}"
        )


class SessionSimulator:
    """Plays automated sessions of Cho-Han with a betting strategy."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def play_session(self, strategy: Strategy, max_rounds: int, config: GameConfig) -> ChoHanGame:
        """Play one session until bankruptcy or the round limit."""
        game = ChoHanGame(config=config, dice=Dice(NumpyRandomSource(self.rng)))
        strategy.reset()
        last_result: Optional[RoundResult] = None

        while not game.is_over:
            if game.rounds_played >= max_rounds:
                game.quit()
                break
            bet = strategy.next_bet(game.balance, last_result)
            game.place_bet(bet)
            game.call(strategy.next_guess())
            last_result = game.resolve()

        return game

    def simulate(
        self,
        strategy: Union[Strategy, str] = "flat",
        num_sessions: int = 1000,
        max_rounds: int = 100,
        starting_purse: Optional[int] = None,
    ) -> SimulationResult:
        """Simulate many sessions and aggregate the final purses.

        Args:
            strategy: Strategy instance or registered strategy name
            num_sessions: Number of sessions to play
            max_rounds: Rounds after which a session walks away from the table
            starting_purse: Purse each session starts with (defaults to the game's)
        """
        if num_sessions < 1:
            raise ValueError("num_sessions must be at least 1")
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")

        if isinstance(strategy, str):
            strategy = strategy_registry.get_strategy(strategy, rng=self.rng)

        config = GameConfig() if starting_purse is None else GameConfig(starting_purse=starting_purse)
        logger.debug(
            "Simulating %d sessions of %s from %d mon",
            num_sessions, strategy.config.name, config.starting_purse,
        )

        final_balances = np.zeros(num_sessions, dtype=np.int64)
        rounds_played = np.zeros(num_sessions, dtype=np.int64)
        fees_paid = np.zeros(num_sessions, dtype=np.int64)
        bankrupt_count = 0

        for i in range(num_sessions):
            game = self.play_session(strategy, max_rounds, config)
            final_balances[i] = game.balance
            rounds_played[i] = game.rounds_played
            fees_paid[i] = game.fees_paid
            if game.purse.is_game_over():
                bankrupt_count += 1

        result = SimulationResult(
            strategy_name=strategy.config.name,
            num_sessions=num_sessions,
            starting_purse=config.starting_purse,
            final_balances=final_balances,
            rounds_played=rounds_played,
            fees_paid=fees_paid,
            bankrupt_count=bankrupt_count,
        )
        logger.debug("%s", result)
        return result
