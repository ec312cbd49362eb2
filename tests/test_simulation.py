"""
Tests for betting strategies and the session simulator.
"""
import numpy as np
import pytest

from chohan.core.dice import DicePair
from chohan.core.game import RoundResult
from chohan.core.parity import Parity
from chohan.simulation import NumpyRandomSource, SessionSimulator, strategy_registry
from chohan.simulation.strategies import AllInStrategy, FlatStrategy, MartingaleStrategy


def make_result(bet, won):
    return RoundResult(bet=bet, guess=Parity.CHO, dice=DicePair(1, 1), won=won, fee=0, balance=1000)


class TestStrategies:
    """Test bet sizing of the built-in strategies."""

    def test_registry_lists_defaults(self):
        assert set(strategy_registry.list_strategies()) == {"flat", "martingale", "allin"}

    def test_strategies_info(self):
        info = strategy_registry.get_all_strategies_info()
        assert info["martingale"].parameters == {"base_bet": 500}
        assert info["allin"].name == "AllIn"

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            strategy_registry.get_strategy("fibonacci")

    def test_parameter_override(self):
        strategy = strategy_registry.get_strategy("Flat", base_bet=50)
        assert isinstance(strategy, FlatStrategy)
        assert strategy.next_bet(1000, None) == 50

    def test_flat_caps_at_balance(self):
        strategy = FlatStrategy()
        assert strategy.next_bet(5000, None) == 500
        assert strategy.next_bet(300, None) == 300

    def test_martingale_doubles_after_loss(self):
        strategy = strategy_registry.get_strategy("martingale", base_bet=100)
        assert isinstance(strategy, MartingaleStrategy)
        assert strategy.next_bet(5000, None) == 100
        assert strategy.next_bet(5000, make_result(100, False)) == 200
        assert strategy.next_bet(5000, make_result(200, False)) == 400
        assert strategy.next_bet(300, make_result(400, False)) == 300
        assert strategy.next_bet(5000, make_result(300, True)) == 100

    def test_allin(self):
        assert AllInStrategy().next_bet(1234, None) == 1234

    def test_guesses_cover_both_parities(self):
        strategy = FlatStrategy(rng=np.random.default_rng(0))
        guesses = {strategy.next_guess() for _ in range(100)}
        assert guesses == {Parity.CHO, Parity.HAN}


class TestSessionSimulator:
    """Test Monte Carlo sessions."""

    def test_numpy_source_range(self):
        source = NumpyRandomSource(np.random.default_rng(1))
        faces = {source.roll_face() for _ in range(500)}
        assert faces == {1, 2, 3, 4, 5, 6}

    def test_result_shape(self):
        result = SessionSimulator(seed=11).simulate("flat", num_sessions=50, max_rounds=20)
        assert result.num_sessions == 50
        assert result.final_balances.shape == (50,)
        assert np.all(result.final_balances >= 0)
        assert np.all(result.rounds_played <= 20)
        assert np.all(result.rounds_played >= 1)
        assert 0.0 <= result.bankrupt_rate <= 1.0
        assert set(result.percentiles) == {25, 50, 75}
        assert "Simulation Results (50 sessions, Flat)" in str(result)
        assert "Bankrupt Rate:" in str(result)

    def test_seed_is_reproducible(self):
        a = SessionSimulator(seed=3).simulate("martingale", num_sessions=30, max_rounds=30)
        b = SessionSimulator(seed=3).simulate("martingale", num_sessions=30, max_rounds=30)
        np.testing.assert_array_equal(a.final_balances, b.final_balances)
        assert a.bankrupt_count == b.bankrupt_count

    def test_allin_sessions_end_bankrupt_or_at_limit(self):
        result = SessionSimulator(seed=8).simulate("allin", num_sessions=40, max_rounds=10)
        bankrupt = result.final_balances == 0
        assert bankrupt.sum() == result.bankrupt_count
        assert np.all(result.rounds_played[~bankrupt] == 10)

    def test_single_round_balances(self):
        result = SessionSimulator(seed=2).simulate(
            "flat", num_sessions=100, max_rounds=1, starting_purse=1000
        )
        # One flat bet of 500: a win nets 450, a loss costs 500.
        assert set(result.final_balances.tolist()) <= {1450, 500}
        assert np.all(result.fees_paid[result.final_balances == 1450] == 50)

    def test_invalid_arguments(self):
        simulator = SessionSimulator()
        with pytest.raises(ValueError):
            simulator.simulate(num_sessions=0)
        with pytest.raises(ValueError):
            simulator.simulate(max_rounds=0)
