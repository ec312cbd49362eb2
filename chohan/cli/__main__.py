import sys

import click

from ..core.config import GameConfig, STARTING_PURSE
from ..core.dice import Dice
from ..core.game import ChoHanGame
from ..core.logger import init_logging
from ..core.rng import RandomSource
from ..simulation import SessionSimulator, strategy_registry
from .interface import InteractiveCLI, show_simulation_results


@click.command()
@click.option('--purse', type=click.IntRange(min=1), default=STARTING_PURSE, show_default=True,
              help='Starting purse in mon')
@click.option('--seed', type=int, help='Seed for the dice, for reproducible games')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--simulate', '-s', is_flag=True, help='Run in simulation mode')
@click.option('--sessions', '-n', type=click.IntRange(min=1), default=1000, show_default=True,
              help='Number of sessions to simulate')
@click.option('--rounds', '-r', type=click.IntRange(min=1), default=100, show_default=True,
              help='Maximum rounds per simulated session')
@click.option('--strategy', type=click.Choice(strategy_registry.list_strategies(), case_sensitive=False),
              default='flat', show_default=True, help='Betting strategy for simulation mode')
@click.option('--bet', type=click.IntRange(min=1), default=500, show_default=True,
              help='Base bet for simulation mode')
def main(purse, seed, verbose, simulate, sessions, rounds, strategy, bet):
    """Cho-Han - the traditional Japanese dice betting game."""
    logger = init_logging("DEBUG" if verbose else "WARNING")

    if simulate:
        simulator = SessionSimulator(seed=seed)
        click.echo(f"Running {sessions} sessions of simulation...")
        chosen = strategy_registry.get_strategy(strategy, rng=simulator.rng, base_bet=bet)
        result = simulator.simulate(chosen, num_sessions=sessions, max_rounds=rounds, starting_purse=purse)
        show_simulation_results(result)
        return

    game = ChoHanGame(config=GameConfig(starting_purse=purse), dice=Dice(RandomSource(seed)))
    cli = InteractiveCLI(game)
    try:
        cli.run()
    except (EOFError, KeyboardInterrupt) as e:
        logger.error("Input stream closed, aborting game (%s)", type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
