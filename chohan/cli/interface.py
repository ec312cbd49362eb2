from typing import Callable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.commands import CommandType
from ..core.game import ChoHanGame, GameState, RoundResult, TerminationReason
from ..core.numerals import format_pair
from ..simulation import SimulationResult


console = Console(soft_wrap=True)

INTRO = (
    "In this traditional Japanese dice game, two dice are rolled in a bamboo\n"
    "cup by the dealer sitting on the floor. The player must guess if the\n"
    "dice total to an even (cho) or odd (han) number."
)


class InteractiveCLI:
    """Interactive command-line interface for Cho-Han."""

    def __init__(
        self,
        game: Optional[ChoHanGame] = None,
        console: Console = console,
        read_line: Optional[Callable[[], str]] = None,
    ):
        self.game = game or ChoHanGame()
        self.console = console
        self.read_line = read_line or self.console.input

    def prompt_bet(self):
        """Ask for a bet until the player bets or quits."""
        while self.game.state == GameState.AWAITING_BET:
            self.console.print(
                f"You have [yellow]{self.game.balance}[/yellow] mon. "
                "How much do you bet? (or Q to quit)"
            )
            command = self.game.submit_bet(self.read_line())
            if command.command_type == CommandType.PROMPT:
                self.console.print(
                    f"[red]Enter a positive whole number, up to your total mon ({self.game.balance}).[/red]"
                )

    def prompt_guess(self):
        """Narrate the shake and ask for CHO or HAN until a valid call."""
        self.console.print("The dealer swirls the cup and you hear the rattle of the dice.")
        self.console.print(
            "The dealer slams the cup on the floor, still covering the dice and asks for your bet.\n"
        )
        self.console.print("[cyan]CHO (even) or HAN (odd)?[/cyan]")

        while self.game.submit_guess(self.read_line()) is None:
            self.console.print('[red]Please enter either "CHO" or "HAN".[/red]')

    def display_result(self, result: RoundResult):
        """Reveal the dice and report the payout."""
        self.console.print("The dealer lifts the cup to reveal:")
        self.console.print(f"    [magenta]{format_pair(result.dice)}[/magenta]")
        self.console.print(f"      {result.dice}")

        if result.won:
            self.console.print(f"[green]You won! You take {result.bet} mon.[/green]")
            self.console.print(f"The house collects a {result.fee} mon fee.")
        else:
            self.console.print("[red]You lost![/red]")

    def display_farewell(self):
        if self.game.termination == TerminationReason.BANKRUPT:
            self.console.print("[bold red]You have run out of money![/bold red]")
        self.console.print("[yellow]Thanks for playing![/yellow]")

    def run(self):
        """Main game loop."""
        self.console.print(Panel.fit(INTRO, title="Cho-Han", border_style="blue"))

        while not self.game.is_over:
            if self.game.state == GameState.AWAITING_BET:
                self.prompt_bet()
            elif self.game.state == GameState.AWAITING_GUESS:
                self.prompt_guess()
            elif self.game.state == GameState.RESOLVING:
                self.display_result(self.game.resolve())

        self.display_farewell()


def show_simulation_results(result: SimulationResult, output: Console = console):
    """Display simulation results."""
    table = Table(title=f"Simulation Results ({result.num_sessions} sessions)")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Strategy", result.strategy_name)
    table.add_row("Starting Purse", f"{result.starting_purse} mon")
    table.add_row("Mean Final Purse", f"{result.mean_balance:.1f} mon")
    table.add_row("Std Deviation", f"{result.std_balance:.1f}")
    for pct, value in result.percentiles.items():
        table.add_row(f"{pct}th Percentile", f"{value:.0f} mon")
    table.add_row("Bankrupt Rate", f"{result.bankrupt_rate:.1%}")
    table.add_row("Avg Rounds", f"{result.avg_rounds:.1f}")
    table.add_row("Avg Fees Paid", f"{result.avg_fees:.1f} mon")

    output.print(table)
