from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .commands import Command, CommandType, parse_command, parse_parity
from .config import GameConfig
from .dice import Dice, DicePair
from .logger import get_logger
from .parity import Parity, evaluate, matches
from .purse import Purse


logger = get_logger("game")


class GameState(Enum):
    AWAITING_BET = "awaiting_bet"
    AWAITING_GUESS = "awaiting_guess"
    RESOLVING = "resolving"
    TERMINATED = "terminated"


class TerminationReason(Enum):
    QUIT = "quit"
    BANKRUPT = "bankrupt"


@dataclass(frozen=True)
class RoundResult:
    """Outcome of a single resolved round."""
    bet: int
    guess: Parity
    dice: DicePair
    won: bool
    fee: int
    balance: int

    @property
    def outcome(self) -> Parity:
        """Parity the dice actually showed."""
        return evaluate(self.dice)

    @property
    def net_change(self) -> int:
        """Mon gained (positive) or lost (negative) this round."""
        if self.won:
            return self.bet - self.fee
        return -self.bet

    def __str__(self) -> str:
        verdict = "won" if self.won else "lost"
        return f"Bet {self.bet} on {self.guess.name}, rolled {self.dice}: {verdict} ({self.net_change:+d})"


class ChoHanGame:
    """Turn-based state machine for one game of Cho-Han.

    The game holds the purse and the pending bet and call. It performs no I/O:
    a front end feeds it raw input lines and reports what comes back.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        dice: Optional[Dice] = None,
        purse: Optional[Purse] = None,
    ):
        self.config = config or GameConfig()
        self.dice = dice or Dice()
        self.purse = purse or Purse(self.config.starting_purse)
        self.state = GameState.AWAITING_BET
        self.bet: Optional[int] = None
        self.guess: Optional[Parity] = None
        self.termination: Optional[TerminationReason] = None
        self.history: List[RoundResult] = []

        if self.purse.is_game_over():
            self._terminate(TerminationReason.BANKRUPT)

    @property
    def balance(self) -> int:
        return self.purse.balance

    @property
    def is_over(self) -> bool:
        return self.state == GameState.TERMINATED

    @property
    def rounds_played(self) -> int:
        return len(self.history)

    @property
    def fees_paid(self) -> int:
        """Total house fees collected so far."""
        return sum(r.fee for r in self.history)

    def _require_state(self, expected: GameState, action: str):
        if self.state != expected:
            raise ValueError(f"Cannot {action} - game is {self.state.value}, not {expected.value}")

    def submit_bet(self, raw: str) -> Command:
        """Handle a bet-phase input line and return the parsed command."""
        self._require_state(GameState.AWAITING_BET, "take a bet")
        command = parse_command(raw, self.purse.balance, self.config.quit_token)

        if command.command_type == CommandType.QUIT:
            self.quit()
        elif command.command_type == CommandType.BET:
            self.place_bet(command.amount)
        else:
            logger.debug("Rejected bet input %r with %d mon in purse", raw, self.purse.balance)
        return command

    def place_bet(self, amount: int):
        """Store a validated bet and wait for the player's call."""
        self._require_state(GameState.AWAITING_BET, "take a bet")
        if amount <= 0 or amount > self.purse.balance:
            raise ValueError(f"Bet must be between 1 and {self.purse.balance} mon, got {amount}")
        self.bet = amount
        self.state = GameState.AWAITING_GUESS
        logger.debug("Bet placed: %d mon", amount)

    def quit(self):
        """End the game at the player's request."""
        self._require_state(GameState.AWAITING_BET, "quit")
        self._terminate(TerminationReason.QUIT)

    def submit_guess(self, raw: str) -> Optional[Parity]:
        """Handle a call-phase input line; None means ask again."""
        self._require_state(GameState.AWAITING_GUESS, "take a call")
        guess = parse_parity(raw)
        if guess is None:
            logger.debug("Rejected call input %r", raw)
        else:
            self.call(guess)
        return guess

    def call(self, guess: Parity):
        """Store the player's call and move on to the reveal."""
        self._require_state(GameState.AWAITING_GUESS, "take a call")
        self.guess = guess
        self.state = GameState.RESOLVING
        logger.debug("Player calls %s", guess.name)

    def resolve(self, dice: Optional[DicePair] = None) -> RoundResult:
        """Roll the dice, settle the bet and update the purse."""
        self._require_state(GameState.RESOLVING, "resolve the round")
        pair = dice or self.dice.roll()
        bet, guess = self.bet, self.guess
        won = matches(pair, guess)
        logger.debug("Rolled %s (%s)", pair, evaluate(pair).name)

        if won:
            fee = self.config.house_fee(bet)
            self.purse.adjust(bet - fee, True)
        else:
            fee = 0
            self.purse.adjust(bet, False)

        result = RoundResult(
            bet=bet,
            guess=guess,
            dice=pair,
            won=won,
            fee=fee,
            balance=self.purse.balance,
        )
        self.history.append(result)
        self.bet = None
        self.guess = None
        logger.debug("Round %d resolved: %s", self.rounds_played, result)

        if self.purse.is_game_over():
            self._terminate(TerminationReason.BANKRUPT)
        else:
            self.state = GameState.AWAITING_BET
        return result

    def _terminate(self, reason: TerminationReason):
        self.state = GameState.TERMINATED
        self.termination = reason
        logger.info(
            "Game over (%s) after %d rounds with %d mon",
            reason.value, self.rounds_played, self.purse.balance,
        )
