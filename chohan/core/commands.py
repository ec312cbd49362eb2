"""Parsing of player input for the bet and call phases."""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import QUIT_TOKEN
from .parity import Parity


_AMOUNT_PATTERN = re.compile(r"\+?[0-9]+")


class CommandType(Enum):
    """What the player asked for during the bet phase."""
    QUIT = "quit"
    BET = "bet"
    PROMPT = "prompt"


@dataclass(frozen=True)
class Command:
    """A parsed bet-phase line."""
    command_type: CommandType
    amount: Optional[int] = None

    @classmethod
    def quit(cls) -> "Command":
        return cls(CommandType.QUIT)

    @classmethod
    def bet(cls, amount: int) -> "Command":
        return cls(CommandType.BET, amount)

    @classmethod
    def prompt(cls) -> "Command":
        return cls(CommandType.PROMPT)

    def __str__(self) -> str:
        if self.command_type == CommandType.BET:
            return f"Bet {self.amount}"
        return self.command_type.value.title()


def normalize(raw: str) -> str:
    """Trim surrounding whitespace and upper-case a line of input."""
    return raw.strip().upper()


def parse_amount(text: str) -> Optional[int]:
    """Parse an unsigned whole number, or None if the text is not one."""
    if not _AMOUNT_PATTERN.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Past the interpreter limit on digits in a string conversion
        return None


def parse_command(raw: str, current_balance: int, quit_token: str = QUIT_TOKEN) -> Command:
    """Turn a bet-phase line into a command.

    Anything that is not the quit token or a whole number between 1 and the
    current balance asks the player to try again.
    """
    text = normalize(raw)
    if text == quit_token.upper():
        return Command.quit()

    amount = parse_amount(text)
    if amount is None or amount <= 0 or amount > current_balance:
        return Command.prompt()
    return Command.bet(amount)


def parse_parity(raw: str) -> Optional[Parity]:
    """Read a CHO or HAN call; anything else gives None."""
    text = normalize(raw)
    if text == "CHO":
        return Parity.CHO
    if text == "HAN":
        return Parity.HAN
    return None
