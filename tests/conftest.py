"""Shared helpers for the Cho-Han test suite."""
import io
from typing import Iterable

import pytest
from rich.console import Console

from chohan.core.dice import Dice


class ScriptedSource:
    """Die faces taken in order from a fixed script."""

    def __init__(self, faces: Iterable[int]):
        self.faces = list(faces)

    def roll_face(self) -> int:
        if not self.faces:
            raise AssertionError("Dice script exhausted")
        return self.faces.pop(0)


class ScriptedInput:
    """Feeds lines to the game like a player typing them, then hits EOF."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError("No more input")
        return self.lines.pop(0)


@pytest.fixture
def scripted_dice():
    """Build Dice that roll the given faces in order."""
    def _make(*faces: int) -> Dice:
        return Dice(ScriptedSource(faces))
    return _make


@pytest.fixture
def recording_console():
    """A rich console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)
