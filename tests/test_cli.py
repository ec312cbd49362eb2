"""
Tests for the click entry point.
"""
from click.testing import CliRunner

from chohan.cli.__main__ import main
from main import main as root_main


class TestMain:
    """Run the command with scripted stdin."""

    def test_quit(self):
        result = CliRunner().invoke(main, ["--seed", "1"], input="Q\n")
        assert result.exit_code == 0
        assert "You have 5000 mon." in result.output
        assert "Thanks for playing!" in result.output

    def test_custom_purse_and_reprompt(self):
        result = CliRunner().invoke(main, ["--purse", "200"], input="300\nq\n")
        assert result.exit_code == 0
        assert "You have 200 mon." in result.output
        assert "Enter a positive whole number, up to your total mon (200)." in result.output

    def test_one_round(self):
        result = CliRunner().invoke(main, ["--seed", "4"], input="100\nHAN\nQ\n")
        assert result.exit_code == 0
        assert "The dealer lifts the cup to reveal:" in result.output
        assert ("You won!" in result.output) != ("You lost!" in result.output)

    def test_single_mon_ends_in_bankruptcy_or_quit(self):
        result = CliRunner().invoke(main, ["--purse", "1", "--seed", "9"], input="1\nCHO\nQ\n")
        assert result.exit_code == 0
        if "You lost!" in result.output:
            assert "You have run out of money!" in result.output
        assert "Thanks for playing!" in result.output

    def test_closed_input_exits_with_error(self):
        result = CliRunner().invoke(main, [], input="")
        assert result.exit_code == 1

    def test_invalid_purse(self):
        result = CliRunner().invoke(main, ["--purse", "0"])
        assert result.exit_code == 2

    def test_simulation_mode(self):
        result = CliRunner().invoke(
            main, ["--simulate", "-n", "20", "-r", "10", "--seed", "1", "--strategy", "martingale", "--bet", "100"]
        )
        assert result.exit_code == 0
        assert "Running 20 sessions of simulation..." in result.output
        assert "Simulation Results (20 sessions)" in result.output

    def test_narration_is_not_wrapped(self):
        result = CliRunner().invoke(main, ["--seed", "4"], input="100\nHAN\nQ\n")
        assert result.exit_code == 0
        assert (
            "The dealer slams the cup on the floor, still covering the dice and asks for your bet."
            in result.output
        )


class TestRootEntryPoint:
    """The repository's main.py runs the same command."""

    def test_closed_input_exits_with_error(self):
        result = CliRunner().invoke(root_main, [], input="")
        assert result.exit_code == 1

    def test_quit(self):
        result = CliRunner().invoke(root_main, ["--purse", "300"], input="Q\n")
        assert result.exit_code == 0
        assert "You have 300 mon." in result.output
