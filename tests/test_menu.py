"""Tests for tally.commands.menu dispatch and loop control."""

from collections.abc import Callable, Iterator
from decimal import Decimal

import pytest
import typer

from tally.commands import menu
from tally.operations import AccountOperations
from tally.store import BalanceStore


def scripted(lines: list[str]) -> Callable[[str], str]:
    """Build a prompt replacement that replays lines, then raises Abort like EOF does."""
    remaining: Iterator[str] = iter(lines)

    def prompt(text: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise typer.Abort() from None

    return prompt


@pytest.fixture
def operations() -> AccountOperations:
    return AccountOperations(BalanceStore())


class TestProcessChoice:
    """Tests for process_choice."""

    def test_exit_stops_loop(self, operations: AccountOperations) -> None:
        """Should return False for '4'."""
        assert menu.process_choice("4", operations) is False

    def test_view_keeps_running(self, operations: AccountOperations, capsys: pytest.CaptureFixture[str]) -> None:
        """Should print the balance and keep looping."""
        assert menu.process_choice("1", operations) is True
        assert "Current balance: 001000.00" in capsys.readouterr().out

    def test_unknown_choice(self, operations: AccountOperations, capsys: pytest.CaptureFixture[str]) -> None:
        """Should report the choice as invalid."""
        assert menu.process_choice("9", operations) is True
        assert "Invalid choice, please select 1-4." in capsys.readouterr().out

    def test_credit_prompts_for_amount(
        self, operations: AccountOperations, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Should ask for the credit amount with the credit prompt."""
        prompts: list[str] = []

        def prompt(text: str) -> str:
            prompts.append(text)
            return "25"

        monkeypatch.setattr(menu, "prompt_line", prompt)
        menu.process_choice("2", operations)
        assert prompts == ["Enter credit amount"]
        assert operations.store.read() == Decimal("1025.00")
        assert "Amount credited. New balance: 001025.00" in capsys.readouterr().out


class TestMenuCommand:
    """Tests for menu_command."""

    def test_runs_until_exit(
        self, operations: AccountOperations, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Should process choices in order and stop at '4'."""
        monkeypatch.setattr(menu, "prompt_line", scripted(["3", "100", "1", "4", "1"]))
        menu.menu_command(operations)

        out = capsys.readouterr().out
        assert "Amount debited. New balance: 000900.00" in out
        assert out.count("Account Management System") == 3
        assert out.rstrip().endswith("Exiting the program. Goodbye!")

    def test_end_of_input_at_menu(
        self, operations: AccountOperations, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Should say goodbye when input ends at the selection prompt."""
        monkeypatch.setattr(menu, "prompt_line", scripted(["1"]))
        menu.menu_command(operations)
        assert "Exiting the program. Goodbye!" in capsys.readouterr().out

    def test_end_of_input_at_amount_prompt(
        self, operations: AccountOperations, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Should stop without touching the balance when input ends mid-operation."""
        monkeypatch.setattr(menu, "prompt_line", scripted(["3"]))
        menu.menu_command(operations)

        out = capsys.readouterr().out
        assert "Amount debited" not in out
        assert "Exiting the program. Goodbye!" in out
        assert operations.store.read() == Decimal("1000.00")
