"""Tests for the interactive TodoShell using scripted input."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from rich.console import Console

from ticklist.cli.shell import TodoShell
from ticklist.tasks.store import TaskStore


def _scripted(lines: Iterable[str]):
    """Return a prompt function that replays ``lines`` then raises EOFError."""
    it = iter(lines)

    def prompt(_message: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return prompt


def _run(store: TaskStore, console: Console, lines: list[str]) -> str:
    TodoShell(store, console, prompt=_scripted(lines)).run()
    return console.file.getvalue()


def test_exit(store, console):
    output = _run(store, console, ["0"])
    assert "MAIN MENU" in output
    assert "Goodbye!" in output


def test_eof_exits_cleanly(store, console):
    output = _run(store, console, [])
    assert "MAIN MENU" in output


def test_invalid_choice_reprompts(store, console):
    output = _run(store, console, ["9", "0"])
    assert "Invalid choice" in output
    assert output.count("MAIN MENU") == 2


def test_add_default_due_date(store, console):
    output = _run(store, console, ["1", "Buy milk", "", "0"])
    today = datetime.now(UTC).strftime("%Y-%m-%d")
    assert f"Added new todo: Buy milk (Due: {today})" in output
    assert [t.description for t in store.list()] == ["Buy milk"]


def test_add_with_due_date(store, console):
    _run(store, console, ["1", "File taxes", "2030-04-15", "0"])
    task = store.list()[0]
    assert task.due_date == datetime(2030, 4, 15, tzinfo=UTC)


def test_add_invalid_date(store, console):
    output = _run(store, console, ["1", "File taxes", "someday", "0"])
    assert "Error: Invalid date format" in output
    assert len(store) == 0


def test_add_empty_description(store, console):
    output = _run(store, console, ["1", "   ", "", "0"])
    assert "Error: Task description cannot be empty" in output
    assert len(store) == 0


def test_list_views(store, console):
    store.add("Buy milk")
    done = store.add("Walk dog")
    store.complete(done.id)

    output = _run(store, console, ["2", "3", "4", "0"])
    assert "ALL TODOS" in output
    assert "INCOMPLETE TODOS" in output
    assert "COMPLETED TODOS" in output
    assert "✓" in output


def test_list_empty(store, console):
    output = _run(store, console, ["2", "0"])
    assert "No todos found." in output


def test_complete_flow(store, console):
    task = store.add("Buy milk")
    output = _run(store, console, ["5", str(task.id), "0"])
    assert f"Todo {task.id} marked as completed." in output
    assert store.get(task.id).completed is True


def test_complete_flow_nothing_to_do(store, console):
    output = _run(store, console, ["5", "0"])
    assert "No incomplete todos to complete." in output


def test_complete_unknown_id(store, console):
    store.add("Buy milk")
    output = _run(store, console, ["5", "42", "0"])
    assert "Error: Todo with id 42 not found" in output


def test_non_numeric_id(store, console):
    store.add("Buy milk")
    output = _run(store, console, ["7", "abc", "0"])
    assert "Error: Invalid todo id: 'abc'" in output
    assert len(store) == 1


def test_update_description_flow(store, console):
    task = store.add("Buy milk")
    output = _run(store, console, ["6", str(task.id), "1", "Buy oat milk", "0"])
    assert f"Todo {task.id} description updated successfully." in output
    assert store.get(task.id).description == "Buy oat milk"


def test_update_due_date_flow(store, console):
    task = store.add("Buy milk")
    output = _run(store, console, ["6", str(task.id), "2", "2031-12-24", "0"])
    assert f"Todo {task.id} due date updated successfully." in output
    assert store.get(task.id).due_date == datetime(2031, 12, 24, tzinfo=UTC)


def test_update_cancel(store, console):
    task = store.add("Buy milk")
    _run(store, console, ["6", str(task.id), "0", "0"])
    assert store.get(task.id).description == "Buy milk"


def test_update_unknown_id_skips_submenu(store, console):
    store.add("Buy milk")
    output = _run(store, console, ["6", "5", "0"])
    assert "Error: Todo with id 5 not found" in output
    assert "What would you like to update?" not in output


def test_remove_flow(store, console):
    task = store.add("Buy milk")
    output = _run(store, console, ["7", str(task.id), "0"])
    assert f"Todo {task.id} removed successfully." in output
    assert len(store) == 0


def test_remove_when_empty(store, console):
    output = _run(store, console, ["7", "0"])
    assert "No todos to remove." in output


def test_clear_completed(store, console):
    task = store.add("Buy milk")
    store.add("Walk dog")
    store.complete(task.id)
    output = _run(store, console, ["8", "0"])
    assert "Removed 1 completed todos." in output
    assert [t.description for t in store.list()] == ["Walk dog"]


def test_markup_in_description_is_literal(store, console):
    output = _run(store, console, ["1", "[bold]not bold[/bold]", "", "2", "0"])
    assert "[bold]not bold[/bold]" in output


def test_date_format_affects_display_only(store, console):
    """Input stays ISO-8601 while output follows the configured format."""
    asked: list[str] = []
    replay = _scripted(["1", "Pay rent", "2030-02-01", "2", "0"])

    def prompt(message: str) -> str:
        asked.append(message)
        return replay(message)

    TodoShell(store, console, prompt=prompt, date_format="%d.%m.%Y").run()
    output = console.file.getvalue()

    assert any("YYYY-MM-DD or ISO-8601" in message for message in asked)
    assert "(Due: 01.02.2030)" in output
    assert "01.02.2030" in output.split("ALL TODOS")[1]
    assert store.list()[0].due_date == datetime(2030, 2, 1, tzinfo=UTC)
