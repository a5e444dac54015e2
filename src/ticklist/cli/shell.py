"""Interactive menu loop over a TaskStore."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from ticklist.cli.dates import format_due_date, parse_due_date
from ticklist.cli.render import print_tasks
from ticklist.config.constants import DEFAULT_DATE_FORMAT, MENU_CHOICES, UPDATE_CHOICES
from ticklist.errors import TicklistError, ValidationError
from ticklist.tasks.store import TaskStore

logger = logging.getLogger("ticklist.cli.shell")


class _ExitShell(Exception):
    pass


def _parse_id(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValidationError(f"Invalid todo id: '{raw.strip()}'") from None


class TodoShell:
    """Menu-driven front end for a single TaskStore.

    ``prompt`` reads one line of input; it defaults to ``console.input`` and
    can be swapped for scripted input in tests.
    """

    def __init__(
        self,
        store: TaskStore,
        console: Console,
        prompt: Callable[[str], str] | None = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        self.store = store
        self.console = console
        self._prompt = prompt or console.input
        self.date_format = date_format
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_flow,
            "2": self.list_all,
            "3": self.list_incomplete,
            "4": self.list_completed,
            "5": self.complete_flow,
            "6": self.update_flow,
            "7": self.remove_flow,
            "8": self.clear_completed,
            "0": self.exit,
        }

    def ask(self, prompt: str) -> str:
        return self._prompt(prompt)

    # -- Main loop -------------------------------------------------------------

    def run(self) -> None:
        """Show the menu until the user exits (choice 0, EOF, or Ctrl-C)."""
        self.console.print("\n[bold]===== Todo List Application =====[/bold]")
        while True:
            self.show_menu()
            try:
                choice = self.ask("\nEnter your choice (0-8): ").strip()
                action = self._actions.get(choice)
                if action is None:
                    self.console.print("\n[yellow]Invalid choice. Please try again.[/yellow]")
                    continue
                action()
            except _ExitShell:
                break
            except (KeyboardInterrupt, EOFError):
                self.console.print()
                break
            except TicklistError as exc:
                logger.debug("Operation rejected: %s", exc)
                self.console.print(f"\n[red]Error: {escape(str(exc))}[/red]")

    def show_menu(self) -> None:
        self.console.print("\n[bold]MAIN MENU:[/bold]")
        for key, label in MENU_CHOICES:
            self.console.print(f"  {key}. {label}")

    # -- Flows -----------------------------------------------------------------

    def add_flow(self) -> None:
        description = self.ask("\nEnter task description: ")
        raw_due = self.ask("Enter due date (YYYY-MM-DD or ISO-8601) or press Enter for today: ")
        due_date = parse_due_date(raw_due, allow_empty=True)
        task = self.store.add(description, due_date)
        due = format_due_date(task.due_date, self.date_format)
        self.console.print(
            f"\n  [green]✓[/green] Added new todo: [bold]{escape(task.description)}[/bold] (Due: {due})"
        )

    def list_all(self) -> None:
        print_tasks(self.console, self.store.list(), "ALL TODOS", self.date_format)

    def list_incomplete(self) -> None:
        print_tasks(
            self.console, self.store.filter_by_status(False), "INCOMPLETE TODOS", self.date_format
        )

    def list_completed(self) -> None:
        print_tasks(
            self.console, self.store.filter_by_status(True), "COMPLETED TODOS", self.date_format
        )

    def complete_flow(self) -> None:
        incomplete = self.store.filter_by_status(False)
        if not incomplete:
            self.console.print("\n[dim]No incomplete todos to complete.[/dim]")
            return

        print_tasks(self.console, incomplete, "INCOMPLETE TODOS", self.date_format)
        task_id = _parse_id(self.ask("\nEnter the ID of the todo to mark as completed: "))
        self.store.complete(task_id)
        self.console.print(f"\n  [green]✓[/green] Todo {task_id} marked as completed.")

    def update_flow(self) -> None:
        tasks = self.store.list()
        if not tasks:
            self.console.print("\n[dim]No todos to update.[/dim]")
            return

        print_tasks(self.console, tasks, "ALL TODOS", self.date_format)
        task_id = _parse_id(self.ask("\nEnter the ID of the todo to update: "))
        self.store.get(task_id)

        self.console.print("\nWhat would you like to update?")
        for key, label in UPDATE_CHOICES:
            self.console.print(f"  {key}. {label}")
        choice = self.ask("\nEnter your choice (0-2): ").strip()

        if choice == "1":
            description = self.ask("\nEnter new task description: ")
            self.store.update_description(task_id, description)
            self.console.print(f"\n  [green]✓[/green] Todo {task_id} description updated successfully.")
        elif choice == "2":
            due_date = parse_due_date(self.ask("\nEnter new due date (YYYY-MM-DD or ISO-8601): "))
            self.store.update_due_date(task_id, due_date)
            self.console.print(f"\n  [green]✓[/green] Todo {task_id} due date updated successfully.")

    def remove_flow(self) -> None:
        tasks = self.store.list()
        if not tasks:
            self.console.print("\n[dim]No todos to remove.[/dim]")
            return

        print_tasks(self.console, tasks, "ALL TODOS", self.date_format)
        task_id = _parse_id(self.ask("\nEnter the ID of the todo to remove: "))
        self.store.remove(task_id)
        self.console.print(f"\n  [green]✓[/green] Todo {task_id} removed successfully.")

    def clear_completed(self) -> None:
        removed = self.store.clear_completed()
        self.console.print(f"\n  Removed {removed} completed todos.")

    def exit(self) -> None:
        self.console.print("\nThank you for using Todo List Application. Goodbye!")
        raise _ExitShell
