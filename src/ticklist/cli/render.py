"""Rich tables for tasks and persons."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ticklist.cli.dates import format_due_date
from ticklist.config.constants import DEFAULT_DATE_FORMAT
from ticklist.persons.models import Admin, Person
from ticklist.tasks.models import Task


def print_tasks(
    console: Console,
    tasks: Sequence[Task],
    title: str,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> None:
    """Print ``tasks`` under a ``===== title =====`` heading."""
    console.print(f"\n[bold]===== {title} =====[/bold]")

    if not tasks:
        console.print("[dim]No todos found.[/dim]")
        return

    table = Table(show_lines=False)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Status")
    table.add_column("Due Date")
    table.add_column("Task", style="bold")

    for task in tasks:
        status = "[green]✓[/green]" if task.completed else "☐"
        table.add_row(
            str(task.id),
            status,
            format_due_date(task.due_date, date_format),
            escape(task.description),
        )

    console.print(table)


def print_persons(console: Console, persons: Sequence[Person], title: str) -> None:
    """Print a person table: name, age, type, and occupation/role."""
    if not persons:
        console.print(f"[dim]{title}: no matches.[/dim]")
        return

    table = Table(title=title, show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Age", justify="right")
    table.add_column("Type", style="dim")
    table.add_column("Occupation / Role")

    for person in persons:
        detail = person.role if isinstance(person, Admin) else person.occupation
        table.add_row(escape(person.name), str(person.age), person.type, escape(detail))

    console.print(table)
