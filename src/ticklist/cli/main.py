"""ticklist CLI: the main entry point."""

from __future__ import annotations

import typer
from rich.console import Console

from ticklist import __version__

app = typer.Typer(
    name="ticklist",
    help="In-memory todo list for the terminal.",
    rich_markup_mode="rich",
)
console = Console()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
):
    from ticklist.config.settings import get_settings
    from ticklist.logging_setup import configure_logging

    if version:
        from ticklist.cli.banner import print_banner

        print_banner(console, compact=True)
        console.print(f"  [dim]v{__version__}[/dim]")
        raise typer.Exit()

    configure_logging(get_settings().log_level)

    if ctx.invoked_subcommand is None:
        shell()


@app.command()
def shell():
    """Start the interactive todo menu."""
    from ticklist.cli.banner import print_banner
    from ticklist.cli.shell import TodoShell
    from ticklist.config.settings import get_settings
    from ticklist.tasks.store import TaskStore

    settings = get_settings()
    if settings.show_banner:
        print_banner(console)

    TodoShell(TaskStore(), console, date_format=settings.date_format).run()


@app.command()
def demo():
    """Run the person-filter demonstration over the sample collection."""
    from ticklist.persons import default_persons, describe_person, filter_persons

    persons = default_persons()
    sections = [
        ("Users of age 23", filter_persons(persons, "user", {"age": 23})),
        ("Admins of age 23", filter_persons(persons, "admin", {"age": 23})),
        ("Software Engineers", filter_persons(persons, "user", {"occupation": "Software Engineer"})),
        ("Security Managers", filter_persons(persons, "admin", {"role": "Security Manager"})),
    ]

    for index, (title, matches) in enumerate(sections):
        if index:
            console.print()
        console.print(f"[bold]{title}:[/bold]")
        for person in matches:
            console.print(f" - {describe_person(person)}", highlight=False)


@app.command()
def people(
    person_type: str = typer.Argument(help="Variant to match: 'user' or 'admin'"),
    name: str | None = typer.Option(None, "--name", help="Exact name"),
    age: int | None = typer.Option(None, "--age", help="Exact age"),
    occupation: str | None = typer.Option(None, "--occupation", help="Exact occupation (users)"),
    role: str | None = typer.Option(None, "--role", help="Exact role (admins)"),
):
    """Filter the sample people by type and exact field values."""
    from ticklist.cli.render import print_persons
    from ticklist.errors import TicklistError
    from ticklist.persons import default_persons, filter_persons

    fields = {"name": name, "age": age, "occupation": occupation, "role": role}
    criteria = {k: v for k, v in fields.items() if v is not None}

    try:
        matches = filter_persons(default_persons(), person_type, criteria)
    except TicklistError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    print_persons(console, matches, f"Matching {person_type}s")
    console.print(f"\n  [dim]{len(matches)} matches.[/dim]\n")
