"""ASCII banner for ticklist."""

from rich.console import Console
from rich.text import Text

WORDMARK = """\
     _   _      _    _ _     _
    | |_(_) ___| | _| (_)___| |_
    | __| |/ __| |/ / | / __| __|
    | |_| | (__|   <| | \\__ \\ |_
     \\__|_|\\___|_|\\_\\_|_|___/\\__|"""

TAGLINE = "Small lists, done today."


def print_banner(console: Console, compact: bool = False) -> None:
    """Print the ticklist banner, or just the name when ``compact``."""
    if compact:
        console.print("  [bold green]ticklist[/bold green]")
        return

    console.print(Text(WORDMARK, style="bold green"), highlight=False)
    console.print(f"    [dim italic]{TAGLINE}[/dim italic]")
    console.print()
