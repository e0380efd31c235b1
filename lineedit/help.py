"""Help text for the demo REPL's slash commands."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

COMMAND_HELP: dict[str, str] = {
    "historylen": (
        "Set how many history entries are kept.\n"
        "  /historylen 50   — Keep the 50 most recent lines\n"
        "Older entries are dropped immediately when shrinking."
    ),
    "history": "List the history, oldest first, with indices.",
    "multiline": (
        "Switch multiline editing.\n"
        "  /multiline on    — Wrap long lines over several rows\n"
        "  /multiline off   — Scroll long lines horizontally"
    ),
    "hintcolor": (
        "Set the hint color.\n"
        "  /hintcolor red   — One of red, green, yellow, blue, magenta, cyan, white\n"
        "  /hintcolor off   — Draw hints without color"
    ),
    "hintbold": (
        "Draw hints in bold.\n"
        "  /hintbold on\n"
        "  /hintbold off"
    ),
    "save": (
        "Write the history to a file.\n"
        "  /save            — Save to the history file given at startup\n"
        "  /save <path>     — Save to a specific path"
    ),
    "load": (
        "Replace the history with the lines of a file.\n"
        "  /load            — Load the history file given at startup\n"
        "  /load <path>     — Load a specific path"
    ),
    "clear": "Clear the screen.",
    "help": (
        "Show help for commands.\n"
        "  /help            — Show all commands\n"
        "  /help <command>  — Show detailed help for one command"
    ),
    "quit": "Exit the REPL.",
}


def print_help_overview() -> None:
    """Print a table of all slash commands."""
    table = Table(title="Commands", show_header=True, title_style="bold")
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Description")

    for cmd, text in COMMAND_HELP.items():
        desc = text.split("\n")[0]  # First line only
        table.add_row(f"/{cmd}", desc)

    console.print(table)


def print_help_topic(topic: str) -> None:
    """Print detailed help for one command (with or without the slash)."""
    clean = topic.strip().lstrip("/")

    if clean in COMMAND_HELP:
        console.print(Panel(
            COMMAND_HELP[clean],
            title=f"/{clean}",
            title_align="left",
            border_style="cyan",
        ))
        return

    console.print(f"[red]No help available for '{topic}'[/red]")
    console.print("[dim]Type /help for a list of available commands[/dim]")
