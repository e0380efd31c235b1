"""Click CLI entry point for the lineedit demo.

Handles argument parsing and logging setup, then hands off to the REPL.
"""

import logging
import sys

import click
from rich.console import Console

from . import __version__
from .config import HintColor
from .editor import Editor
from .history import DEFAULT_HISTORY_CAPACITY, HistoryStore
from .repl import run_repl

console = Console()

DEFAULT_HISTORY_FILE = "history.txt"

_COLOR_NAMES = [color.name.lower() for color in HintColor]


@click.command()
@click.option(
    "--multiline/--no-multiline",
    default=True,
    help="Wrap long lines over several rows (default) or scroll them.",
)
@click.option(
    "--history-file",
    "history_path",
    default=DEFAULT_HISTORY_FILE,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="File the history is loaded from and saved to.",
)
@click.option(
    "--history-len",
    default=DEFAULT_HISTORY_CAPACITY,
    show_default=True,
    type=click.IntRange(min=1),
    help="Maximum number of history entries kept.",
)
@click.option(
    "--hint-color",
    default="magenta",
    show_default=True,
    type=click.Choice(_COLOR_NAMES + ["none"], case_sensitive=False),
    help="Color used to draw hints.",
)
@click.option(
    "--hint-bold",
    is_flag=True,
    default=False,
    help="Draw hints in bold.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log debug output to stderr.",
)
@click.version_option(version=__version__, prog_name="lineedit-demo")
def cli(
    multiline: bool,
    history_path: str,
    history_len: int,
    hint_color: str,
    hint_bold: bool,
    verbose: bool,
) -> None:
    """Line editor demo: echoes each line, with completion and hints.

    Type "h" and press Tab to complete, "hello" to see a hint, /help for
    commands, and Ctrl-D to exit.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    editor = Editor(history=HistoryStore(capacity=history_len))
    editor.set_multiline(multiline)
    editor.hint_color = None if hint_color.lower() == "none" else HintColor[hint_color.upper()]
    editor.hint_bold = hint_bold

    if multiline:
        console.print("[dim]Multi-line mode enabled.[/dim]")

    run_repl(editor, history_path=history_path)
