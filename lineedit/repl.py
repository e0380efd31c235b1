"""Demo REPL: echo lines back, with completion, hints and saved history.

Typing "h" and pressing Tab offers "hello" and "hello there"; typing
"hello" shows a " World" hint. Every non-empty line is added to the
history and the history file is rewritten, so the next session can
recall it with the Up key.
"""

import errno

from rich.console import Console

from .commands import QUIT, command_names, handle_slash_command
from .completion import Many
from .editor import Editor
from .errors import HistoryIOError, LineEditError

console = Console()

PROMPT = "hello> "

# Inline hints for exact input matches.
_HINTS = {
    "hello": " World",
    "/historylen": " <n>",
    "/multiline": " on|off",
    "/hintcolor": " <color>|off",
    "/hintbold": " on|off",
}


def demo_completions(text: str) -> Many:
    """Complete greetings and slash commands."""
    if text.startswith("/"):
        return Many([cmd for cmd in command_names() if cmd.startswith(text)])
    if text.startswith("h"):
        return Many(["hello", "hello there"])
    return Many()


def demo_hints(text: str) -> str | None:
    return _HINTS.get(text)


def run_repl(editor: Editor, *, history_path: str | None = None) -> None:
    """Run the interactive loop until end-of-input or /quit.

    Args:
        editor: Editor to read lines with. Its providers are replaced
            with the demo ones.
        history_path: File the history is loaded from at startup and
            saved to after every line. None keeps history in memory.
    """
    editor.set_completion_provider(demo_completions)
    editor.set_hint_provider(demo_hints)

    if history_path:
        try:
            editor.history.load(history_path)
        except HistoryIOError as exc:
            # First run: no history file yet
            if exc.errno != errno.ENOENT:
                console.print(f"[red]Error:[/red] {exc}")
        except LineEditError as exc:
            console.print(f"[red]Error:[/red] {exc}")

    while True:
        try:
            line = editor.read_line(PROMPT)
        except KeyboardInterrupt:
            # Ctrl-C: cancel current line
            continue
        except LineEditError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            continue

        if line is None:
            console.print("Goodbye")
            break

        trimmed = line.strip()
        if not trimmed:
            continue

        if trimmed.startswith("/"):
            result = handle_slash_command(trimmed, editor=editor, history_path=history_path)
            if result is QUIT:
                console.print("Goodbye")
                break
            if isinstance(result, str):
                console.print(result, highlight=False)
            continue

        console.print(f"echo: '{line}'", highlight=False, markup=False)

        try:
            editor.history.push(line)
            if history_path:
                editor.history.save(history_path)
        except LineEditError as exc:
            console.print(f"[red]Error:[/red] {exc}")
