"""Slash commands of the demo REPL.

Commands change the editor's settings or history. They return a string
to display, the QUIT sentinel, or None when they printed their own
output.
"""

from .config import HintColor
from .editor import Editor
from .errors import LineEditError
from .help import COMMAND_HELP, print_help_overview, print_help_topic

# Sentinel return value for the REPL loop
QUIT = object()

_ON_OFF = {"on": True, "off": False}


def handle_slash_command(
    line: str,
    *,
    editor: Editor,
    history_path: str | None = None,
) -> str | object | None:
    """Handle a line starting with '/'.

    Args:
        line: The full input line (e.g., "/historylen 10").
        editor: Editor whose settings and history are changed.
        history_path: Default file for /save and /load.

    Returns:
        - A string to display to the user.
        - QUIT to signal the REPL should exit.
        - None for no output (e.g., help was printed directly).
    """
    stripped = line.strip()
    parts = stripped.split(None, 1)
    cmd = parts[0].lower() if parts else ""
    args = parts[1].strip() if len(parts) > 1 else ""

    try:
        match cmd:
            case "/quit":
                return QUIT
            case "/help":
                if args:
                    print_help_topic(args)
                else:
                    print_help_overview()
                return None
            case "/clear":
                editor.clear_screen()
                return None
            case "/historylen":
                return _handle_historylen(editor, args)
            case "/history":
                return _format_history(editor)
            case "/multiline":
                return _handle_multiline(editor, args)
            case "/hintcolor":
                return _handle_hintcolor(editor, args)
            case "/hintbold":
                return _handle_hintbold(editor, args)
            case "/save" | "/load":
                return _handle_file(editor, cmd, args or history_path)
    except LineEditError as exc:
        return f"[red]Error:[/red] {exc}"

    return f"[red]Unknown command: {stripped}[/red]"


def command_names() -> list[str]:
    """Return all slash commands, for tab completion."""
    return [f"/{cmd}" for cmd in COMMAND_HELP]


def _handle_historylen(editor: Editor, args: str) -> str:
    if not args:
        return "[red]Usage: /historylen <n>[/red]"
    try:
        length = int(args, 10)
    except ValueError:
        return f"[red]Not a number: {args}[/red]"
    editor.history.set_capacity(length)
    return f"History length set to {length}"


def _format_history(editor: Editor) -> str:
    if not len(editor.history):
        return "[dim]History is empty[/dim]"
    return "\n".join(
        f"{index:4d}  {entry}" for index, entry in enumerate(editor.history)
    )


def _handle_multiline(editor: Editor, args: str) -> str:
    if args.lower() not in _ON_OFF:
        return "[red]Usage: /multiline on|off[/red]"
    editor.set_multiline(_ON_OFF[args.lower()])
    return "Multi-line mode enabled." if editor.multiline else "Multi-line mode disabled."


def _handle_hintcolor(editor: Editor, args: str) -> str:
    name = args.lower()
    if name in ("off", "none"):
        editor.hint_color = None
        return "Hint color cleared"
    if name.isdigit():
        editor.hint_color = int(name)
    elif name.upper() in HintColor.__members__:
        editor.hint_color = HintColor[name.upper()]
    else:
        return "[red]Usage: /hintcolor <color>|off[/red]"
    return f"Hint color set to {editor.hint_color.name.lower()}"


def _handle_hintbold(editor: Editor, args: str) -> str:
    if args.lower() not in _ON_OFF:
        return "[red]Usage: /hintbold on|off[/red]"
    editor.hint_bold = _ON_OFF[args.lower()]
    return "Bold hints enabled" if editor.hint_bold else "Bold hints disabled"


def _handle_file(editor: Editor, cmd: str, path: str | None) -> str:
    if not path:
        return f"[red]Usage: {cmd} <path>[/red]"
    if cmd == "/save":
        editor.history.save(path)
        return f"Saved {len(editor.history)} entries to {path}"
    editor.history.load(path)
    return f"Loaded {len(editor.history)} entries from {path}"
