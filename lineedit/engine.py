"""Terminal engine interface and its prompt_toolkit implementation.

The engine owns the terminal while a line is read. The editor only
talks to it through the Engine interface.

PromptToolkitEngine builds a fresh PromptSession for every line, so the
multiline flag, callbacks and history set between calls always apply to
the next prompt.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.application import get_app, get_app_session
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import History
from prompt_toolkit.input import Input
from prompt_toolkit.layout.processors import (
    Processor,
    Transformation,
    TransformationInput,
)
from prompt_toolkit.output import Output

from .config import HintColor
from .errors import LineEditError
from .history import HistoryStore
from .hints import HintResult

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[str], list[str]]
HintCallback = Callable[[str], HintResult]

# prompt_toolkit color names for the ANSI hint colors.
_ANSI_STYLE_NAMES = {
    HintColor.RED: "ansired",
    HintColor.GREEN: "ansigreen",
    HintColor.YELLOW: "ansiyellow",
    HintColor.BLUE: "ansiblue",
    HintColor.MAGENTA: "ansimagenta",
    HintColor.CYAN: "ansicyan",
    HintColor.WHITE: "ansiwhite",
}


class Engine(ABC):
    """Abstract raw-mode terminal engine.

    Implementations read one line with in-place editing and call the
    installed callbacks synchronously while the user types.
    """

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Read one line, blocking until Enter.

        Raises:
            EOFError: The user signalled end-of-input on an empty line.
        """

    @abstractmethod
    def set_multiline(self, enabled: bool) -> None:
        """Wrap long input over several rows (True) or scroll it (False)."""

    @abstractmethod
    def set_completion_callback(self, callback: CompletionCallback | None) -> None:
        """Install the function called on Tab."""

    @abstractmethod
    def set_hint_callback(self, callback: HintCallback | None) -> None:
        """Install the function called whenever the line is redrawn."""

    @abstractmethod
    def clear_screen(self) -> None:
        """Clear the terminal and home the cursor."""


class PromptToolkitEngine(Engine):
    """Engine backed by prompt_toolkit.

    Args:
        history: Store whose entries are offered for Up/Down recall.
            Accepted lines are not added to it; that is up to the host.
        input: prompt_toolkit input, defaults to the terminal.
        output: prompt_toolkit output, defaults to the terminal.
    """

    def __init__(
        self,
        history: HistoryStore | None = None,
        *,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.history = history
        self.multiline = True
        self._complete: CompletionCallback | None = None
        self._hint: HintCallback | None = None
        self._input = input
        self._output = output

    def read_line(self, prompt: str) -> str:
        session: PromptSession[str] = PromptSession(
            history=StoreHistory(self.history) if self.history is not None else None,
            completer=CallbackCompleter(self._complete) if self._complete else None,
            complete_while_typing=False,
            input_processors=[HintProcessor(self._hint)] if self._hint else None,
            wrap_lines=self.multiline,
            input=self._input,
            output=self._output,
        )
        return session.prompt(prompt)

    def set_multiline(self, enabled: bool) -> None:
        self.multiline = bool(enabled)

    def set_completion_callback(self, callback: CompletionCallback | None) -> None:
        self._complete = callback

    def set_hint_callback(self, callback: HintCallback | None) -> None:
        self._hint = callback

    def clear_screen(self) -> None:
        output = self._output or get_app_session().output
        output.erase_screen()
        output.cursor_goto(0, 0)
        output.flush()


class StoreHistory(History):
    """Read-only prompt_toolkit view over a HistoryStore."""

    def __init__(self, store: HistoryStore) -> None:
        super().__init__()
        self.store = store

    def load_history_strings(self) -> Iterable[str]:
        # prompt_toolkit expects newest first.
        return reversed(list(self.store))

    def store_string(self, string: str) -> None:
        pass


class CallbackCompleter(Completer):
    """Completer that replaces the text before the cursor with each candidate.

    Errors raised by the callback end the prompt, so they reach the
    caller of ``read_line`` instead of the event loop.
    """

    def __init__(self, callback: CompletionCallback) -> None:
        self.callback = callback

    def get_completions(self, document: Document, complete_event):
        text = document.text_before_cursor
        try:
            candidates = self.callback(text)
        except LineEditError as exc:
            _abort_prompt(exc)
            return

        for candidate in candidates:
            yield Completion(candidate, start_position=-len(text))


class HintProcessor(Processor):
    """Append the hint after the last line of input.

    The hint is only drawn while the cursor sits at the end of the input.
    """

    def __init__(self, callback: HintCallback) -> None:
        self.callback = callback

    def apply_transformation(self, ti: TransformationInput) -> Transformation:
        if ti.lineno != ti.document.line_count - 1 or not ti.document.is_cursor_at_the_end:
            return Transformation(fragments=ti.fragments)

        try:
            result = self.callback(ti.document.text)
        except LineEditError as exc:
            _abort_prompt(exc)
            return Transformation(fragments=ti.fragments)

        if not result.text:
            return Transformation(fragments=ti.fragments)
        return Transformation(fragments=ti.fragments + [(hint_style(result), result.text)])


def hint_style(result: HintResult) -> str:
    """Return the prompt_toolkit style string for a hint.

    Bold hints without a color are drawn white.
    """
    color = result.color
    if color is None and result.bold:
        color = HintColor.WHITE

    parts = ["class:hint"]
    if color is not None:
        parts.append(f"fg:{_ANSI_STYLE_NAMES[color]}")
    if result.bold:
        parts.append("bold")
    return " ".join(parts)


def _abort_prompt(exc: Exception) -> None:
    """Make the running prompt raise ``exc`` from ``read_line``.

    Outside a prompt ``exc`` is raised directly. If the prompt already
    has its result (Tab and Enter arrived in one batch), the error is
    dropped, since nobody is left to receive it.
    """
    app = get_app()
    if app.future is None:
        raise exc
    if app.future.done():
        logger.debug("Prompt already finished, dropping: %s", exc)
        return
    logger.debug("Aborting prompt: %s", exc)
    app.exit(exception=exc)
