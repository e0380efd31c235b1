"""Editor facade: the single entry point the host calls to read a line.

An Editor bundles an EditorConfig, a HistoryStore and an Engine. Hosts
create one per terminal, and tests create as many independent ones as
they like.
"""

import logging

from .completion import CompletionBridge
from .config import CompletionProvider, EditorConfig, HintColor, HintProvider
from .engine import Engine, PromptToolkitEngine
from .history import HistoryStore
from .hints import HintBridge

logger = logging.getLogger(__name__)


class Editor:
    """Interactive line editor with history, completion and hints.

    Usage::

        editor = Editor()
        editor.set_completion_provider(lambda text: ["hello", "hello there"])
        editor.set_hint_provider(lambda text: " World" if text == "hello" else None)
        editor.hint_color = HintColor.MAGENTA

        while (line := editor.read_line("hello> ")) is not None:
            editor.history.push(line)

    Args:
        config: Settings to use. A default EditorConfig if omitted.
        history: History offered for recall. An empty store if omitted.
        engine: Terminal engine. A PromptToolkitEngine over ``history``
            if omitted.
    """

    def __init__(
        self,
        config: EditorConfig | None = None,
        history: HistoryStore | None = None,
        engine: Engine | None = None,
    ) -> None:
        self.config = config if config is not None else EditorConfig()
        self.history = history if history is not None else HistoryStore()
        self.engine = engine if engine is not None else PromptToolkitEngine(self.history)
        self.completion = CompletionBridge(self.config)
        self.hints = HintBridge(self.config)
        self._reading = False

    # --- Reading ---

    def read_line(self, prompt: str) -> str | None:
        """Read a line from the terminal, blocking until Enter.

        The current multiline setting and both callbacks are installed in
        the engine first. Completion and hint providers run inside this
        call and must not call ``read_line`` themselves.

        Returns:
            The entered line, or None when the user ends input on an
            empty line.

        Raises:
            RuntimeError: Called again while a read is in progress.
        """
        if self._reading:
            raise RuntimeError("read_line() is not re-entrant")

        self.engine.set_multiline(self.config.multiline)
        self.engine.set_completion_callback(self.completion.complete)
        self.engine.set_hint_callback(self.hints.hint)

        self._reading = True
        try:
            return self.engine.read_line(prompt)
        except EOFError:
            logger.debug("End of input")
            return None
        finally:
            self._reading = False

    readline = read_line

    def clear_screen(self) -> None:
        self.engine.clear_screen()

    # --- Settings ---

    @property
    def multiline(self) -> bool:
        return self.config.multiline

    @multiline.setter
    def multiline(self, enabled: bool) -> None:
        self.set_multiline(enabled)

    def set_multiline(self, enabled: bool) -> None:
        """Switch between wrapping and horizontally scrolling long input.

        Applies to the next ``read_line``; a read in progress keeps its mode.
        """
        self.config.multiline = bool(enabled)
        if not self._reading:
            self.engine.set_multiline(self.config.multiline)

    def set_completion_provider(self, provider: CompletionProvider | None) -> None:
        """Install the completion provider, replacing any previous one."""
        self.config.completion_provider = provider

    def set_hint_provider(self, provider: HintProvider | None) -> None:
        """Install the hint provider, replacing any previous one."""
        self.config.hint_provider = provider

    @property
    def hint_color(self) -> HintColor | None:
        return self.config.hint_color

    @hint_color.setter
    def hint_color(self, value: int | None) -> None:
        self.config.hint_color = value

    @property
    def hint_bold(self) -> bool:
        return self.config.hint_bold

    @hint_bold.setter
    def hint_bold(self, value: object) -> None:
        self.config.hint_bold = value
