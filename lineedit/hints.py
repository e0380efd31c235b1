"""Hint bridge between host providers and the terminal engine."""

from dataclasses import dataclass

from .config import EditorConfig, HintColor
from .text import ensure_text


@dataclass(frozen=True, slots=True)
class HintResult:
    """What the engine should draw after the cursor.

    Attributes:
        text: Annotation to draw, or None for no hint.
        color: HintColor for the annotation, or None for no color.
        bold: Draw the annotation in bold.
    """

    text: str | None
    color: HintColor | None
    bold: bool


class HintBridge:
    """Calls the configured hint provider on behalf of the engine."""

    def __init__(self, config: EditorConfig) -> None:
        self.config = config

    def hint(self, text: str) -> HintResult:
        """Return the hint for ``text`` with the current color and weight.

        Color and weight come from the config on every call, even when
        there is no provider or no hint.

        Raises:
            EncodingError: The provider returned invalid locale text.
        """
        color = self.config.hint_color
        bold = self.config.hint_bold

        provider = self.config.hint_provider
        if provider is None:
            return HintResult(None, color, bold)

        value = provider(text)
        if value is None:
            return HintResult(None, color, bold)

        return HintResult(ensure_text(value, what="hint"), color, bold)

    __call__ = hint
