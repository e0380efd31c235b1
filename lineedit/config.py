"""Editor configuration shared by the editor facade and the callback bridges.

One EditorConfig belongs to one Editor. The bridges read it on every
callback, so changes made between keystrokes take effect on the next
redraw.
"""

import inspect
import logging
from enum import IntEnum
from typing import Protocol

from .errors import InvalidArgumentError, TypeMismatchError

logger = logging.getLogger(__name__)


class HintColor(IntEnum):
    """ANSI foreground color codes accepted for hints."""

    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


class CompletionProvider(Protocol):
    """Return completion candidates for the current input text."""

    def __call__(self, text: str) -> object: ...


class HintProvider(Protocol):
    """Return a one-line annotation for the current input text, or None."""

    def __call__(self, text: str) -> str | bytes | None: ...


class EditorConfig:
    """Mutable editor settings.

    Attributes:
        multiline: Wrap long input over several rows instead of scrolling.
        completion_provider: Active completion callable, or None.
        hint_provider: Active hint callable, or None.
        hint_color: HintColor used to draw hints, or None for no color.
        hint_bold: Draw hints in bold.
    """

    def __init__(self) -> None:
        self.multiline: bool = True
        self._completion_provider: CompletionProvider | None = None
        self._hint_provider: HintProvider | None = None
        self._hint_color: HintColor | None = None
        self._hint_bold = False

    def __repr__(self) -> str:
        return (
            f"<EditorConfig multiline={self.multiline} "
            f"hint_color={self._hint_color!r} hint_bold={self._hint_bold}>"
        )

    # --- Providers ---

    @property
    def completion_provider(self) -> CompletionProvider | None:
        return self._completion_provider

    @completion_provider.setter
    def completion_provider(self, provider: CompletionProvider | None) -> None:
        self._completion_provider = check_provider(provider, "completion")

    @property
    def hint_provider(self) -> HintProvider | None:
        return self._hint_provider

    @hint_provider.setter
    def hint_provider(self, provider: HintProvider | None) -> None:
        self._hint_provider = check_provider(provider, "hint")

    # --- Hint style ---

    @property
    def hint_color(self) -> HintColor | None:
        """ANSI code 31-37 used to draw hints, or None for no color.

        Assigning a non-integer raises TypeMismatchError; an integer
        outside 31-37 raises InvalidArgumentError.
        """
        return self._hint_color

    @hint_color.setter
    def hint_color(self, value: int | None) -> None:
        if value is None:
            self._hint_color = None
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeMismatchError(
                f"hint color must be an integer or None, not {type(value).__name__}"
            )
        try:
            self._hint_color = HintColor(value)
        except ValueError:
            raise InvalidArgumentError(
                f"invalid hint color {value}: expected {HintColor.RED.value}-"
                f"{HintColor.WHITE.value} or None"
            ) from None

    @property
    def hint_bold(self) -> bool:
        return self._hint_bold

    @hint_bold.setter
    def hint_bold(self, value: object) -> None:
        self._hint_bold = bool(value)


def check_provider(provider, kind: str):
    """Return ``provider`` if it can be called with one positional argument.

    ``None`` is accepted and disables the feature.

    Raises:
        InvalidArgumentError: ``provider`` is not callable with one argument.
    """
    if provider is None:
        logger.debug("Cleared %s provider", kind)
        return None

    if not callable(provider):
        raise InvalidArgumentError(
            f"{kind} provider must be callable, not {type(provider).__name__}"
        )

    try:
        signature = inspect.signature(provider)
    except (TypeError, ValueError):
        # Some builtins have no introspectable signature; trust callable().
        return provider

    try:
        signature.bind("")
    except TypeError:
        raise InvalidArgumentError(
            f"{kind} provider must accept exactly one argument"
        ) from None

    logger.debug("Installed %s provider %r", kind, provider)
    return provider
