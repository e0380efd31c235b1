"""Completion bridge between host providers and the terminal engine.

A provider maps the current input text to candidates. It may return the
explicit result types ``Single`` and ``Many``; for convenience a bare
string is read as ``Single`` and any other iterable as ``Many``.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .config import EditorConfig
from .errors import TypeMismatchError
from .text import ensure_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Single:
    """Exactly one candidate, typically a unique match."""

    candidate: str | bytes


@dataclass(frozen=True, slots=True)
class Many:
    """Any number of candidates, in display order."""

    candidates: Sequence[str | bytes] = ()


CompletionResult = Single | Many


def as_completion_result(value: object) -> CompletionResult:
    """Wrap a provider's return value in a CompletionResult.

    Raises:
        TypeMismatchError: ``value`` is neither text nor an iterable of text.
    """
    match value:
        case Single() | Many():
            return value
        case None:
            return Many()
        case str() | bytes() | bytearray():
            return Single(value)
        case Iterable():
            return Many(tuple(value))
        case _:
            raise TypeMismatchError(
                f"completion provider returned {type(value).__name__}, "
                "expected text or a sequence of text"
            )


class CompletionBridge:
    """Calls the configured completion provider on behalf of the engine.

    The provider is looked up on every call, so replacing it in the
    config takes effect on the next Tab press.
    """

    def __init__(self, config: EditorConfig) -> None:
        self.config = config

    def complete(self, text: str) -> list[str]:
        """Return the candidates for ``text``, in provider order.

        An empty list means nothing to offer, including when no provider
        is installed.

        Raises:
            EncodingError: A candidate is not valid locale text. No
                candidates are returned in that case.
            TypeMismatchError: A candidate is neither str nor bytes.
        """
        provider = self.config.completion_provider
        if provider is None:
            return []

        match as_completion_result(provider(text)):
            case Single(candidate):
                raw = [candidate]
            case Many(candidates):
                raw = list(candidates)

        candidates = [ensure_text(c, what="completion candidate") for c in raw]
        logger.debug("Completion for %r: %d candidate(s)", text, len(candidates))
        return candidates

    __call__ = complete
