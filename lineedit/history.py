"""Bounded line history with file persistence.

The store keeps the most recent ``capacity`` lines, oldest first. When a
push would overflow it, the oldest entries are dropped. The history file
is plain text with one entry per line, the same format readline-style
shells use, so it can be shared with other tools.
"""

import logging
import os
from collections.abc import Iterable, Iterator

from .errors import (
    HistoryIOError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    TypeMismatchError,
)
from .text import ensure_text, locale_encoding

logger = logging.getLogger(__name__)

# Number of entries kept when no capacity is given.
DEFAULT_HISTORY_CAPACITY = 100

# Permissions for saved history files (owner read/write only).
HISTORY_FILE_MODE = 0o600


class HistoryStore:
    """Bounded FIFO buffer of previously entered lines.

    Usage::

        history = HistoryStore(capacity=3)
        history.push("a", "b", "c", "d")
        history[0]      # "b"
        history[-1]     # "d"
        history.save("history.txt")

    Entries may not contain line breaks, since the file format cannot
    represent them.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        self._entries: list[str] = []
        self._capacity = _check_capacity(capacity)

    def __repr__(self) -> str:
        return f"<HistoryStore size={len(self._entries)} capacity={self._capacity}>"

    # --- Capacity ---

    @property
    def capacity(self) -> int:
        """Maximum number of entries retained."""
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        self.set_capacity(value)

    def set_capacity(self, capacity: int) -> None:
        """Change the eviction threshold, dropping the oldest overflow now.

        Raises:
            InvalidArgumentError: ``capacity`` is zero or negative.
            TypeMismatchError: ``capacity`` is not an integer.
        """
        self._capacity = _check_capacity(capacity)
        self._evict()

    # --- Mutation ---

    def push(self, *lines: str | bytes) -> None:
        """Append one or more lines at the newest end.

        Eviction happens after each line, exactly as if every line had
        been pushed on its own.
        """
        self.push_all(lines)

    append = push

    def push_all(self, lines: Iterable[str | bytes]) -> None:
        """Push every line of ``lines`` in order."""
        for line in lines:
            self._entries.append(_check_line(line))
            self._evict()

    def set(self, index: int, line: str | bytes) -> str:
        """Replace the entry at ``index`` (negative counts from the end).

        Returns:
            The stored value.

        Raises:
            IndexOutOfRangeError: ``index`` is outside the stored entries.
        """
        pos = self._normalize(index)
        text = _check_line(line)
        self._entries[pos] = text
        return text

    def clear(self) -> None:
        """Remove every entry. Saved files are left alone."""
        self._entries.clear()

    # --- Access ---

    def get(self, index: int) -> str:
        """Return the entry at ``index`` (negative counts from the end)."""
        return self._entries[self._normalize(index)]

    def size(self) -> int:
        return len(self._entries)

    def iterate(self) -> Iterator[str]:
        """Yield entries oldest to newest.

        The generator walks a snapshot, so pushes made while a consumer is
        iterating do not change what it sees.
        """
        yield from tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return self.iterate()

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def __setitem__(self, index: int, line: str | bytes) -> None:
        self.set(index, line)

    # --- Persistence ---

    def save(self, path: str | os.PathLike) -> None:
        """Write all entries to ``path``, one per line, oldest first.

        The file is overwritten and restricted to its owner.

        Raises:
            HistoryIOError: The file cannot be opened or written.
        """
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, HISTORY_FILE_MODE)
            with open(fd, "w", encoding=locale_encoding(), newline="\n") as fh:
                for entry in self._entries:
                    fh.write(entry)
                    fh.write("\n")
            os.chmod(path, HISTORY_FILE_MODE)
        except OSError as exc:
            raise HistoryIOError(exc.errno, f"cannot save history: {exc.strerror}", str(path)) from exc

        logger.debug("Saved %d history entries to %s", len(self._entries), path)

    def load(self, path: str | os.PathLike) -> None:
        """Replace the entries with the lines of ``path``.

        Lines are pushed one by one, so a file longer than the capacity
        keeps only its newest lines. If the file cannot be read the
        current entries are kept.

        Raises:
            HistoryIOError: The file is missing or cannot be read.
            EncodingError: The file is not valid in the locale encoding.
        """
        try:
            with open(path, "rb") as fh:
                raw_lines = fh.read().splitlines()
        except OSError as exc:
            raise HistoryIOError(exc.errno, f"cannot load history: {exc.strerror}", str(path)) from exc

        lines = [ensure_text(raw, what="history line") for raw in raw_lines]

        self._entries.clear()
        self.push_all(lines)
        logger.debug(
            "Loaded %d history lines from %s (%d kept)",
            len(lines), path, len(self._entries),
        )

    # --- Internals ---

    def _normalize(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeMismatchError(
                f"history index must be an integer, not {type(index).__name__}"
            )
        pos = index + len(self._entries) if index < 0 else index
        if not 0 <= pos < len(self._entries):
            raise IndexOutOfRangeError("invalid index")
        return pos

    def _evict(self) -> None:
        overflow = len(self._entries) - self._capacity
        if overflow > 0:
            del self._entries[:overflow]
            logger.debug("Evicted %d oldest history entries", overflow)


def _check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeMismatchError(
            f"history capacity must be an integer, not {type(capacity).__name__}"
        )
    if capacity <= 0:
        raise InvalidArgumentError(f"history capacity must be positive, got {capacity}")
    return capacity


def _check_line(line: str | bytes) -> str:
    text = ensure_text(line, what="history line")
    if "\n" in text or "\r" in text:
        raise InvalidArgumentError("history lines cannot contain line breaks")
    return text
