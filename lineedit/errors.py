"""Exception hierarchy for the line editor.

Every error derives from LineEditError and from the closest built-in
exception, so hosts can catch either ``LineEditError`` or, say,
``IndexError`` around history access.
"""


class LineEditError(Exception):
    """Base class for all line editor errors."""


class InvalidArgumentError(LineEditError, ValueError):
    """Raised for a bad capacity, a non-callable provider or an unknown color."""


class IndexOutOfRangeError(LineEditError, IndexError):
    """Raised when a history index falls outside the stored entries."""


class HistoryIOError(LineEditError, OSError):
    """Raised when the history file cannot be read or written."""


class EncodingError(LineEditError, UnicodeError):
    """Raised when a callback produces text invalid under the locale encoding."""


class TypeMismatchError(LineEditError, TypeError):
    """Raised when a typed setting receives a value of the wrong type."""
