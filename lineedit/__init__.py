"""lineedit: interactive line editing with history, completion and hints.

The Editor reads a line from the terminal through prompt_toolkit, keeps a
bounded HistoryStore that can be saved to and loaded from a plain text
file, and consults host-supplied completion and hint providers while the
user types.
"""

from .completion import CompletionBridge, Many, Single
from .config import EditorConfig, HintColor
from .editor import Editor
from .errors import (
    EncodingError,
    HistoryIOError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    LineEditError,
    TypeMismatchError,
)
from .history import DEFAULT_HISTORY_CAPACITY, HistoryStore
from .hints import HintBridge, HintResult

__version__ = "0.0.1"

# Version of the line editing interface the Editor implements.
ENGINE_VERSION = "1.0"

__all__ = [
    "CompletionBridge",
    "DEFAULT_HISTORY_CAPACITY",
    "ENGINE_VERSION",
    "Editor",
    "EditorConfig",
    "EncodingError",
    "HintBridge",
    "HintColor",
    "HintResult",
    "HistoryIOError",
    "HistoryStore",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "LineEditError",
    "Many",
    "Single",
    "TypeMismatchError",
]
