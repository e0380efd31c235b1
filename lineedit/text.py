"""Text validation shared by the history store and the callback bridges.

Everything that crosses into the terminal engine has to be representable
in the locale encoding. Bytes are decoded with it, strings must survive an
encode round trip.
"""

import locale

from .errors import EncodingError, TypeMismatchError


def locale_encoding() -> str:
    """Return the encoding text is validated against."""
    return locale.getpreferredencoding(False) or "utf-8"


def ensure_text(value: object, *, what: str = "value") -> str:
    """Return ``value`` as a ``str`` valid under the locale encoding.

    Args:
        value: A ``str`` or ``bytes`` produced by the host.
        what: Short description used in error messages.

    Raises:
        EncodingError: Undecodable bytes, unencodable text, or an embedded NUL.
        TypeMismatchError: ``value`` is neither ``str`` nor ``bytes``.
    """
    encoding = locale_encoding()

    if isinstance(value, (bytes, bytearray)):
        try:
            text = bytes(value).decode(encoding)
        except UnicodeDecodeError as exc:
            raise EncodingError(f"{what} is not valid {encoding}: {exc.reason}") from exc
    elif isinstance(value, str):
        text = value
        try:
            text.encode(encoding)
        except UnicodeEncodeError as exc:
            raise EncodingError(f"{what} is not valid {encoding}: {exc.reason}") from exc
    else:
        raise TypeMismatchError(
            f"{what} must be str or bytes, not {type(value).__name__}"
        )

    if "\x00" in text:
        raise EncodingError(f"{what} contains a NUL character")
    return text
