"""Decoding of byte strings in an unknown encoding."""

from __future__ import annotations

import codecs

import chardet

_MIN_CONFIDENCE = 0.5


class UnknownEncodingError(ValueError):
    """Raised when the encoding of a byte string cannot be determined."""

    def __init__(self, message: str = "unknown encoding for string") -> None:
        super().__init__(message)


def decode_unknown_string(data: bytes) -> str:
    """Decode ``data`` as UTF-8, falling back to a detected encoding."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        pass

    guess = chardet.detect(data)
    label = guess.get("encoding")
    confidence = guess.get("confidence") or 0.0
    if label is None or confidence < _MIN_CONFIDENCE:
        raise UnknownEncodingError()
    try:
        codec = codecs.lookup(label)
    except LookupError:
        raise UnknownEncodingError() from None
    try:
        return data.decode(codec.name, errors="replace")
    except UnicodeError:
        raise UnknownEncodingError() from None