"""Line tokenizing and message parsing.

Lines look like::

    I <timestamp> <text...>
    W <timestamp> <text...>
    E <code> <timestamp> <text...>

Anything else becomes :class:`Unrecognized` carrying the original line.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .models import LogMessage, Recognized, Severity, SeverityKind, Unrecognized

# Optional minus, ASCII digits only; no '+', whitespace or '_' separators.
_INT_RE = re.compile(r"-?[0-9]+")


class DecodeError(ValueError):
    """Raised when a token is not a complete base-10 integer literal."""


def tokenize(line: str) -> list[str]:
    """Split on single spaces. Adjacent separators produce empty tokens."""
    return line.split(" ")


def decode_int(token: str) -> int:
    """Decode a whole token as an integer or raise DecodeError."""
    if not _INT_RE.fullmatch(token):
        raise DecodeError(f"not an integer: {token!r}")
    return int(token)


def unwords(tokens: Sequence[str], drop: int) -> str:
    """Join tokens[drop:] with single spaces."""
    return " ".join(tokens[drop:])


def _int_at(tokens: Sequence[str], i: int) -> int:
    if i >= len(tokens):
        raise DecodeError(f"missing field {i}")
    return decode_int(tokens[i])


def _parse_tokens(tokens: Sequence[str]) -> Recognized:
    tag = tokens[0] if tokens else None

    if tag == SeverityKind.INFO.value:
        return Recognized(Severity.info(), _int_at(tokens, 1), unwords(tokens, 2))
    if tag == SeverityKind.WARNING.value:
        return Recognized(Severity.warning(), _int_at(tokens, 1), unwords(tokens, 2))
    if tag == SeverityKind.ERROR.value:
        code = _int_at(tokens, 1)
        timestamp = _int_at(tokens, 2)
        return Recognized(Severity.error(code), timestamp, unwords(tokens, 3))

    raise DecodeError(f"unknown tag: {tag!r}")


def parse_message(line: str) -> LogMessage:
    """Parse one line. Never raises; malformed lines become Unrecognized."""
    try:
        return _parse_tokens(tokenize(line))
    except DecodeError:
        return Unrecognized(line)


def parse_lines(lines: Iterable[str]) -> list[LogMessage]:
    """Parse every line, preserving order."""
    return [parse_message(line) for line in lines]
