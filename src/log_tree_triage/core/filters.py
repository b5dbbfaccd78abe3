"""Selection of the messages worth reporting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Recognized

DEFAULT_THRESHOLD = 50


def is_important(message: Recognized, threshold: int = DEFAULT_THRESHOLD) -> bool:
    """True for error messages whose code is at least threshold."""
    severity = message.severity
    return severity.is_error and severity.code >= threshold


def select_important(
    messages: Iterable[Recognized],
    threshold: int = DEFAULT_THRESHOLD,
) -> Iterator[str]:
    """Lazily yield the text of important messages, keeping input order."""
    return (m.text for m in messages if is_important(m, threshold))
