"""Tagged log parsing, timestamp indexing and error triage."""

from __future__ import annotations

from log_tree_triage.core import (
    LogMessage,
    Recognized,
    Severity,
    Unrecognized,
    build,
    in_order,
    parse_message,
    select_important,
    what_went_wrong,
)

__version__ = "0.1.0"

__all__ = [
    "LogMessage",
    "Recognized",
    "Severity",
    "Unrecognized",
    "__version__",
    "build",
    "in_order",
    "parse_message",
    "select_important",
    "what_went_wrong",
]
