"""Core data models for the log index."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SeverityKind(str, Enum):
    """Closed set of severities; values double as the line tags."""

    INFO = "I"
    WARNING = "W"
    ERROR = "E"


@dataclass(frozen=True, slots=True)
class Severity:
    """Severity of a recognized message. Only ERROR carries a code."""

    kind: SeverityKind
    code: int | None = None

    def __post_init__(self) -> None:
        if self.kind is SeverityKind.ERROR and self.code is None:
            raise ValueError("error severity requires a code")
        if self.kind is not SeverityKind.ERROR and self.code is not None:
            raise ValueError(f"{self.kind.name.lower()} severity takes no code")

    @classmethod
    def info(cls) -> Severity:
        return cls(SeverityKind.INFO)

    @classmethod
    def warning(cls) -> Severity:
        return cls(SeverityKind.WARNING)

    @classmethod
    def error(cls, code: int) -> Severity:
        return cls(SeverityKind.ERROR, code)

    @property
    def is_error(self) -> bool:
        return self.kind is SeverityKind.ERROR


@dataclass(frozen=True, slots=True)
class Recognized:
    """A line that parsed into a structured record."""

    severity: Severity
    timestamp: int
    text: str


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Fallback for lines that did not parse; keeps the original line."""

    raw_text: str


LogMessage = Recognized | Unrecognized


def format_severity(severity: Severity) -> str:
    """Render a severity the way it appears in a log line ("I", "W", "E 42")."""
    if severity.is_error:
        return f"{severity.kind.value} {severity.code}"
    return severity.kind.value


def format_message(message: LogMessage) -> str:
    """Render a message back to text; unrecognized lines are prefixed with 'Unknown:'."""
    if isinstance(message, Unrecognized):
        return f"Unknown: {message.raw_text}"
    return f"{format_severity(message.severity)} {message.timestamp} {message.text}"
