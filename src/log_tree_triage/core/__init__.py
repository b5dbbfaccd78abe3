"""Parsing, indexing and filtering of tagged log lines."""

from __future__ import annotations

from .config import PipelineConfig, resolve_pipeline_config
from .filters import DEFAULT_THRESHOLD, is_important, select_important
from .index import EMPTY, Empty, Node, Tree, build, in_order, insert, insert_message
from .log_service import (
    PipelineStats,
    analyze_file,
    index_file,
    parse_file,
    read_lines,
    summarize,
    what_went_wrong,
)
from .models import (
    LogMessage,
    Recognized,
    Severity,
    SeverityKind,
    Unrecognized,
    format_message,
    format_severity,
)
from .parsing import DecodeError, decode_int, parse_lines, parse_message, tokenize, unwords

__all__ = [
    "DEFAULT_THRESHOLD",
    "EMPTY",
    "DecodeError",
    "Empty",
    "LogMessage",
    "Node",
    "PipelineConfig",
    "PipelineStats",
    "Recognized",
    "Severity",
    "SeverityKind",
    "Tree",
    "Unrecognized",
    "analyze_file",
    "build",
    "decode_int",
    "format_message",
    "format_severity",
    "in_order",
    "index_file",
    "insert",
    "insert_message",
    "is_important",
    "parse_file",
    "parse_lines",
    "parse_message",
    "read_lines",
    "resolve_pipeline_config",
    "select_important",
    "summarize",
    "tokenize",
    "unwords",
    "what_went_wrong",
]
