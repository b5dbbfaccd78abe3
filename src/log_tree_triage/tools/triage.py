"""MCP tool implementations.

Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

from log_tree_triage.core.config import resolve_pipeline_config
from log_tree_triage.core.log_service import PipelineStats, analyze_file
from log_tree_triage.core.models import LogMessage, Unrecognized, format_message
from log_tree_triage.core.parsing import parse_message
from log_tree_triage.schemas import (
    ListMessagesResponse,
    MessageModel,
    StatsModel,
    WhatWentWrongResponse,
)

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000


def _message_to_model(message: LogMessage) -> MessageModel:
    """Convert a parsed message into its response model."""
    if isinstance(message, Unrecognized):
        return MessageModel(
            kind="unrecognized",
            text=message.raw_text,
            rendered=format_message(message),
        )
    return MessageModel(
        kind=message.severity.kind.name.lower(),
        code=message.severity.code,
        timestamp=message.timestamp,
        text=message.text,
        rendered=format_message(message),
    )


def _stats_to_model(stats: PipelineStats) -> StatsModel:
    return StatsModel(
        lines=stats.lines,
        recognized=stats.recognized,
        unrecognized=stats.unrecognized,
        indexed=stats.indexed,
    )


async def what_went_wrong_impl(*, log_path: str, threshold: int | None = None) -> dict[str, Any]:
    """Implementation for the `what_went_wrong` MCP tool."""
    cfg = resolve_pipeline_config()
    if threshold is None:
        threshold = cfg.threshold

    important, _, stats = await analyze_file(log_path, threshold=threshold, config=cfg)
    return WhatWentWrongResponse(
        count=len(important),
        threshold=threshold,
        messages=important,
        stats=_stats_to_model(stats),
    ).model_dump()


async def list_messages_impl(*, log_path: str, limit: int | None = None) -> dict[str, Any]:
    """Implementation for the `list_messages` MCP tool (index dump by timestamp)."""
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    limit = min(limit, HARD_LIMIT)

    _, ordered, _ = await analyze_file(log_path, config=resolve_pipeline_config())
    models = [_message_to_model(m) for m in ordered[:limit]]
    return ListMessagesResponse(count=len(models), messages=models).model_dump()


def parse_log_line_impl(*, line: str) -> dict[str, Any]:
    """Implementation for the `parse_log_line` MCP tool."""
    if "\n" in line:
        raise ValueError("line must not contain a newline")
    return _message_to_model(parse_message(line)).model_dump()
