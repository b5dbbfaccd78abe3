"""Response models for the tool layer."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class StatsModel(BaseModel):
    lines: int = Field(description="Lines read from the file (a trailing newline counts as an empty line).")
    recognized: int = Field(description="Lines that parsed into I/W/E records.")
    unrecognized: int = Field(description="Lines that did not match any record shape.")
    indexed: int = Field(description="Records kept in the index after dropping duplicate timestamps.")


class WhatWentWrongResponse(BaseModel):
    count: int
    threshold: int = Field(description="Minimum error code reported.")
    messages: list[str] = Field(default_factory=list, description="Important error texts by timestamp.")
    stats: StatsModel


class MessageModel(BaseModel):
    kind: Literal["info", "warning", "error", "unrecognized"]
    code: int | None = None
    timestamp: int | None = None
    text: str
    rendered: str = Field(description="Message rendered back to log-line form.")


class ListMessagesResponse(BaseModel):
    count: int
    messages: list[MessageModel] = Field(default_factory=list)
