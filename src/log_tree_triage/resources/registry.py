"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import gzip
import os
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from log_tree_triage.schemas import WhatWentWrongResponse

ALLOWED_FILE_SUFFIXES = {".log", ".txt"}
BASE_DIR_ENV = "LOG_TREE_BASE_DIR"
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"

SAMPLE_LOG = (
    "I 6 Completed armadillo processing\n"
    "I 1 Nothing to report\n"
    "E 99 10 Flange failed!\n"
    "I 4 Everything normal\n"
    "W 5 Flange is due for a check-up\n"
    "E 70 3 Way too many pickles\n"
    "E 65 8 Bad pickle-flange interaction detected\n"
    "E 20 2 Too many pickles\n"
    "I 7 Out of bounds error\n"
)


def _base_dir() -> Path:
    """Return the resolved base directory for file resources."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _allowed_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def resolve_log_path(path: str) -> Path:
    """Resolve and validate a log file path for resource access."""
    resolved = _safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if _allowed_suffix(resolved) not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def _read_text(path: Path) -> str:
    """Read text from a file, supporting optional gzip compression."""
    if path.suffix.lower() == ".gz":
        with gzip.open(path, mode="rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
            return f.read()
    return path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://log-tree/help")
    def help_resource() -> str:
        """Return the line grammar and the list of resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Line grammar:\n"
            "  I <timestamp> <text>\n"
            "  W <timestamp> <text>\n"
            "  E <code> <timestamp> <text>\n"
            "Other lines are kept as unrecognized and never reported.\n"
            "\nResources:\n"
            "- app://log-tree/help\n"
            "- app://log-tree/examples/sample-log\n"
            "- app://log-tree/schemas/what-went-wrong-response\n"
            f"- log://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {_base_dir()}\n"
        )

    @mcp.resource("app://log-tree/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny sample log for demos and tests."""
        return SAMPLE_LOG

    @mcp.resource("app://log-tree/schemas/what-went-wrong-response")
    def what_went_wrong_schema() -> dict[str, Any]:
        """Return the JSON schema for what_went_wrong responses."""
        return WhatWentWrongResponse.model_json_schema()

    @mcp.resource("log://{path}")
    async def read_log(path: str) -> str:
        """Return the full log contents from within LOG_TREE_BASE_DIR."""
        p = resolve_log_path(path)
        return await asyncio.to_thread(_read_text, p)
