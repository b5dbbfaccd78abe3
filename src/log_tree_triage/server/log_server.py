"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: run the log index pipeline over a file, or parse a single line
- Resources: help text, a sample log, the response schema and log file contents

Run locally (stdio):
    python -m log_tree_triage
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from log_tree_triage.resources.registry import register_resources
from log_tree_triage.tools.triage import (
    list_messages_impl,
    parse_log_line_impl,
    what_went_wrong_impl,
)

LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "LOG_TREE_LOG_LEVEL"


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("log-tree", json_response=True)

register_resources(mcp)


@mcp.tool()
async def what_went_wrong(log_path: str, threshold: int | None = None) -> dict[str, Any]:
    """Report the important errors in a log file, ordered by timestamp.

    Parameters
    ----------
    log_path:
        Path to a local log file. Supports plain text and .gz.
    threshold:
        Minimum error code to report. Defaults to LOG_TREE_THRESHOLD or 50.

    Returns
    -------
    dict:
        {"count": int, "threshold": int, "messages": list[str], "stats": dict}
    """
    return await what_went_wrong_impl(log_path=log_path, threshold=threshold)


@mcp.tool()
async def list_messages(log_path: str, limit: int | None = None) -> dict[str, Any]:
    """Return every indexed message of a log file by ascending timestamp.

    Messages whose timestamp was already taken by an earlier line are not indexed.
    """
    return await list_messages_impl(log_path=log_path, limit=limit)


@mcp.tool()
def parse_log_line(line: str) -> dict[str, Any]:
    """Parse one log line and return its structured form."""
    return parse_log_line_impl(line=line)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
