"""File reading and the parse -> index -> filter pipeline.

This module is the integration point that turns a log file into the list of
important error texts.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .config import PipelineConfig, resolve_pipeline_config
from .filters import select_important
from .index import Tree, build, in_order
from .models import LogMessage, Recognized
from .parsing import parse_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PipelineStats:
    lines: int
    recognized: int
    unrecognized: int
    indexed: int

    @property
    def dropped_duplicates(self) -> int:
        return self.recognized - self.indexed


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a log file for async text reading (plain or gzip), without newline translation."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors, newline="")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors, newline="") as f:
            yield f


async def read_lines(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> list[str]:
    """Read a file and split it on '\\n'. A trailing newline yields a final empty line."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        content = await f.read()
    return content.split("\n")


async def parse_file(log_path: str | Path, *, config: PipelineConfig | None = None) -> list[LogMessage]:
    """Read and parse every line of a log file."""
    cfg = config or resolve_pipeline_config()
    lines = await read_lines(log_path, encoding=cfg.encoding, decode_errors=cfg.decode_errors)
    return parse_lines(lines)


async def index_file(log_path: str | Path, *, config: PipelineConfig | None = None) -> Tree:
    """Build the timestamp index for a log file."""
    return build(await parse_file(log_path, config=config))


def summarize(messages: Sequence[LogMessage], ordered: Sequence[Recognized]) -> PipelineStats:
    """Count parsed vs indexed messages."""
    recognized = sum(1 for m in messages if isinstance(m, Recognized))
    return PipelineStats(
        lines=len(messages),
        recognized=recognized,
        unrecognized=len(messages) - recognized,
        indexed=len(ordered),
    )


async def analyze_file(
    log_path: str | Path,
    *,
    threshold: int | None = None,
    config: PipelineConfig | None = None,
) -> tuple[list[str], list[Recognized], PipelineStats]:
    """Run the full pipeline and also return the ordered index and stats."""
    cfg = config or resolve_pipeline_config()
    if threshold is None:
        threshold = cfg.threshold

    messages = await parse_file(log_path, config=cfg)
    ordered = in_order(build(messages))
    stats = summarize(messages, ordered)
    logger.debug(
        "Parsed %s: %d lines, %d unrecognized, %d indexed",
        log_path,
        stats.lines,
        stats.unrecognized,
        stats.indexed,
    )
    return list(select_important(ordered, threshold)), ordered, stats


async def what_went_wrong(
    log_path: str | Path,
    *,
    threshold: int | None = None,
    config: PipelineConfig | None = None,
) -> list[str]:
    """Return the texts of important errors in the file, by ascending timestamp."""
    important, _, _ = await analyze_file(log_path, threshold=threshold, config=config)
    return important
