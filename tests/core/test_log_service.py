from __future__ import annotations

import gzip
import logging
from pathlib import Path

import pytest

from log_tree_triage.core.config import PipelineConfig
from log_tree_triage.core.index import in_order
from log_tree_triage.core.log_service import (
    analyze_file,
    index_file,
    parse_file,
    read_lines,
    what_went_wrong,
)
from log_tree_triage.core.models import Unrecognized


@pytest.mark.asyncio
async def test_read_lines_splits_naively(tmp_path: Path) -> None:
    path = tmp_path / "app.log"
    path.write_bytes(b"I 1 a\r\nI 2 b\n")
    assert await read_lines(path) == ["I 1 a\r", "I 2 b", ""]


@pytest.mark.asyncio
async def test_read_lines_gzip(tmp_path: Path) -> None:
    path = tmp_path / "app.log.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write("I 1 a\nE 60 2 b")
    assert await read_lines(path) == ["I 1 a", "E 60 2 b"]


@pytest.mark.asyncio
async def test_read_lines_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await read_lines(tmp_path / "missing.log")


@pytest.mark.asyncio
async def test_trailing_newline_yields_empty_unrecognized(tmp_path: Path) -> None:
    path = tmp_path / "app.log"
    path.write_text("I 1 a\n", encoding="utf-8")
    messages = await parse_file(path)
    assert len(messages) == 2
    assert messages[-1] == Unrecognized("")


@pytest.mark.asyncio
async def test_what_went_wrong_end_to_end(tmp_path: Path, write_log) -> None:
    path = tmp_path / "app.log"
    write_log(path)
    assert await what_went_wrong(path) == ["meltdown"]


@pytest.mark.asyncio
async def test_what_went_wrong_sample(tmp_path: Path, write_sample_log) -> None:
    path = tmp_path / "sample.log"
    write_sample_log(path)
    assert await what_went_wrong(path) == [
        "Way too many pickles",
        "Bad pickle-flange interaction detected",
        "Flange failed!",
    ]


@pytest.mark.asyncio
async def test_what_went_wrong_threshold_override(tmp_path: Path, write_log) -> None:
    path = tmp_path / "app.log"
    write_log(path)
    assert await what_went_wrong(path, threshold=10) == ["disk failure", "meltdown"]
    assert await what_went_wrong(path, config=PipelineConfig(threshold=61)) == []


@pytest.mark.asyncio
async def test_what_went_wrong_threshold_from_env(
    tmp_path: Path, write_log, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "app.log"
    write_log(path)
    monkeypatch.setenv("LOG_TREE_THRESHOLD", "5")
    assert await what_went_wrong(path) == ["disk failure", "meltdown"]


@pytest.mark.asyncio
async def test_analyze_file_stats(tmp_path: Path, write_sample_log, caplog) -> None:
    path = tmp_path / "sample.log"
    write_sample_log(path)

    with caplog.at_level(logging.DEBUG, logger="log_tree_triage.core.log_service"):
        _, ordered, stats = await analyze_file(path)

    assert stats.lines == 11
    assert stats.recognized == 10
    assert stats.unrecognized == 1
    assert stats.indexed == 9
    assert stats.dropped_duplicates == 1
    assert len(ordered) == 9
    assert "9 indexed" in caplog.text


@pytest.mark.asyncio
async def test_index_file(tmp_path: Path, write_log) -> None:
    path = tmp_path / "app.log"
    write_log(path)
    tree = await index_file(path)
    assert [m.timestamp for m in in_order(tree)] == [1, 2, 3, 4]
