from __future__ import annotations

from pathlib import Path

import pytest

from log_tree_triage.resources.registry import SAMPLE_LOG, resolve_log_path
from log_tree_triage.tools.triage import (
    list_messages_impl,
    parse_log_line_impl,
    what_went_wrong_impl,
)


@pytest.mark.asyncio
async def test_what_went_wrong_impl(tmp_path: Path, write_log) -> None:
    log = tmp_path / "app.log"
    write_log(log)

    out = await what_went_wrong_impl(log_path=str(log))

    assert out["count"] == 1
    assert out["threshold"] == 50
    assert out["messages"] == ["meltdown"]
    assert out["stats"] == {"lines": 5, "recognized": 4, "unrecognized": 1, "indexed": 4}


@pytest.mark.asyncio
async def test_what_went_wrong_impl_sample_resource(tmp_path: Path) -> None:
    log = tmp_path / "sample.log"
    log.write_text(SAMPLE_LOG, encoding="utf-8")

    out = await what_went_wrong_impl(log_path=str(log), threshold=65)

    assert out["messages"] == ["Way too many pickles", "Bad pickle-flange interaction detected", "Flange failed!"]


@pytest.mark.asyncio
async def test_what_went_wrong_impl_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await what_went_wrong_impl(log_path=str(tmp_path / "nope.log"))


@pytest.mark.asyncio
async def test_list_messages_impl(tmp_path: Path, write_log) -> None:
    log = tmp_path / "app.log"
    write_log(log)

    out = await list_messages_impl(log_path=str(log), limit=2)

    assert out["count"] == 2
    first, second = out["messages"]
    assert first["kind"] == "info"
    assert first["timestamp"] == 1
    assert second["kind"] == "error"
    assert second["code"] == 10
    assert second["rendered"] == "E 10 2 disk failure"


@pytest.mark.asyncio
async def test_list_messages_impl_invalid_limit(tmp_path: Path, write_log) -> None:
    log = tmp_path / "app.log"
    write_log(log)
    with pytest.raises(ValueError):
        await list_messages_impl(log_path=str(log), limit=0)


def test_parse_log_line_impl() -> None:
    out = parse_log_line_impl(line="E 2 562 help help")
    assert out == {
        "kind": "error",
        "code": 2,
        "timestamp": 562,
        "text": "help help",
        "rendered": "E 2 562 help help",
    }

    junk = parse_log_line_impl(line="I 29x hello")
    assert junk["kind"] == "unrecognized"
    assert junk["text"] == "I 29x hello"
    assert junk["timestamp"] is None


def test_parse_log_line_impl_rejects_multiline() -> None:
    with pytest.raises(ValueError):
        parse_log_line_impl(line="I 1 a\nI 2 b")


def test_resolve_log_path_restrictions(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_TREE_BASE_DIR", str(tmp_path))
    (tmp_path / "app.log").write_text("I 1 a\n", encoding="utf-8")
    (tmp_path / "data.bin").write_bytes(b"\x00")

    assert resolve_log_path("app.log") == (tmp_path / "app.log").resolve()
    with pytest.raises(ValueError):
        resolve_log_path("data.bin")
    with pytest.raises(ValueError):
        resolve_log_path("../outside.log")
    with pytest.raises(FileNotFoundError):
        resolve_log_path("missing.log")
