from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    "I 1 boot ok",
                    "E 10 2 disk failure",
                    "W 3 low battery",
                    "E 60 4 meltdown",
                    "garbage line",
                ]
            ),
            encoding="utf-8",
        )

    return _write


@pytest.fixture
def write_sample_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    "I 6 Completed armadillo processing",
                    "I 1 Nothing to report",
                    "E 99 10 Flange failed!",
                    "I 4 Everything normal",
                    "W 5 Flange is due for a check-up",
                    "E 70 3 Way too many pickles",
                    "E 65 8 Bad pickle-flange interaction detected",
                    "E 20 2 Too many pickles",
                    "I 7 Out of bounds error",
                    "E 80 10 Duplicate timestamp, never reported",
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write
