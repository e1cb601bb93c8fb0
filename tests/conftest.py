"""Shared pytest fixtures for the prompted test-suite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Tuple

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

ENV_VARS = (
    "PROMPTED_ENCODING",
    "PROMPTED_LOG_LEVEL",
    "PROMPTED_COLOR",
    "PROMPTED_DEMO_CONFIG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class FailingStream:
    """Text or binary stream whose every operation raises ``OSError``."""

    def __init__(self, message: str = "boom", *, fail_write: bool = True, fail_flush: bool = True) -> None:
        self.message = message
        self.fail_write = fail_write
        self.fail_flush = fail_flush
        self.written: List[str] = []
        self.flushes = 0

    def write(self, text: str) -> int:
        if self.fail_write:
            raise OSError(self.message)
        self.written.append(text)
        return len(text)

    def flush(self) -> None:
        if self.fail_flush:
            raise OSError(self.message)
        self.flushes += 1

    def readline(self) -> str:
        raise OSError(self.message)

    def read(self, size: int = -1) -> bytes:
        raise OSError(self.message)


class RecordingStream:
    """Records writes, flushes and reads in one shared event list."""

    def __init__(self, events: List[Tuple[str, ...]], text: str = "") -> None:
        self.events = events
        self._lines = text.splitlines(keepends=True)

    def write(self, text: str) -> int:
        self.events.append(("write", text))
        return len(text)

    def flush(self) -> None:
        self.events.append(("flush",))

    def readline(self) -> str:
        self.events.append(("read",))
        return self._lines.pop(0) if self._lines else ""
