"""Shared fixtures.

`src/` is on the import path through `[tool.pytest.ini_options] pythonpath`.
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console


class RecordingOutput:
    """Output sink that keeps every written line in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)


@pytest.fixture
def recording_output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def status_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def status_console(status_buffer: io.StringIO) -> Console:
    return Console(file=status_buffer, soft_wrap=True, color_system=None)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in ("MENAGERIE_DATA_DIR", "MENAGERIE_LOG_LEVEL", "MENAGERIE_SHOW_BANNER", "MENAGERIE_RENDER_FILENAME"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
