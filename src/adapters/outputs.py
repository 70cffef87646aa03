"""Output sinks for displayed entities.

Why two classes and no base:
- The console sink holds nothing; the file sink owns a handle and must be
  closed. Only the file sink is a context manager.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

from rich.console import Console

logger = logging.getLogger(__name__)


class ConsoleOutput:
    """Writes each line to stdout as-is (no markup, no highlighting)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(markup=False, highlight=False, emoji=False)

    def write_line(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


class FileOutput:
    """Writes lines to a file opened in truncate mode until closed.

    Intended use:

        with FileOutput(path) as output:
            shape.display(output)
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._fh = path.open("w", encoding="utf-8", newline="\n")
        logger.debug("Opened render file %s", path)

    @property
    def closed(self) -> bool:
        return self._fh.closed

    def write_line(self, text: str) -> None:
        self._fh.write(text + "\n")

    def close(self) -> None:
        if self._fh.closed:
            return
        self._fh.flush()
        self._fh.close()
        logger.debug("Closed render file %s", self.path)

    def __enter__(self) -> "FileOutput":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
