"""Output sink contract.

Why Protocol:
- Console and file sinks share no base class; anything with `write_line`
  (including a plain list-backed fake in tests) can receive displayed text.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Destination for rendered text, one line at a time."""

    def write_line(self, text: str) -> None:
        ...
