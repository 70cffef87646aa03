"""Error taxonomy of the Core.

Why here:
- Adapters (JSON/XML) and the domain factory raise the same errors, so the
  CLI can handle them in one place without knowing which encoding was used.
- I/O failures are plain `OSError` and are never wrapped.
"""

from __future__ import annotations

from pathlib import Path


class MenagerieError(Exception):
    """Base class for every error raised by the Core."""


class UnknownVariantError(MenagerieError, LookupError):
    """A type tag outside the closed set of a system."""

    def __init__(self, tag: str, *, kind: str = "варианта") -> None:
        self.tag = tag
        self.kind = kind
        super().__init__(f"Неизвестный тип {kind}: {tag}")


class FormatError(MenagerieError, ValueError):
    """Serialized content that cannot be read as a list of tagged models."""

    def __init__(self, message: str, *, source: Path | None = None) -> None:
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)
