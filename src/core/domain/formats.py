"""Selectable options read at startup.

Both selectors default instead of failing on unknown input: anything other
than a recognised value falls back to JSON / console.
"""

from __future__ import annotations

from enum import Enum


def _normalize(value: str | None) -> str:
    return (value or "").strip().lower()


class SerializationFormat(str, Enum):
    """Encodings supported by the serializers."""

    JSON = "json"
    XML = "xml"

    @classmethod
    def default(cls) -> "SerializationFormat":
        return cls.JSON

    @classmethod
    def parse(cls, value: str | None) -> "SerializationFormat | None":
        """Return the matching format or `None` when the input is not recognised."""

        try:
            return cls(_normalize(value))
        except ValueError:
            return None

    @classmethod
    def from_choice(cls, value: str | None) -> "SerializationFormat":
        return cls.parse(value) or cls.default()

    @property
    def extension(self) -> str:
        return f".{self.value}"


class OutputTarget(str, Enum):
    """Where rendered shapes are written."""

    CONSOLE = "console"
    FILE = "file"

    @classmethod
    def default(cls) -> "OutputTarget":
        return cls.CONSOLE

    @classmethod
    def from_choice(cls, value: str | None) -> "OutputTarget":
        try:
            return cls(_normalize(value))
        except ValueError:
            return cls.default()
