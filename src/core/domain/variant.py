"""Base class for closed variant sets.

Variants are stateless: every instance of the same class is interchangeable,
so equality and hashing go by the type tag only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from core.interfaces.output import OutputSink


class Variant(ABC):
    """One concrete case of a closed entity set (Dog, Circle, ...)."""

    name: ClassVar[str]

    @property
    def tag(self) -> str:
        """Type tag persisted for this variant (the class name)."""

        return type(self).__name__

    @abstractmethod
    def display(self, output: OutputSink) -> None:
        """Write this variant to `output`."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variant):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(self.tag)

    def __repr__(self) -> str:
        return f"{self.tag}()"
