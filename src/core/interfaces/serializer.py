"""Serializer contract.

Design rules:
- Serializers are stateless apart from the factory they rebuild variants with.
- Each call opens, fully reads or writes, and closes its path.
- `deserialize` never returns a partial list: it raises `OSError`,
  `FormatError` or `UnknownVariantError` instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from core.domain.variant import Variant


@runtime_checkable
class EntitySerializer(Protocol):
    """Persists an ordered list of variants as tagged models."""

    extension: str

    def serialize(self, entities: Sequence["Variant"], destination: Path) -> None:
        ...

    def deserialize(self, source: Path) -> list["Variant"]:
        ...
