"""File storage service.

A thin pass-through: the serializer (and so the encoding) is injected once
and stays fixed for the lifetime of the service.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from core.domain.variant import Variant
from core.interfaces.serializer import EntitySerializer


class FileStorageService:
    def __init__(self, serializer: EntitySerializer) -> None:
        self.serializer = serializer

    def save(self, entities: Sequence[Variant], path: Path) -> None:
        self.serializer.serialize(entities, path)

    def load(self, path: Path) -> list[Variant]:
        return self.serializer.deserialize(path)
