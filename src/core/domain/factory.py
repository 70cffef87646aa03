"""Rebuilds variants from their persisted type tags.

The set of tags is closed per system: the registry is built once from the
variant classes and anything outside it raises `UnknownVariantError`.
"""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from core.domain.animals import Animal, Cat, Cow, Dog
from core.domain.models import TaggedModel
from core.domain.shapes import Circle, Shape, Square, Triangle
from core.domain.variant import Variant
from core.errors import UnknownVariantError

V = TypeVar("V", bound=Variant)


class VariantFactory(Generic[V]):
    """Maps type tags of one system to its variant classes.

    `model_name` is the record name used by encodings that need one (XML),
    `kind` is the noun used in error messages.
    """

    def __init__(self, *, model_name: str, kind: str, variants: Iterable[type[V]]) -> None:
        self.model_name = model_name
        self.kind = kind
        self._registry: dict[str, type[V]] = {cls.__name__: cls for cls in variants}

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._registry)

    def create(self, tag: str) -> V:
        try:
            cls = self._registry[tag]
        except KeyError:
            raise UnknownVariantError(tag, kind=self.kind) from None
        return cls()

    def create_all(self, items: Iterable[str | TaggedModel]) -> list[V]:
        """Build every variant in order; the first unknown tag aborts the whole list."""

        return [
            self.create(item.type if isinstance(item, TaggedModel) else item)
            for item in items
        ]


ANIMAL_FACTORY: VariantFactory[Animal] = VariantFactory(
    model_name="AnimalModel",
    kind="животного",
    variants=(Dog, Cat, Cow),
)

SHAPE_FACTORY: VariantFactory[Shape] = VariantFactory(
    model_name="ShapeModel",
    kind="фигуры",
    variants=(Circle, Square, Triangle),
)
