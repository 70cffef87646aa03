"""XML encoding of the tagged model list.

Layout (same element names a .NET `XmlSerializer` uses for `List<T>`):

    <ArrayOfAnimalModel>
      <AnimalModel><Type>Dog</Type></AnimalModel>
      ...
    </ArrayOfAnimalModel>

The element names come from the factory's `model_name`, so writer and reader
always agree on the schema of one system.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from core.domain.factory import VariantFactory
from core.domain.models import TaggedModel
from core.domain.variant import Variant
from core.errors import FormatError

logger = logging.getLogger(__name__)

_TYPE_ELEMENT = "Type"


class XmlSerializer:
    extension = ".xml"

    def __init__(self, factory: VariantFactory) -> None:
        self._factory = factory

    @property
    def root_name(self) -> str:
        return f"ArrayOf{self._factory.model_name}"

    def serialize(self, entities: Sequence[Variant], destination: Path) -> None:
        root = ET.Element(self.root_name)
        for entity in entities:
            model = TaggedModel.from_tag(entity.tag)
            record = ET.SubElement(root, self._factory.model_name)
            ET.SubElement(record, _TYPE_ELEMENT).text = model.type

        tree = ET.ElementTree(root)
        ET.indent(tree)
        with destination.open("wb") as fh:
            tree.write(fh, encoding="utf-8", xml_declaration=True)
        logger.debug("Wrote %d records to %s", len(root), destination)

    def deserialize(self, source: Path) -> list[Variant]:
        with source.open("rb") as fh:
            try:
                root = ET.parse(fh).getroot()
            except ET.ParseError as exc:
                raise FormatError(f"malformed XML ({exc})", source=source) from exc

        models = self._read_models(root, source)
        logger.debug("Read %d records from %s", len(models), source)
        return self._factory.create_all(models)

    def _read_models(self, root: ET.Element, source: Path) -> list[TaggedModel]:
        if root.tag != self.root_name:
            raise FormatError(
                f"expected root <{self.root_name}>, found <{root.tag}>",
                source=source,
            )

        models: list[TaggedModel] = []
        for index, record in enumerate(root):
            if record.tag != self._factory.model_name:
                raise FormatError(
                    f"unexpected element <{record.tag}> at position {index}",
                    source=source,
                )
            tag = record.findtext(_TYPE_ELEMENT)
            try:
                models.append(TaggedModel.from_tag((tag or "").strip()))
            except ValidationError as exc:
                raise FormatError(
                    f"record {index} has no <{_TYPE_ELEMENT}> value",
                    source=source,
                ) from exc
        return models
