"""JSON encoding of the tagged model list.

Layout: `[{"Type": "Dog"}, {"Type": "Cat"}, ...]`, UTF-8.

Why Pydantic for reading:
- `TypeAdapter(list[TaggedModel])` rejects anything that is not a list of
  single-field records, so a hand-edited file fails loudly instead of
  producing a partial list.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from core.domain.factory import VariantFactory
from core.domain.models import TAGGED_MODEL_LIST, TaggedModel
from core.domain.variant import Variant
from core.errors import FormatError

logger = logging.getLogger(__name__)


class JsonSerializer:
    extension = ".json"

    def __init__(self, factory: VariantFactory) -> None:
        self._factory = factory

    def serialize(self, entities: Sequence[Variant], destination: Path) -> None:
        models = [TaggedModel.from_tag(entity.tag) for entity in entities]
        payload = [model.to_payload() for model in models]
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        destination.write_text(text, encoding="utf-8")
        logger.debug("Wrote %d records to %s", len(models), destination)

    def deserialize(self, source: Path) -> list[Variant]:
        raw = source.read_bytes()
        try:
            models = TAGGED_MODEL_LIST.validate_json(raw)
        except ValidationError as exc:
            raise FormatError(
                f"not a JSON list of tagged records ({exc.error_count()} errors)",
                source=source,
            ) from exc
        logger.debug("Read %d records from %s", len(models), source)
        return self._factory.create_all(models)
