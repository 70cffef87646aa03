"""Persisted models (Pydantic v2).

Why Pydantic here:
- The tagged model is the only shape written to disk; validating it at the
  boundary turns malformed files into a clear error instead of a partial list.
- The `Type` alias is the only accepted key, for JSON and XML alike.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.config import ConfigDict


class TaggedModel(BaseModel):
    """Minimal persisted record: the type tag of one variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(
        ...,
        alias="Type",
        min_length=1,
        description="Class name of the variant to rebuild (e.g. 'Dog', 'Circle').",
    )

    @classmethod
    def from_tag(cls, tag: str) -> "TaggedModel":
        return cls.model_validate({"Type": tag})

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


TAGGED_MODEL_LIST = TypeAdapter(list[TaggedModel])
