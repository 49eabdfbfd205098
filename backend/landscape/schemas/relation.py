"""Relation schemas."""
from enum import Enum

from pydantic import BaseModel, model_validator


class RelationType(str, Enum):
    CITATION = "citation"
    THEMATIC = "thematic"
    SPHERE = "sphere"
    ELEMENT = "element"
    INDETERMINACY = "indeterminacy"


# Order in which relation types are emitted for a single pair
RELATION_TYPE_ORDER: list[RelationType] = [
    RelationType.CITATION,
    RelationType.THEMATIC,
    RelationType.SPHERE,
    RelationType.ELEMENT,
    RelationType.INDETERMINACY,
]


class Relation(BaseModel):
    """
    Undirected typed connection between two entries.

    Always stored in canonical orientation (source_id < target_id), which
    makes (source_id, target_id, type) the dedup key.
    """
    source_id: int
    target_id: int
    type: RelationType

    @model_validator(mode="after")
    def _canonical(self):
        if self.source_id >= self.target_id:
            raise ValueError(
                f"Relation must satisfy source_id < target_id, got {self.source_id}, {self.target_id}"
            )
        return self

    def ordering(self) -> tuple[int, int, int]:
        return (self.source_id, self.target_id, RELATION_TYPE_ORDER.index(self.type))

    class Config:
        frozen = True
