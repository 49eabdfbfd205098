"""Pydantic schemas for API request/response validation."""
from landscape.schemas.entry import Entry, EntryCreate, FiveCriteria
from landscape.schemas.relation import Relation, RelationType

__all__ = [
    "Entry", "EntryCreate", "FiveCriteria",
    "Relation", "RelationType",
]
