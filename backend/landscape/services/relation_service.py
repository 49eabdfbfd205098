"""
Relation Engine - typed pairwise relations among a subset of entries.

Relations are recomputed from scratch on every call and never stored.
For each unordered pair (a, b) with a.id < b.id:

- citation:      either entry lists the other in `connections`
- thematic:      same category
- sphere:        same sphere interface, different category
- element:       same element function, different category
- indeterminacy: same indeterminacy position, different category

The category-inequality guard on the last three keeps them from
duplicating thematic relations.
"""
import logging
from collections import defaultdict
from itertools import combinations
from typing import Iterable, Optional, Sequence

from landscape.schemas.entry import Entry
from landscape.schemas.relation import Relation, RelationType, RELATION_TYPE_ORDER

logger = logging.getLogger(__name__)

# Relation types shown when a session starts
DEFAULT_VISIBLE_TYPES: frozenset[RelationType] = frozenset({
    RelationType.THEMATIC,
    RelationType.CITATION,
})

# Attribute whose equality (across categories) defines each structural type
_CROSS_CATEGORY_KEYS: dict[RelationType, str] = {
    RelationType.SPHERE: "sphere_interface",
    RelationType.ELEMENT: "element_function",
    RelationType.INDETERMINACY: "indeterminacy",
}


def _pair_types(a: Entry, b: Entry) -> list[RelationType]:
    """Relation types holding for one pair, in emission order."""
    types = []
    if b.id in a.connections or a.id in b.connections:
        types.append(RelationType.CITATION)
    if a.category == b.category:
        types.append(RelationType.THEMATIC)
    else:
        for relation_type, attr in _CROSS_CATEGORY_KEYS.items():
            if getattr(a, attr) == getattr(b, attr):
                types.append(relation_type)
    return types


def derive_relations(subset: Sequence[Entry]) -> list[Relation]:
    """
    Derive every relation among `subset`.

    Pairs are visited once in canonical (lower id first) orientation, so
    each unordered pair yields at most one relation per type. Connection
    ids that do not belong to the subset never produce a relation.
    Result order: by (source_id, target_id, type order).
    """
    ordered = sorted(subset, key=lambda e: e.id)
    relations = []
    for a, b in combinations(ordered, 2):
        if a.id == b.id:
            continue
        for relation_type in _pair_types(a, b):
            relations.append(Relation(source_id=a.id, target_id=b.id, type=relation_type))

    logger.debug("Derived %d relations among %d entries", len(relations), len(ordered))
    return relations


def derive_relations_bucketed(subset: Sequence[Entry]) -> list[Relation]:
    """
    Same result as derive_relations, computed by grouping on shared keys.

    Categorical relations only compare entries inside a bucket, and
    citations are read straight off the connection lists, so the cost is
    O(n) bucketing plus O(k^2) within each bucket.
    """
    by_id = {}
    for entry in subset:
        by_id.setdefault(entry.id, entry)

    found: set[Relation] = set()

    for entry in by_id.values():
        for other_id in entry.connections:
            if other_id in by_id and other_id != entry.id:
                low, high = sorted((entry.id, other_id))
                found.add(Relation(source_id=low, target_id=high, type=RelationType.CITATION))

    def buckets(attr: str) -> Iterable[list[Entry]]:
        groups = defaultdict(list)
        for entry in by_id.values():
            groups[getattr(entry, attr)].append(entry)
        return groups.values()

    for group in buckets("category"):
        for a, b in combinations(sorted(group, key=lambda e: e.id), 2):
            found.add(Relation(source_id=a.id, target_id=b.id, type=RelationType.THEMATIC))

    for relation_type, attr in _CROSS_CATEGORY_KEYS.items():
        for group in buckets(attr):
            for a, b in combinations(sorted(group, key=lambda e: e.id), 2):
                if a.category != b.category:
                    found.add(Relation(source_id=a.id, target_id=b.id, type=relation_type))

    return sorted(found, key=Relation.ordering)


def filter_relations(
    relations: Iterable[Relation],
    visible_types: Optional[Iterable[RelationType]] = None,
) -> list[Relation]:
    """Keep relations whose type is switched on (all types if None)."""
    if visible_types is None:
        return list(relations)
    allowed = set(visible_types)
    return [r for r in relations if r.type in allowed]


def relation_counts(relations: Iterable[Relation]) -> dict[str, int]:
    """Number of relations per type, every type present."""
    counts = {t.value: 0 for t in RELATION_TYPE_ORDER}
    for relation in relations:
        counts[relation.type.value] += 1
    return counts


def parse_relation_type(value: str) -> RelationType:
    try:
        return RelationType(value)
    except ValueError:
        raise ValueError(f"Unknown relation type: {value}")
