"""
Filter Engine - compound acceptance sets plus free-text search.

Every dimension holds a set of accepted keys and starts out accepting
every registry key. An entry is visible when its value is accepted in
each applied dimension. Sphere interface is tracked but never applied;
element function is not a filter dimension at all.
"""
import logging
from enum import Enum
from typing import Iterable, Optional, Protocol

from landscape.core import taxonomy
from landscape.schemas.entry import Entry

logger = logging.getLogger(__name__)


class FilterDimension(str, Enum):
    CATEGORY = "category"
    SOURCE = "source"
    SPHERE_INTERFACE = "sphere_interface"
    INDETERMINACY = "indeterminacy"
    TEMPORAL_PHASE = "temporal_phase"


# Entry attribute checked for each applied dimension
APPLIED_DIMENSIONS: dict[FilterDimension, str] = {
    FilterDimension.CATEGORY: "category",
    FilterDimension.SOURCE: "source",
    FilterDimension.INDETERMINACY: "indeterminacy",
    FilterDimension.TEMPORAL_PHASE: "temporal_phase",
}

# Dimensions still applied while a search query is active
SEARCH_DIMENSIONS = (FilterDimension.CATEGORY, FilterDimension.SOURCE)


class SupportsAll(Protocol):
    def all(self) -> list[Entry]: ...


def all_keys(dimension: FilterDimension) -> set[str]:
    """Every registry key of a dimension (the identity filter)."""
    if dimension == FilterDimension.CATEGORY:
        return set(taxonomy.CATEGORIES)
    if dimension == FilterDimension.SOURCE:
        return set(taxonomy.SOURCES)
    if dimension == FilterDimension.SPHERE_INTERFACE:
        return set(taxonomy.SPHERE_INTERFACES)
    if dimension == FilterDimension.INDETERMINACY:
        return set(taxonomy.INDETERMINACY_POSITIONS)
    return set(taxonomy.TEMPORAL_PHASES)


def parse_dimension(value: str) -> FilterDimension:
    """Accept enum values plus the short aliases used by the filter panel."""
    aliases = {
        "categories": FilterDimension.CATEGORY,
        "sources": FilterDimension.SOURCE,
        "temporal": FilterDimension.TEMPORAL_PHASE,
        "temporalPhase": FilterDimension.TEMPORAL_PHASE,
        "sphereInterface": FilterDimension.SPHERE_INTERFACE,
    }
    if value in aliases:
        return aliases[value]
    try:
        return FilterDimension(value)
    except ValueError:
        raise ValueError(f"Unknown filter dimension: {value}")


class FilterState:
    """
    Accepted-key sets for each filter dimension.

    Mutated only through set_acceptance() and reset(); never touched by
    relation derivation.
    """

    def __init__(self, search_bypasses_phase_filters: bool = True):
        self.search_bypasses_phase_filters = search_bypasses_phase_filters
        self._accepted: dict[FilterDimension, set[str]] = {}
        self.reset()

    def reset(self) -> None:
        """Accept every registry key in every dimension."""
        self._accepted = {dimension: all_keys(dimension) for dimension in FilterDimension}

    def set_acceptance(self, dimension: FilterDimension, key: str, accepted: bool) -> None:
        """
        Accept or reject one key in one dimension.

        Unknown keys are stored as-is: no entry carries them, so they
        have no effect.
        """
        dimension = parse_dimension(dimension) if isinstance(dimension, str) else dimension
        if accepted:
            self._accepted[dimension].add(key)
        else:
            self._accepted[dimension].discard(key)

    def accepted(self, dimension: FilterDimension) -> frozenset[str]:
        return frozenset(self._accepted[dimension])

    def accepts(self, entry: Entry, dimensions: Iterable[FilterDimension]) -> bool:
        return all(
            getattr(entry, APPLIED_DIMENSIONS[dimension]) in self._accepted[dimension]
            for dimension in dimensions
        )

    def visible_entries(self, store: SupportsAll, query: Optional[str] = None) -> list[Entry]:
        """
        Entries of `store` passing the filters, in store order.

        With a non-empty query the entry's search text must contain it
        (case-insensitive). While searching, only category and source
        filters apply unless search_bypasses_phase_filters is off.
        """
        needle = (query or "").lower()
        if not needle:
            dimensions = tuple(APPLIED_DIMENSIONS)
            return [e for e in store.all() if self.accepts(e, dimensions)]

        if self.search_bypasses_phase_filters:
            dimensions = SEARCH_DIMENSIONS
        else:
            dimensions = tuple(APPLIED_DIMENSIONS)
        return [
            e for e in store.all()
            if needle in e.search_text() and self.accepts(e, dimensions)
        ]

    def to_dict(self) -> dict[str, list[str]]:
        return {
            dimension.value: sorted(self._accepted[dimension])
            for dimension in FilterDimension
        }
