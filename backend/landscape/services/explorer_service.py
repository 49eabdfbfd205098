"""
Explorer session - the single owner of interactive state.

Holds the filter state, search query, color mode, view mode, selection
and relation-type visibility. Every mutation recomputes the derived
views (visible entries -> relations -> colors -> stats) and returns them
as one snapshot, under a lock so no caller sees a half-updated filter
against a stale subset.
"""
import logging
import threading
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel

from landscape.config import get_settings
from landscape.schemas.entry import Entry, EntryCreate
from landscape.schemas.relation import Relation, RelationType, RELATION_TYPE_ORDER
from landscape.services.color_service import ColorMode, colors_for, parse_color_mode
from landscape.services.entry_store import EntryStore, get_entry_store
from landscape.services.filter_service import FilterDimension, FilterState, parse_dimension
from landscape.services.relation_service import (
    DEFAULT_VISIBLE_TYPES,
    derive_relations,
    filter_relations,
    parse_relation_type,
    relation_counts,
)
from landscape.services.view_service import (
    ExplorerStats,
    RadialSector,
    TimelineGroup,
    compute_stats,
    radial_sectors,
    timeline_groups,
)

logger = logging.getLogger(__name__)

# Marks an update_view() argument that was not supplied
_UNSET = object()


class ViewMode(str, Enum):
    NETWORK = "network"
    TIMELINE = "timeline"
    RADIAL = "radial"


def parse_view_mode(value: str) -> ViewMode:
    try:
        return ViewMode(value)
    except ValueError:
        raise ValueError(f"Unknown view mode: {value}")


class ExplorerSnapshot(BaseModel):
    """Derived views after the latest state change."""
    entries: list[Entry]
    relations: list[Relation]
    relation_counts: dict[str, int]
    colors: dict[int, str]
    stats: ExplorerStats
    query: Optional[str] = None
    color_mode: ColorMode
    view_mode: ViewMode
    selected_id: Optional[int] = None
    visible_relation_types: list[RelationType]


class ExplorerSession:
    """Interactive state over one entry store."""

    def __init__(
        self,
        store: EntryStore,
        search_bypasses_phase_filters: bool = True,
        color_mode: ColorMode = ColorMode.CATEGORY,
    ):
        self.store = store
        self.filters = FilterState(search_bypasses_phase_filters=search_bypasses_phase_filters)
        self.query: Optional[str] = None
        self.color_mode = color_mode
        self.view_mode = ViewMode.NETWORK
        self.selected_id: Optional[int] = None
        self.visible_types: set[RelationType] = set(DEFAULT_VISIBLE_TYPES)
        self._lock = threading.RLock()

    # ============== Derived views ==============

    def visible_entries(self) -> list[Entry]:
        return self.filters.visible_entries(self.store, self.query)

    def relations(self, all_types: bool = False) -> list[Relation]:
        """Relations among visible entries, optionally ignoring type visibility."""
        with self._lock:
            derived = derive_relations(self.visible_entries())
            if all_types:
                return derived
            return filter_relations(derived, self.visible_types)

    def snapshot(self) -> ExplorerSnapshot:
        with self._lock:
            visible = self.visible_entries()
            derived = derive_relations(visible)
            shown = filter_relations(derived, self.visible_types)
            return ExplorerSnapshot(
                entries=visible,
                relations=shown,
                relation_counts=relation_counts(derived),
                colors=colors_for(visible, self.color_mode),
                stats=compute_stats(self.store.all(), visible),
                query=self.query,
                color_mode=self.color_mode,
                view_mode=self.view_mode,
                selected_id=self.selected_id,
                visible_relation_types=[t for t in RELATION_TYPE_ORDER if t in self.visible_types],
            )

    def timeline(self) -> list[TimelineGroup]:
        with self._lock:
            return timeline_groups(self.visible_entries())

    def radial(self) -> list[RadialSector]:
        with self._lock:
            return radial_sectors(self.visible_entries())

    def stats(self) -> ExplorerStats:
        with self._lock:
            return compute_stats(self.store.all(), self.visible_entries())

    # ============== Mutations ==============

    def set_acceptance(self, dimension, key: str, accepted: bool) -> ExplorerSnapshot:
        if isinstance(dimension, str) and not isinstance(dimension, FilterDimension):
            dimension = parse_dimension(dimension)
        with self._lock:
            self.filters.set_acceptance(dimension, key, accepted)
            logger.debug("Filter %s[%s] -> %s", dimension.value, key, accepted)
            return self.snapshot()

    def reset(self) -> ExplorerSnapshot:
        with self._lock:
            self.filters.reset()
            return self.snapshot()

    def set_query(self, query: Optional[str]) -> ExplorerSnapshot:
        with self._lock:
            self.query = query or None
            return self.snapshot()

    def set_color_mode(self, mode) -> ExplorerSnapshot:
        if isinstance(mode, str) and not isinstance(mode, ColorMode):
            mode = parse_color_mode(mode)
        with self._lock:
            self.color_mode = mode
            return self.snapshot()

    def set_view(self, view) -> ExplorerSnapshot:
        if isinstance(view, str) and not isinstance(view, ViewMode):
            view = parse_view_mode(view)
        with self._lock:
            self.view_mode = view
            return self.snapshot()

    def select(self, entry_id: Optional[int]) -> ExplorerSnapshot:
        """Select an entry by id, or clear the selection with None."""
        with self._lock:
            if entry_id is not None and self.store.get(entry_id) is None:
                raise LookupError(f"Entry not found: {entry_id}")
            self.selected_id = entry_id
            return self.snapshot()

    def update_view(self, color_mode=None, view_mode=None, selected_id=_UNSET) -> ExplorerSnapshot:
        """
        Change color mode, view mode and selection in one step.

        Every argument is checked before anything is applied, so a bad
        value leaves the session untouched. Pass selected_id=None to
        clear the selection; omit it to keep the current one.
        """
        if isinstance(color_mode, str) and not isinstance(color_mode, ColorMode):
            color_mode = parse_color_mode(color_mode)
        if isinstance(view_mode, str) and not isinstance(view_mode, ViewMode):
            view_mode = parse_view_mode(view_mode)
        with self._lock:
            if selected_id is not _UNSET and selected_id is not None and self.store.get(selected_id) is None:
                raise LookupError(f"Entry not found: {selected_id}")
            if color_mode is not None:
                self.color_mode = color_mode
            if view_mode is not None:
                self.view_mode = view_mode
            if selected_id is not _UNSET:
                self.selected_id = selected_id
            return self.snapshot()

    def set_relation_visibility(self, relation_type, visible: bool) -> ExplorerSnapshot:
        if isinstance(relation_type, str) and not isinstance(relation_type, RelationType):
            relation_type = parse_relation_type(relation_type)
        with self._lock:
            if visible:
                self.visible_types.add(relation_type)
            else:
                self.visible_types.discard(relation_type)
            return self.snapshot()

    def append(self, candidate: EntryCreate) -> tuple[Entry, ExplorerSnapshot]:
        with self._lock:
            entry = self.store.append(candidate)
            return entry, self.snapshot()


@lru_cache()
def get_explorer_session() -> ExplorerSession:
    """Get the process-wide explorer session."""
    settings = get_settings()
    return ExplorerSession(
        get_entry_store(),
        search_bypasses_phase_filters=settings.search_bypasses_phase_filters,
        color_mode=parse_color_mode(settings.default_color_mode),
    )
