"""
Shared fixtures for the Landscape Intelligence Network tests.
"""
from typing import Optional

import pytest

from landscape.core import taxonomy
from landscape.schemas.entry import Entry
from landscape.services.entry_store import EntryStore
from landscape.services.explorer_service import ExplorerSession
from landscape.services.filter_service import FilterDimension


def make_entry(
    entry_id: int,
    category: str = "GEO",
    source: str = "SCI",
    sphere_interface: str = "litho-bio",
    element_function: str = "memory",
    indeterminacy: str = "determined",
    temporal_phase: str = "deep-time",
    connections: Optional[list[int]] = None,
    sort_key: float = -1000.0,
    is_anchor: bool = False,
    title: Optional[str] = None,
    description: str = "",
    keywords: Optional[list[str]] = None,
    location: str = "",
) -> Entry:
    return Entry(
        id=entry_id,
        title=title or f"Entry {entry_id}",
        description=description,
        location=location,
        year=str(sort_key),
        sort_key=sort_key,
        category=category,
        source=source,
        sphere_interface=sphere_interface,
        element_function=element_function,
        indeterminacy=indeterminacy,
        temporal_phase=temporal_phase,
        is_anchor=is_anchor,
        keywords=keywords or [],
        connections=connections or [],
    )


@pytest.fixture
def scenario_entries() -> list[Entry]:
    """
    1 and 2 share category GEO and 1 cites 2; 3 (BIO) and 4 (HYD) share
    only a sphere interface. Every other attribute differs pairwise.
    """
    return [
        make_entry(1, category="GEO", sphere_interface="litho-bio",
                   element_function="memory", indeterminacy="determined", connections=[2]),
        make_entry(2, category="GEO", sphere_interface="hydro-atmo",
                   element_function="boundary", indeterminacy="probabilistic"),
        make_entry(3, category="BIO", sphere_interface="techno-bio",
                   element_function="metabolism", indeterminacy="emergent"),
        make_entry(4, category="HYD", sphere_interface="techno-bio",
                   element_function="signal", indeterminacy="open"),
    ]


@pytest.fixture
def scenario_store(scenario_entries) -> EntryStore:
    return EntryStore(scenario_entries)


@pytest.fixture
def catalogue_entries() -> list[Entry]:
    """A small mixed catalogue for filter, search and view tests."""
    return [
        make_entry(1, category="GEO", source="SCI", indeterminacy="determined",
                   temporal_phase="deep-time", sort_key=-4_500_000_000, is_anchor=True,
                   title="Formation of the Earth", keywords=["accretion"], location="Solar system",
                   connections=[3]),
        make_entry(2, category="BIO", source="SCI", indeterminacy="probabilistic",
                   temporal_phase="deep-time", sort_key=-3_700_000_000,
                   title="Isua stromatolites", description="Microbial mats shaping rock",
                   keywords=["early life"], location="Greenland"),
        make_entry(3, category="CUL", source="IND", indeterminacy="emergent",
                   temporal_phase="agrarian", sort_key=-3000, is_anchor=True,
                   title="Amazonian terra preta", description="Dark earths built from charcoal",
                   keywords=["soil", "biochar"], location="Central Amazon", connections=[1, 42]),
        make_entry(4, category="TEC", source="ARC", indeterminacy="determined",
                   temporal_phase="industrial", sort_key=1784,
                   title="Rotative steam engine", keywords=["coal"], location="Birmingham"),
        make_entry(5, category="BIO", source="SCI", indeterminacy="emergent",
                   temporal_phase="pre-human", sort_key=-470_000_000,
                   title="Plants colonise land", description="Soil formation begins",
                   keywords=["weathering"], location="Gondwana"),
    ]


@pytest.fixture
def catalogue_store(catalogue_entries) -> EntryStore:
    return EntryStore(catalogue_entries)


@pytest.fixture
def session(catalogue_store) -> ExplorerSession:
    return ExplorerSession(catalogue_store)


def only_accept(state, dimension: FilterDimension, keys: set[str]) -> None:
    """Reject every registry key of `dimension` except `keys`."""
    registry = {
        FilterDimension.CATEGORY: taxonomy.CATEGORIES,
        FilterDimension.SOURCE: taxonomy.SOURCES,
        FilterDimension.INDETERMINACY: taxonomy.INDETERMINACY_POSITIONS,
        FilterDimension.TEMPORAL_PHASE: taxonomy.TEMPORAL_PHASES,
    }[dimension]
    for key in registry:
        state.set_acceptance(dimension, key, key in keys)
