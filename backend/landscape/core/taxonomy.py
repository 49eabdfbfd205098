"""
Taxonomy Registry

Static classification tables consumed read-only by the rest of the system:
categories, sources and indeterminacy positions carry display metadata
(name, color); sphere interfaces, element functions and temporal phases
are fixed enumerations.

Lookups are total: an unknown key resolves to an explicit fallback
instead of raising.
"""
from typing import List, Dict, Any
from dataclasses import dataclass, asdict


FALLBACK_COLOR = "#6b9eb8"


@dataclass(frozen=True)
class TaxonomyMeta:
    """Display metadata for a registry key"""
    key: str
    name: str
    color: str
    description: str = ""


@dataclass(frozen=True)
class TaxonomyLookup:
    """
    Result of a registry lookup.

    found=False means the key is not registered and `meta` is the
    fallback entry, so callers can tell the degraded path apart.
    """
    key: str
    found: bool
    meta: TaxonomyMeta


def _table(items: List[TaxonomyMeta]) -> Dict[str, TaxonomyMeta]:
    return {item.key: item for item in items}


CATEGORIES: Dict[str, TaxonomyMeta] = _table([
    TaxonomyMeta(
        key="GEO",
        name="Geological Memory",
        color="#8c6d46",
        description="Strata, tectonics and mineral records of planetary history",
    ),
    TaxonomyMeta(
        key="BIO",
        name="Living Systems",
        color="#4f9a5d",
        description="Evolution, ecosystems and biological self-organisation",
    ),
    TaxonomyMeta(
        key="HYD",
        name="Water & Climate",
        color="#3f7fbf",
        description="Oceans, ice, rivers and atmospheric cycles",
    ),
    TaxonomyMeta(
        key="CUL",
        name="Cultural Landscapes",
        color="#c2703d",
        description="Human shaping of land: agriculture, settlement, ritual",
    ),
    TaxonomyMeta(
        key="TEC",
        name="Technosphere",
        color="#8e5fb5",
        description="Infrastructure, machines and industrial metabolism",
    ),
    TaxonomyMeta(
        key="THO",
        name="Thought & Theory",
        color="#c94f6d",
        description="Ideas about landscape, systems and intelligence",
    ),
])

SOURCES: Dict[str, TaxonomyMeta] = _table([
    TaxonomyMeta(key="SCI", name="Scientific Literature", color="#5b8def"),
    TaxonomyMeta(key="ARC", name="Archive & Archaeology", color="#b5894f"),
    TaxonomyMeta(key="IND", name="Indigenous Knowledge", color="#5aa469"),
    TaxonomyMeta(key="PHI", name="Philosophy", color="#b0608f"),
    TaxonomyMeta(key="LI", name="Landscape Intelligence (user)", color="#e0b341"),
])

INDETERMINACY_POSITIONS: Dict[str, TaxonomyMeta] = _table([
    TaxonomyMeta(key="determined", name="Determined", color="#2f4b7c"),
    TaxonomyMeta(key="probabilistic", name="Probabilistic", color="#665191"),
    TaxonomyMeta(key="emergent", name="Emergent", color="#d45087"),
    TaxonomyMeta(key="open", name="Radically Open", color="#ff7c43"),
])

SPHERE_INTERFACES: List[str] = [
    "litho-bio",
    "hydro-atmo",
    "bio-hydro",
    "anthropo-litho",
    "techno-bio",
    "noo-techno",
]

ELEMENT_FUNCTIONS: List[str] = [
    "memory",
    "boundary",
    "metabolism",
    "signal",
    "feedback",
]

TEMPORAL_PHASES: List[str] = [
    "deep-time",
    "pre-human",
    "early-human",
    "agrarian",
    "industrial",
    "contemporary",
]

FALLBACK_META = TaxonomyMeta(key="", name="Other", color=FALLBACK_COLOR)


def _lookup(table: Dict[str, TaxonomyMeta], key: str) -> TaxonomyLookup:
    meta = table.get(key)
    if meta is None:
        return TaxonomyLookup(key=key, found=False, meta=FALLBACK_META)
    return TaxonomyLookup(key=key, found=True, meta=meta)


def lookup_category(key: str) -> TaxonomyLookup:
    """Resolve a category key, falling back to the neutral color"""
    return _lookup(CATEGORIES, key)


def lookup_source(key: str) -> TaxonomyLookup:
    return _lookup(SOURCES, key)


def lookup_indeterminacy(key: str) -> TaxonomyLookup:
    return _lookup(INDETERMINACY_POSITIONS, key)


def to_api_response() -> Dict[str, Any]:
    """Registry contents shaped for the API"""
    return {
        "categories": [asdict(meta) for meta in CATEGORIES.values()],
        "sources": [asdict(meta) for meta in SOURCES.values()],
        "indeterminacy": [asdict(meta) for meta in INDETERMINACY_POSITIONS.values()],
        "sphere_interfaces": list(SPHERE_INTERFACES),
        "element_functions": list(ELEMENT_FUNCTIONS),
        "temporal_phases": list(TEMPORAL_PHASES),
    }
