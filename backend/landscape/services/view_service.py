"""
View shaping for the renderers: timeline groups, radial sectors, stats.

Geometry beyond sector angles belongs to the renderer.
"""
import math
from typing import Sequence

from pydantic import BaseModel

from landscape.core.taxonomy import CATEGORIES, lookup_category
from landscape.schemas.entry import Entry


class TimelineGroup(BaseModel):
    category: str  # display name, "Other" for unknown categories
    color: str
    entries: list[Entry]


class RadialSector(BaseModel):
    category: str  # registry key
    name: str
    color: str
    angle: float  # radians, first sector points up
    entries: list[Entry]


class ExplorerStats(BaseModel):
    total: int
    visible: int
    anchors: int


def timeline_groups(entries: Sequence[Entry]) -> list[TimelineGroup]:
    """Group by category name (first-appearance order), each sorted by sort key."""
    grouped: dict[str, list[Entry]] = {}
    colors: dict[str, str] = {}
    for entry in entries:
        meta = lookup_category(entry.category).meta
        grouped.setdefault(meta.name, []).append(entry)
        colors.setdefault(meta.name, meta.color)

    return [
        TimelineGroup(
            category=name,
            color=colors[name],
            entries=sorted(members, key=lambda e: e.sort_key),
        )
        for name, members in grouped.items()
    ]


def radial_sectors(entries: Sequence[Entry]) -> list[RadialSector]:
    """One sector per registry category, in registry order."""
    keys = list(CATEGORIES)
    step = (2 * math.pi) / len(keys)
    return [
        RadialSector(
            category=key,
            name=CATEGORIES[key].name,
            color=CATEGORIES[key].color,
            angle=i * step - math.pi / 2,
            entries=[e for e in entries if e.category == key],
        )
        for i, key in enumerate(keys)
    ]


def compute_stats(all_entries: Sequence[Entry], visible: Sequence[Entry]) -> ExplorerStats:
    return ExplorerStats(
        total=len(all_entries),
        visible=len(visible),
        anchors=sum(1 for e in visible if e.is_anchor),
    )
