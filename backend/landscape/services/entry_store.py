"""
Entry Store - ordered, append-only catalogue of entries.

Curated entries are loaded from a JSON seed file; entries submitted
through the add-entry form are appended at the end with the next id.
Nothing is persisted back to disk.
"""
import json
import logging
import math
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import ValidationError

from landscape.config import get_settings
from landscape.schemas.entry import Entry, EntryCreate

logger = logging.getLogger(__name__)


def parse_sort_key(raw: Optional[Union[float, int, str]]) -> float:
    """
    Resolve a submitted sort key.

    Missing, unparseable or non-finite values fall back to the current
    calendar year.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return float(datetime.now().year)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.debug("Unparseable sortKey %r, using current year", raw)
        return float(datetime.now().year)
    if not math.isfinite(value):
        logger.debug("Non-finite sortKey %r, using current year", raw)
        return float(datetime.now().year)
    return value


def split_keywords(text: str) -> list[str]:
    """Comma-separated keyword text -> trimmed, non-empty tokens."""
    return [token.strip() for token in text.split(",") if token.strip()]


class EntryStore:
    """In-memory entry catalogue (no persistence across sessions)."""

    def __init__(
        self,
        entries: Optional[Iterable[Entry]] = None,
        user_source_tag: str = "LI",
    ):
        self.user_source_tag = user_source_tag
        self._entries: list[Entry] = []
        self._ids: set[int] = set()
        for entry in entries or []:
            self._insert(entry)

    @classmethod
    def from_json(cls, path: Path, user_source_tag: str = "LI") -> "EntryStore":
        """Load curated entries from a JSON list of records."""
        return cls(load_seed_entries(path), user_source_tag=user_source_tag)

    def _insert(self, entry: Entry) -> bool:
        if entry.id in self._ids:
            logger.warning("Skipping entry with duplicate id %s (%s)", entry.id, entry.title)
            return False
        self._entries.append(entry)
        self._ids.add(entry.id)
        return True

    @property
    def max_id(self) -> int:
        return max(self._ids, default=0)

    def __len__(self) -> int:
        return len(self._entries)

    def all(self) -> list[Entry]:
        """All entries in insertion order."""
        return list(self._entries)

    def get(self, entry_id: int) -> Optional[Entry]:
        """Get a single entry by id."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def append(self, candidate: EntryCreate) -> Entry:
        """
        Store a submitted record as a new entry.

        The new id is the current maximum id + 1; source is fixed to the
        user tag and connections start empty.
        """
        entry = Entry(
            id=self.max_id + 1,
            year=candidate.year,
            sort_key=parse_sort_key(candidate.sort_key),
            location=candidate.location,
            title=candidate.title,
            description=candidate.description,
            keywords=split_keywords(candidate.keywords),
            citation=candidate.citation,
            category=candidate.category,
            source=self.user_source_tag,
            sphere_interface=candidate.sphere_interface,
            element_function=candidate.element_function,
            indeterminacy=candidate.indeterminacy,
            five_criteria=candidate.five_criteria,
            temporal_phase=candidate.temporal_phase,
            is_anchor=candidate.is_anchor,
            connections=[],
        )
        self._insert(entry)
        logger.info("Appended entry %s: %s", entry.id, entry.title)
        return entry


def load_seed_entries(path: Path) -> list[Entry]:
    """Read seed records, skipping (and logging) malformed ones."""
    path = Path(path)
    if not path.exists():
        logger.warning("Seed file %s not found, starting with an empty catalogue", path)
        return []
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    entries = []
    for index, record in enumerate(records):
        try:
            entries.append(Entry.model_validate(record))
        except ValidationError as e:
            logger.warning("Skipping malformed seed record #%d: %s", index, e.errors()[0]["msg"])
    logger.info("Loaded %d seed entries from %s", len(entries), path)
    return entries


@lru_cache()
def get_entry_store() -> EntryStore:
    """Get singleton entry store instance."""
    settings = get_settings()
    return EntryStore.from_json(settings.seed_data_path, user_source_tag=settings.user_source_tag)
