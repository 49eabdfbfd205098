"""
CSV export of the catalogue's scalar fields.
"""
import csv
from io import StringIO
from typing import Iterable

from landscape.schemas.entry import Entry

EXPORT_FILENAME = "landscape-intelligence-timeline.csv"

COLUMNS: list[tuple[str, str]] = [
    ("ID", "id"),
    ("Year", "year"),
    ("Title", "title"),
    ("Location", "location"),
    ("Category", "category"),
    ("Source", "source"),
    ("Sphere Interface", "sphere_interface"),
    ("Element Function", "element_function"),
    ("Indeterminacy", "indeterminacy"),
    ("Temporal Phase", "temporal_phase"),
    ("Is Anchor", "is_anchor"),
    ("Description", "description"),
    ("Citation", "citation"),
]


def _cell(entry: Entry, attr: str) -> str:
    value = getattr(entry, attr)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def export_csv(entries: Iterable[Entry]) -> str:
    """
    Serialize entries to comma-separated text.

    Quotes inside text fields are doubled; fields containing commas,
    quotes or newlines are wrapped in quotes.
    """
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([header for header, _ in COLUMNS])
    for entry in entries:
        writer.writerow([_cell(entry, attr) for _, attr in COLUMNS])
    return buffer.getvalue()


def read_csv(text: str) -> list[dict]:
    """Parse exported text back into rows keyed by entry attribute."""
    reader = csv.DictReader(StringIO(text))
    attrs = dict(COLUMNS)
    rows = []
    for row in reader:
        record = {attrs[header]: value for header, value in row.items()}
        record["id"] = int(record["id"])
        record["is_anchor"] = record["is_anchor"] == "true"
        rows.append(record)
    return rows
