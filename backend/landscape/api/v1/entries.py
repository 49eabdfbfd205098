"""
Entries API endpoints.

Lists the entries visible under the current filter/search state and
accepts new entries from the add-entry form.
"""
from fastapi import APIRouter, Depends, HTTPException

from landscape.schemas.entry import Entry, EntryCreate
from landscape.services.explorer_service import ExplorerSession, get_explorer_session

router = APIRouter()


@router.get("")
def list_entries(session: ExplorerSession = Depends(get_explorer_session)):
    """
    List visible entries with their display colors.

    `total` counts the whole catalogue, `filtered` the visible subset.
    """
    snapshot = session.snapshot()
    return {
        "items": [e.model_dump(by_alias=True) for e in snapshot.entries],
        "colors": snapshot.colors,
        "color_mode": snapshot.color_mode.value,
        "total": snapshot.stats.total,
        "filtered": snapshot.stats.visible,
    }


@router.get("/{entry_id}", response_model=Entry)
def get_entry(
    entry_id: int,
    session: ExplorerSession = Depends(get_explorer_session),
):
    """Get a single entry, visible or not."""
    entry = session.store.get(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Entry not found")
    return entry


@router.post("", status_code=201)
def create_entry(
    candidate: EntryCreate,
    session: ExplorerSession = Depends(get_explorer_session),
):
    """
    Add an entry submitted through the form.

    Source is fixed to the user tag and connections start empty.
    """
    entry, snapshot = session.append(candidate)
    return {
        "entry": entry.model_dump(by_alias=True),
        "stats": snapshot.stats.model_dump(),
        "message": "Entry added",
    }
