"""
Filter API endpoints.

Each toggle mutates one accepted-key set and returns the recomputed views.
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from landscape.services.explorer_service import (
    ExplorerSession,
    ExplorerSnapshot,
    get_explorer_session,
)

router = APIRouter()


class AcceptanceUpdate(BaseModel):
    accepted: bool


class VisibilityUpdate(BaseModel):
    visible: bool


@router.get("")
def get_filters(session: ExplorerSession = Depends(get_explorer_session)):
    """Current accepted keys per dimension, query and visible relation types."""
    return {
        "accepted": session.filters.to_dict(),
        "query": session.query,
        "relation_types": sorted(t.value for t in session.visible_types),
        "search_bypasses_phase_filters": session.filters.search_bypasses_phase_filters,
    }


@router.post("/reset", response_model=ExplorerSnapshot)
def reset_filters(session: ExplorerSession = Depends(get_explorer_session)):
    """Accept every key in every dimension again."""
    return session.reset()


@router.put("/relation-types/{relation_type}", response_model=ExplorerSnapshot)
def set_relation_visibility(
    relation_type: str,
    update: VisibilityUpdate,
    session: ExplorerSession = Depends(get_explorer_session),
):
    """Show or hide one relation type."""
    try:
        return session.set_relation_visibility(relation_type, update.visible)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{dimension}/{key}", response_model=ExplorerSnapshot)
def set_acceptance(
    dimension: str,
    key: str,
    update: AcceptanceUpdate,
    session: ExplorerSession = Depends(get_explorer_session),
):
    """Accept or reject one key in one dimension."""
    try:
        return session.set_acceptance(dimension, key, update.accepted)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
