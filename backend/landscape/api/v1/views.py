"""
View API endpoints.

Color mode, view mode and selection never change which entries are
visible; they only pick how the renderer presents them.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from landscape.services.explorer_service import (
    ExplorerSession,
    ExplorerSnapshot,
    get_explorer_session,
)
from landscape.services.view_service import ExplorerStats, RadialSector, TimelineGroup

router = APIRouter()


class ViewUpdate(BaseModel):
    color_mode: Optional[str] = None
    view_mode: Optional[str] = None
    selected_id: Optional[int] = None  # explicit null clears the selection


@router.put("", response_model=ExplorerSnapshot)
def update_view(
    update: ViewUpdate,
    session: ExplorerSession = Depends(get_explorer_session),
):
    """Change color mode, view mode and/or selection."""
    changes = {"color_mode": update.color_mode, "view_mode": update.view_mode}
    if "selected_id" in update.model_fields_set:
        changes["selected_id"] = update.selected_id
    try:
        return session.update_view(**changes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/timeline", response_model=list[TimelineGroup])
def get_timeline(session: ExplorerSession = Depends(get_explorer_session)):
    """Visible entries grouped by category and ordered in time."""
    return session.timeline()


@router.get("/radial", response_model=list[RadialSector])
def get_radial(session: ExplorerSession = Depends(get_explorer_session)):
    """Visible entries arranged in one sector per category."""
    return session.radial()


@router.get("/stats", response_model=ExplorerStats)
def get_stats(session: ExplorerSession = Depends(get_explorer_session)):
    return session.stats()
