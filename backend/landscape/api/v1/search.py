"""
Search API endpoints.

The query is part of the explorer state: it narrows the visible entries
until it is cleared.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from landscape.services.explorer_service import (
    ExplorerSession,
    ExplorerSnapshot,
    get_explorer_session,
)

router = APIRouter()


class SearchUpdate(BaseModel):
    query: Optional[str] = None


@router.put("", response_model=ExplorerSnapshot)
def set_query(
    update: SearchUpdate,
    session: ExplorerSession = Depends(get_explorer_session),
):
    """Set the search query; an empty or missing query clears it."""
    return session.set_query(update.query)


@router.delete("", response_model=ExplorerSnapshot)
def clear_query(session: ExplorerSession = Depends(get_explorer_session)):
    return session.set_query(None)
