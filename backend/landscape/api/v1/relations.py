"""
Relations API endpoints.

Relations are derived on every request from the currently visible entries.
"""
from fastapi import APIRouter, Depends, Query

from landscape.services.explorer_service import ExplorerSession, get_explorer_session
from landscape.services.relation_service import relation_counts

router = APIRouter()


@router.get("")
def list_relations(
    all_types: bool = Query(False, description="Ignore relation-type visibility toggles"),
    session: ExplorerSession = Depends(get_explorer_session),
):
    """Typed relations among the visible entries."""
    relations = session.relations(all_types=all_types)
    return {
        "items": [r.model_dump(mode="json") for r in relations],
        "total": len(relations),
        "by_type": relation_counts(relations),
    }
