"""
Export API endpoints.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from landscape.services.explorer_service import ExplorerSession, get_explorer_session
from landscape.services.export_service import EXPORT_FILENAME, export_csv

router = APIRouter()


@router.get("/csv")
def export_entries_csv(session: ExplorerSession = Depends(get_explorer_session)):
    """Download every entry (not only the visible ones) as CSV."""
    return Response(
        content=export_csv(session.store.all()),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
