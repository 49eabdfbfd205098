"""
Taxonomy API endpoints.

Exposes the static classification tables the filter panel is built from.
"""
from fastapi import APIRouter

from landscape.core import taxonomy

router = APIRouter()


@router.get("")
def get_taxonomy():
    """Categories, sources, indeterminacy positions and fixed enumerations."""
    return taxonomy.to_api_response()
