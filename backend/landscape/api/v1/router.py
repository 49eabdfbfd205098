"""
API v1 Router - Aggregates all API endpoints.
"""
from fastapi import APIRouter

from landscape.api.v1 import entries, relations, filters, search, views, taxonomy, export

api_router = APIRouter()

# Catalogue
api_router.include_router(entries.router, prefix="/entries", tags=["Entries"])
api_router.include_router(taxonomy.router, prefix="/taxonomy", tags=["Taxonomy"])

# Derived graph
api_router.include_router(relations.router, prefix="/relations", tags=["Relations"])

# Explorer state
api_router.include_router(filters.router, prefix="/filters", tags=["Filters"])
api_router.include_router(search.router, prefix="/search", tags=["Search"])
api_router.include_router(views.router, prefix="/views", tags=["Views"])

# Export
api_router.include_router(export.router, prefix="/export", tags=["Export"])
