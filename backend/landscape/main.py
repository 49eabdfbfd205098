"""
Landscape Intelligence Network - Main FastAPI Application

Serves the relation/filter engine to the graph, timeline and radial
renderers.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from landscape import __version__
from landscape.config import get_settings
from landscape.logging_config import configure_logging
from landscape.api.v1.router import api_router

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.project_name,
    description="""
    Landscape Intelligence Network

    Curated deep-time records and the relational graph derived from them.

    ## Systems

    - **Entries**: the append-only catalogue
    - **Relations**: citation, thematic, sphere, element and indeterminacy links
    - **Filters & Search**: the live visible subset
    - **Views**: color mode, view mode, timeline and radial shaping
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root():
    """Root endpoint - system status."""
    return {
        "system": settings.project_name,
        "status": "operational",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
