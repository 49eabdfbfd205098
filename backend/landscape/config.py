"""
Application configuration using pydantic-settings.
"""
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Landscape Intelligence Network"
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    backend_cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # Catalogue
    seed_data_path: Path = PROJECT_ROOT / "data" / "seed" / "entries.json"
    user_source_tag: str = "LI"  # source of entries submitted through the form

    # Search with a query skips the indeterminacy/temporal-phase filters
    search_bypasses_phase_filters: bool = True

    # Explorer defaults
    default_color_mode: str = "category"

    class Config:
        env_file = ".env"
        extra = "ignore"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
