"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from hr_rag.configs.base import BaseSettings
from hr_rag.configs.database import DatabaseSettings
from hr_rag.configs.rag import RAGSettings
from hr_rag.configs.s3_documents import S3DocumentsSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    rag: RAGSettings = RAGSettings()
    s3_documents: S3DocumentsSettings = S3DocumentsSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from hr_rag.configs import get_settings
        settings = get_settings()
    """
    return Settings()
