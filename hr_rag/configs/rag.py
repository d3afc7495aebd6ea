"""
Retrieval configuration settings.

Similarity thresholds and result caps differ per call site, so each one
is exposed as its own tunable instead of a single global default.

Dependencies: pydantic, pydantic_settings
System role: Retrieval and chat configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RAGSettings(BaseSettings):
    """Retrieval and answer generation configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Search endpoint
    search_match_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Default similarity threshold for the search endpoint",
    )
    search_match_count: int = Field(
        default=5,
        ge=1,
        description="Default result cap for the search endpoint",
    )

    # Chat flow
    chat_match_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Similarity threshold used when grounding chat answers",
    )
    chat_match_count: int = Field(
        default=10,
        ge=1,
        description="Number of chunks used to ground chat answers",
    )

    # Health check
    health_check_query: str = Field(
        default="company policy",
        description="Sample query used by the retrieval health check",
    )
    health_check_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    health_check_count: int = Field(default=10, ge=1)

    # Chat model
    chat_model_id: str = Field(
        default="gemini-2.5-flash",
        description="Google Gemini chat model used for answers",
    )
    chat_temperature: float = Field(default=0.3, description="Chat model temperature")
    chat_max_output_tokens: int = Field(default=1000, description="Answer token cap")
