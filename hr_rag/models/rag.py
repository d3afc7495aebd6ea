"""
Retrieval domain models and schemas.

Request/response schemas for search, diagnostics, and health checks.

Dependencies: pydantic, hr_rag.boundary.vdb
System role: Retrieval API contracts
"""

from pydantic import BaseModel, Field

from hr_rag.boundary.vdb.vector_schemas import RetrievedChunk


class SearchRequest(BaseModel):
    """Similarity search request. Unset tunables fall back to settings."""

    query: str = Field(min_length=1, description="Natural-language query")
    match_threshold: float | None = Field(default=None, ge=0.0, le=1.0)
    match_count: int | None = Field(default=None, ge=1, le=100)


class SearchResponse(BaseModel):
    """Ranked chunks and the context block built from them."""

    chunks: list[RetrievedChunk]
    context: str
    total: int


class RAGDiagnostics(BaseModel):
    """Index coverage statistics."""

    total_chunks: int = 0
    total_documents: int = 0
    published_documents: int = 0
    documents_with_chunks: int = 0
    avg_chunks_per_document: int = 0


class RAGHealthCheck(BaseModel):
    """Outcome of a sample retrieval."""

    success: bool
    chunks_found: int = 0
    chunks: list[RetrievedChunk] = Field(default_factory=list)
    error: str | None = None
