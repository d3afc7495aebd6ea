"""
Vector search schemas.

Pydantic models for similarity search results returned by the
pgvector boundary.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from uuid import UUID

from pydantic import BaseModel, Field


class RetrievedChunk(BaseModel):
    """
    Single chunk returned by similarity search.

    Document fields are denormalised from the parent policy document so
    that callers can cite sources without a second query.
    """

    id: UUID = Field(description="Chunk identifier")
    document_id: UUID = Field(description="Parent document identifier")
    content: str = Field(description="Chunk text content")
    chunk_index: int = Field(description="Position of the chunk within its document", ge=0)
    similarity: float | None = Field(
        default=None,
        description="Cosine similarity to the query (0.0-1.0)",
    )
    document_title: str | None = Field(default=None, description="Parent document title")
    document_category: str | None = Field(default=None, description="Parent document category")
    document_description: str | None = Field(
        default=None,
        description="Parent document description",
    )
