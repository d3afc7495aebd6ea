"""
Chunk models for the document processing pipeline.

Dependencies: pydantic
System role: Data structures passed between chunking, embedding, and persistence
"""

from pydantic import BaseModel, Field


class ChunkDraft(BaseModel):
    """Trimmed chunk text with its position in the document."""

    chunk_index: int = Field(ge=0, description="Zero-based position within the document")
    content: str = Field(min_length=1, description="Chunk text content")


class EmbeddedChunk(ChunkDraft):
    """Chunk ready for persistence."""

    embedding: list[float] = Field(description="Embedding vector")
