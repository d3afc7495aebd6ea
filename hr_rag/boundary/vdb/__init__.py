"""
Vector search boundary layer.

Provides the pgvector similarity search client and its result schema.

Dependencies: sqlalchemy, pgvector
System role: Vector store adapter for RAG retrieval
"""

from hr_rag.boundary.vdb.chunk_search import PgVectorChunkSearch, build_search_statement
from hr_rag.boundary.vdb.vector_schemas import RetrievedChunk

__all__ = [
    "PgVectorChunkSearch",
    "build_search_statement",
    "RetrievedChunk",
]
