"""
pgvector similarity search over document chunks.

Runs cosine similarity queries against the document_chunks table, joined
to the parent policy document so that only published, enabled documents
of the requested organization are ever returned.

Dependencies: sqlalchemy, pgvector, hr_rag.core.exceptions
System role: Similarity search primitive for the retriever
"""

import logging
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hr_rag.boundary.db.models import (
    DocumentChunkModel,
    PolicyDocumentModel,
    PublicationStatus,
)
from hr_rag.boundary.vdb.vector_schemas import RetrievedChunk
from hr_rag.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


def build_search_statement(
    query_embedding: list[float],
    match_threshold: float,
    match_count: int,
    organization_id: UUID | None = None,
) -> Select:
    """
    Build the similarity query.

    Similarity is 1 - cosine distance and must be strictly above the
    threshold. Rows come back closest first, capped at match_count.

    Args:
        query_embedding: Query vector
        match_threshold: Minimum similarity, exclusive
        match_count: Maximum number of rows
        organization_id: Restrict to one organization's documents (None for all)

    Returns:
        Select: Statement yielding chunk columns, similarity, and document metadata
    """
    distance = DocumentChunkModel.embedding.cosine_distance(query_embedding)

    stmt = (
        select(
            DocumentChunkModel.id,
            DocumentChunkModel.document_id,
            DocumentChunkModel.content,
            DocumentChunkModel.chunk_index,
            (1 - distance).label("similarity"),
            PolicyDocumentModel.title,
            PolicyDocumentModel.category,
            PolicyDocumentModel.description,
        )
        .join(PolicyDocumentModel, DocumentChunkModel.document_id == PolicyDocumentModel.id)
        .where(
            PolicyDocumentModel.status == PublicationStatus.PUBLISHED,
            PolicyDocumentModel.is_enabled.is_(True),
            DocumentChunkModel.embedding.is_not(None),
            1 - distance > match_threshold,
        )
        .order_by(distance)
        .limit(match_count)
    )
    if organization_id is not None:
        stmt = stmt.where(PolicyDocumentModel.organization_id == organization_id)
    return stmt


class PgVectorChunkSearch:
    """Cosine similarity search backed by PostgreSQL + pgvector."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialize search client.

        Args:
            session_factory: Async session factory used to open a session per search
        """
        self._session_factory = session_factory

    async def search(
        self,
        query_embedding: list[float],
        match_threshold: float,
        match_count: int,
        organization_id: UUID | None = None,
    ) -> list[RetrievedChunk]:
        """
        Find chunks similar to the query embedding.

        Args:
            query_embedding: Query vector (same dimension as stored embeddings)
            match_threshold: Minimum similarity, exclusive
            match_count: Maximum number of results
            organization_id: Restrict to one organization's documents (None for all)

        Returns:
            list[RetrievedChunk]: Matches ordered by descending similarity

        Raises:
            VectorStoreError: If the query fails
        """
        stmt = build_search_statement(query_embedding, match_threshold, match_count, organization_id)

        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()
        except SQLAlchemyError as e:
            logger.error(
                f"{__name__}:search - Similarity search failed",
                extra={"organization_id": str(organization_id), "error": str(e)},
            )
            raise VectorStoreError(
                message="Failed to query document chunks",
                operation="search",
                details={"error": str(e), "match_count": match_count},
            ) from e

        return [
            RetrievedChunk(
                id=row.id,
                document_id=row.document_id,
                content=row.content,
                chunk_index=row.chunk_index,
                similarity=float(row.similarity),
                document_title=row.title,
                document_category=row.category,
                document_description=row.description,
            )
            for row in rows
        ]
