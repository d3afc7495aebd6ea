"""
Policy retriever.

Embeds a question, runs a scoped similarity search, ranks the matches,
and formats them as a context block for the chat model.

Dependencies: hr_rag.core.document_processing.tasks, hr_rag.boundary.vdb
System role: RAG retrieval stage
"""

import logging
from typing import Protocol
from uuid import UUID

from hr_rag.boundary.vdb.vector_schemas import RetrievedChunk
from hr_rag.core.document_processing.tasks.embedding_task import EmbeddingTask
from hr_rag.core.exceptions import RemoteEmbeddingError, RetrievalError, ValidationError, VectorStoreError

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n---\n\n"


class ChunkSearch(Protocol):
    """Similarity search primitive (PgVectorChunkSearch in production)."""

    async def search(
        self,
        query_embedding: list[float],
        match_threshold: float,
        match_count: int,
        organization_id: UUID | None = None,
    ) -> list[RetrievedChunk]: ...


def build_context(chunks: list[RetrievedChunk]) -> str:
    """
    Format retrieved chunks as numbered context blocks.

    Args:
        chunks: Ranked chunks

    Returns:
        str: Blocks like "[Document 1] (87.3% match)" + content, separated by
        horizontal rules. Empty string when there are no chunks.
    """
    blocks = []
    for position, chunk in enumerate(chunks, start=1):
        header = f"[Document {position}]"
        if chunk.similarity is not None:
            header += f" ({chunk.similarity * 100:.1f}% match)"
        blocks.append(f"{header}\n{chunk.content}")
    return CONTEXT_SEPARATOR.join(blocks)


class Retriever:
    """Question-to-chunks retrieval over published policy documents."""

    def __init__(self, embedding_task: EmbeddingTask, search_client: ChunkSearch) -> None:
        """
        Initialize retriever.

        Args:
            embedding_task: Query embedder
            search_client: Similarity search primitive
        """
        self._embedding_task = embedding_task
        self._search_client = search_client

    async def retrieve(
        self,
        query: str,
        match_threshold: float,
        match_count: int,
        organization_id: UUID | None = None,
    ) -> list[RetrievedChunk]:
        """
        Retrieve the chunks most similar to a question.

        Args:
            query: Natural-language question
            match_threshold: Minimum similarity (exclusive), in [0, 1]
            match_count: Maximum number of chunks, at least 1
            organization_id: Restrict to one organization's documents

        Returns:
            list[RetrievedChunk]: Chunks by descending similarity (may be empty)

        Raises:
            ValidationError: Empty query or out-of-range tunables
            RetrievalError: Query embedding or search failed
        """
        if not query or not query.strip():
            raise ValidationError("Query cannot be empty", field="query")
        if not 0.0 <= match_threshold <= 1.0:
            raise ValidationError("match_threshold must be between 0 and 1", field="match_threshold")
        if match_count < 1:
            raise ValidationError("match_count must be at least 1", field="match_count")

        org = str(organization_id) if organization_id else None

        try:
            query_embedding = await self._embedding_task.embed_query(query)
            chunks = await self._search_client.search(
                query_embedding=query_embedding,
                match_threshold=match_threshold,
                match_count=match_count,
                organization_id=organization_id,
            )
        except Exception as e:
            message = e.message if isinstance(e, (RemoteEmbeddingError, VectorStoreError)) else str(e)
            logger.error(
                f"{__name__}:retrieve - Retrieval failed",
                extra={"organization_id": org, "error": str(e), "error_type": type(e).__name__},
            )
            raise RetrievalError(
                f"Failed to retrieve policy context: {message}",
                organization_id=org,
                details={"cause": type(e).__name__},
            ) from e

        ranked = sorted(
            chunks,
            key=lambda chunk: chunk.similarity if chunk.similarity is not None else 0.0,
            reverse=True,
        )

        if not ranked:
            logger.warning(
                f"{__name__}:retrieve - No chunks matched",
                extra={"organization_id": org, "match_threshold": match_threshold},
            )
        else:
            logger.info(
                f"{__name__}:retrieve - Retrieved {len(ranked)} chunks",
                extra={
                    "organization_id": org,
                    "similarities": [round(c.similarity or 0.0, 4) for c in ranked],
                },
            )
        return ranked
