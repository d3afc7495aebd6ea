"""
RAG diagnostics.

Index coverage statistics and a sample retrieval used to check that the
pipeline is producing searchable chunks.

Dependencies: sqlalchemy, hr_rag.boundary.db.CRUD, hr_rag.core.retriever
System role: Operational visibility for the retrieval index
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.boundary.db.CRUD.chunk_crud import chunk_crud
from hr_rag.boundary.db.CRUD.document_crud import document_crud
from hr_rag.boundary.db.models import PublicationStatus
from hr_rag.core.exceptions import HRAssistantException
from hr_rag.core.retriever import Retriever
from hr_rag.models.document import DocumentStats
from hr_rag.models.rag import RAGDiagnostics, RAGHealthCheck

logger = logging.getLogger(__name__)


async def get_rag_diagnostics(
    session: AsyncSession,
    organization_id: UUID | None = None,
) -> RAGDiagnostics:
    """
    Summarise how much of the document set is indexed.

    Args:
        session: Async database session
        organization_id: Optional organization scope

    Returns:
        RAGDiagnostics: Chunk and document counts; the average is rounded
        half up and is 0 when no document has chunks
    """
    total_chunks, documents_with_chunks = await chunk_crud.count_chunks(session, organization_id)
    by_status = await document_crud.count_by_status(session, organization_id)

    avg_chunks = int(total_chunks / documents_with_chunks + 0.5) if documents_with_chunks else 0

    return RAGDiagnostics(
        total_chunks=total_chunks,
        total_documents=sum(by_status.values()),
        published_documents=by_status.get(PublicationStatus.PUBLISHED, 0),
        documents_with_chunks=documents_with_chunks,
        avg_chunks_per_document=avg_chunks,
    )


async def get_document_stats(
    session: AsyncSession,
    organization_id: UUID | None = None,
) -> DocumentStats:
    """Count documents by publication status and by processing status."""
    by_status = await document_crud.count_by_status(session, organization_id)
    by_processing = await document_crud.count_by_processing_status(session, organization_id)

    return DocumentStats(
        total=sum(by_status.values()),
        published=by_status.get(PublicationStatus.PUBLISHED, 0),
        draft=by_status.get(PublicationStatus.DRAFT, 0),
        archived=by_status.get(PublicationStatus.ARCHIVED, 0),
        by_processing_status=by_processing,
    )


async def run_rag_health_check(
    retriever: Retriever,
    query: str = "company policy",
    match_threshold: float = 0.3,
    match_count: int = 10,
    organization_id: UUID | None = None,
) -> RAGHealthCheck:
    """
    Run a sample retrieval and report the outcome instead of raising.

    Args:
        retriever: Retriever under test
        query: Sample question
        match_threshold: Similarity threshold for the sample
        match_count: Result cap for the sample
        organization_id: Optional organization scope

    Returns:
        RAGHealthCheck: success flag, matches, and the error message on failure
    """
    try:
        chunks = await retriever.retrieve(query, match_threshold, match_count, organization_id)
    except Exception as e:
        message = e.message if isinstance(e, HRAssistantException) else str(e)
        logger.warning(
            f"{__name__}:run_rag_health_check - Sample retrieval failed",
            extra={"organization_id": str(organization_id), "error": message},
        )
        return RAGHealthCheck(success=False, error=message or "Unknown error")

    return RAGHealthCheck(success=True, chunks_found=len(chunks), chunks=chunks)
