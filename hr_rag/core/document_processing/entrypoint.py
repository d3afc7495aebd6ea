"""
Document processing orchestrator.

Coordinates text extraction, chunking, embedding, and chunk persistence
for one policy document, and owns the document's processing state.

Dependencies: sqlalchemy, all task modules, hr_rag.boundary.db
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from typing import Iterable, Protocol
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hr_rag.boundary.db.CRUD.chunk_crud import chunk_crud
from hr_rag.boundary.db.CRUD.document_crud import document_crud
from hr_rag.boundary.db.models import PolicyDocumentModel, ProcessingStatus
from hr_rag.core.document_processing.database.document_status_updater import (
    DocumentStatusUpdater,
)
from hr_rag.core.document_processing.models import (
    EmbeddedChunk,
    ExtractedText,
    ProcessingResult,
)
from hr_rag.core.document_processing.tasks import (
    SUPPORTED_FILE_TYPES,
    ChunkingTask,
    EmbeddingTask,
)
from hr_rag.core.exceptions import (
    DocumentNotFoundError,
    HRAssistantException,
    PersistenceError,
    ProcessingConflictError,
    UnsupportedFileTypeError,
)
from hr_rag.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

REPROCESSABLE_STATUSES = (ProcessingStatus.COMPLETED, ProcessingStatus.FAILED)


class TextExtractor(Protocol):
    """Anything that turns a stored document into plain text."""

    async def extract(self, file_path: str, file_type: str) -> ExtractedText: ...


def _error_message(error: Exception) -> str:
    if isinstance(error, HRAssistantException):
        return error.message
    return str(error) or type(error).__name__


class DocumentProcessor:
    """Orchestrate document ingestion: extract -> chunk -> embed -> persist."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        extractor: TextExtractor,
        chunking_task: ChunkingTask,
        embedding_task: EmbeddingTask,
    ) -> None:
        """
        Initialize processor with its collaborators.

        Args:
            session_factory: Opens sessions independent of any request scope
            extractor: Text extraction stage (ParsingTask in production)
            chunking_task: Text chunker
            embedding_task: Embedding generator
        """
        self._session_factory = session_factory
        self._extractor = extractor
        self._chunking_task = chunking_task
        self._embedding_task = embedding_task

    async def claim(
        self,
        document_id: UUID,
        from_statuses: Iterable[ProcessingStatus],
    ) -> PolicyDocumentModel:
        """
        Move a document into PROCESSING if its current status allows it.

        Args:
            document_id: Document UUID
            from_statuses: Statuses the claim may start from

        Returns:
            PolicyDocumentModel: The claimed document

        Raises:
            DocumentNotFoundError: Document does not exist
            UnsupportedFileTypeError: File type outside the allow-list (no transition made)
            ProcessingConflictError: Document is not in one of from_statuses
        """
        async with self._session_factory() as session:
            document = await document_crud.get_by_id(session, document_id)
            if document is None:
                raise DocumentNotFoundError(str(document_id))
            if document.file_type not in SUPPORTED_FILE_TYPES:
                raise UnsupportedFileTypeError(document.file_type, str(document_id))

            await DocumentStatusUpdater(session).claim(document_id, from_statuses)
            await session.refresh(document)
            return document

    async def run(self, document_id: UUID) -> ProcessingResult:
        """
        Run the pipeline for a document already claimed into PROCESSING.

        Existing chunks are deleted before new ones are inserted one by one in
        index order. Any failure marks the document FAILED; chunks inserted
        before the failure are left in place until the next run.

        Args:
            document_id: Document UUID

        Returns:
            ProcessingResult: Outcome of the run (never raises)
        """
        start_time = time.perf_counter()
        text_length = 0
        chunk_count = 0

        async with self._session_factory() as session:
            updater = DocumentStatusUpdater(session)
            try:
                document = await document_crud.get_by_id(session, document_id)
                if document is None:
                    raise DocumentNotFoundError(str(document_id))

                extracted = await self._extractor.extract(document.file_path, document.file_type)
                text_length = len(extracted.text)

                deleted = await self._clear_chunks(session, document_id)
                if deleted:
                    logger.info(
                        f"{__name__}:run - Removed previous chunks",
                        extra={"document_id": str(document_id), "deleted": deleted},
                    )

                drafts = self._chunking_task.chunk(extracted.text)
                for draft in drafts:
                    embedding = await self._embedding_task.embed_document(draft.content)
                    await self._store_chunk(
                        session,
                        document_id,
                        EmbeddedChunk(**draft.model_dump(), embedding=embedding),
                    )
                    chunk_count += 1

                await updater.mark_completed(document_id, text_length)

            except Exception as e:
                await session.rollback()
                error_message = _error_message(e)
                log_exception_with_context(
                    logger,
                    f"{__name__}:run - Processing failed",
                    e,
                    document_id=str(document_id),
                    chunks_inserted=chunk_count,
                )
                try:
                    await updater.mark_failed(document_id, error_message)
                except Exception as mark_error:
                    log_exception_with_context(
                        logger,
                        f"{__name__}:run - Could not record failure",
                        mark_error,
                        document_id=str(document_id),
                    )
                return ProcessingResult(
                    document_id=document_id,
                    status=ProcessingStatus.FAILED,
                    chunk_count=chunk_count,
                    extracted_text_length=text_length,
                    processing_time_ms=(time.perf_counter() - start_time) * 1000,
                    error_message=error_message,
                )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:run - Document processed",
            extra={
                "document_id": str(document_id),
                "chunk_count": chunk_count,
                "text_length": text_length,
                "processing_time_ms": round(elapsed_ms, 2),
            },
        )
        return ProcessingResult(
            document_id=document_id,
            status=ProcessingStatus.COMPLETED,
            chunk_count=chunk_count,
            extracted_text_length=text_length,
            processing_time_ms=elapsed_ms,
        )

    async def _clear_chunks(self, session: AsyncSession, document_id: UUID) -> int:
        try:
            deleted = await chunk_crud.delete_by_document_id(session, document_id)
            await session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to delete previous chunks: {e}", str(document_id)
            ) from e
        return deleted

    async def _store_chunk(
        self,
        session: AsyncSession,
        document_id: UUID,
        chunk: EmbeddedChunk,
    ) -> None:
        try:
            await chunk_crud.create(
                session,
                document_id=document_id,
                content=chunk.content,
                chunk_index=chunk.chunk_index,
                embedding=chunk.embedding,
            )
            await session.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to store chunk {chunk.chunk_index}: {e}",
                str(document_id),
                details={"chunk_index": chunk.chunk_index},
            ) from e

    async def process(self, document_id: UUID) -> ProcessingResult:
        """
        Process a newly registered (PENDING) document.

        Runs as a background task, so a document that cannot be claimed is
        reported as skipped instead of raising.

        Args:
            document_id: Document UUID

        Returns:
            ProcessingResult: Outcome of the run, or a skipped result
        """
        try:
            await self.claim(document_id, (ProcessingStatus.PENDING,))
        except (DocumentNotFoundError, ProcessingConflictError, UnsupportedFileTypeError) as e:
            logger.warning(
                f"{__name__}:process - Document not claimed",
                extra={"document_id": str(document_id), "reason": str(e)},
            )
            return ProcessingResult(document_id=document_id, skipped=True, error_message=e.message)
        except (SQLAlchemyError, OSError) as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process - Claim failed",
                e,
                document_id=str(document_id),
            )
            return ProcessingResult(
                document_id=document_id,
                skipped=True,
                error_message=f"Failed to claim document: {e}",
            )

        return await self.run(document_id)

    async def reprocess(self, document_id: UUID) -> ProcessingResult:
        """
        Rebuild all chunks of a COMPLETED or FAILED document.

        Args:
            document_id: Document UUID

        Returns:
            ProcessingResult: Outcome of the run

        Raises:
            DocumentNotFoundError: Document does not exist
            UnsupportedFileTypeError: File type outside the allow-list
            ProcessingConflictError: Document is PENDING or already PROCESSING
        """
        await self.claim(document_id, REPROCESSABLE_STATUSES)
        return await self.run(document_id)
