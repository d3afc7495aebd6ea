"""
Document processing status updater.

Moves policy documents through the ingestion state machine:
PENDING -> PROCESSING -> COMPLETED (or FAILED with error message).
COMPLETED and FAILED documents may be claimed again for reprocessing.

Entry into PROCESSING is a compare-and-swap on processing_status so that
two workers can never run the pipeline for the same document at once.

Dependencies: sqlalchemy, hr_rag.boundary.db.models, hr_rag.core.exceptions
System role: Processing state persistence for the document pipeline
"""

import logging
from typing import Iterable
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.boundary.db.base import utcnow
from hr_rag.boundary.db.models import PolicyDocumentModel, ProcessingStatus
from hr_rag.core.exceptions import DocumentNotFoundError, ProcessingConflictError

logger = logging.getLogger(__name__)

MAX_ERROR_LENGTH = 2000


class DocumentStatusUpdater:
    """Update document processing status during ingestion."""

    def __init__(self, db_session: AsyncSession) -> None:
        """
        Initialize with database session.

        Args:
            db_session: AsyncSession used for status updates (committed per call)
        """
        self.db = db_session

    async def claim(
        self,
        document_id: UUID,
        from_statuses: Iterable[ProcessingStatus],
    ) -> None:
        """
        Atomically move a document into PROCESSING.

        Args:
            document_id: Document UUID
            from_statuses: Statuses the document may currently be in

        Raises:
            DocumentNotFoundError: Document does not exist
            ProcessingConflictError: Document is in a status outside from_statuses
        """
        allowed = list(from_statuses)
        try:
            stmt = (
                update(PolicyDocumentModel)
                .where(
                    PolicyDocumentModel.id == document_id,
                    PolicyDocumentModel.processing_status.in_(allowed),
                )
                .values(
                    processing_status=ProcessingStatus.PROCESSING,
                    processing_error=None,
                    updated_at=utcnow(),
                )
                .returning(PolicyDocumentModel.id)
                .execution_options(synchronize_session=False)
            )
            result = await self.db.execute(stmt)
            claimed = result.first() is not None

            if not claimed:
                await self.db.rollback()
                current = await self.db.scalar(
                    select(PolicyDocumentModel.processing_status).where(
                        PolicyDocumentModel.id == document_id
                    )
                )
                if current is None:
                    raise DocumentNotFoundError(str(document_id))
                raise ProcessingConflictError(str(document_id), current.value)

            await self.db.commit()

            logger.info(
                f"{__name__}:claim - Document marked as PROCESSING",
                extra={"document_id": str(document_id)},
            )

        except (DocumentNotFoundError, ProcessingConflictError) as e:
            logger.warning(f"{__name__}:claim - {type(e).__name__}: {e}")
            raise
        except Exception as e:
            logger.error(f"{__name__}:claim - {type(e).__name__}: {e}")
            await self.db.rollback()
            raise

    async def mark_completed(self, document_id: UUID, extracted_text_length: int) -> None:
        """
        Mark document as COMPLETED and clear any previous error.

        Args:
            document_id: Document UUID
            extracted_text_length: Characters extracted in this run

        Raises:
            DocumentNotFoundError: Document not found
        """
        await self._set_final_status(
            "mark_completed",
            document_id,
            processing_status=ProcessingStatus.COMPLETED,
            processing_error=None,
            processed_at=utcnow(),
            extracted_text_length=extracted_text_length,
        )

    async def mark_failed(self, document_id: UUID, error_message: str) -> None:
        """
        Mark document as FAILED with error details.

        Args:
            document_id: Document UUID
            error_message: Human-readable error description (truncated to 2000 chars)

        Raises:
            DocumentNotFoundError: Document not found
        """
        await self._set_final_status(
            "mark_failed",
            document_id,
            processing_status=ProcessingStatus.FAILED,
            processing_error=error_message[:MAX_ERROR_LENGTH],
        )

    async def _set_final_status(self, method: str, document_id: UUID, **values) -> None:
        try:
            stmt = (
                update(PolicyDocumentModel)
                .where(PolicyDocumentModel.id == document_id)
                .values(updated_at=utcnow(), **values)
                .returning(PolicyDocumentModel.id)
                .execution_options(synchronize_session=False)
            )
            result = await self.db.execute(stmt)
            if result.first() is None:
                raise DocumentNotFoundError(str(document_id))

            await self.db.commit()

            logger.info(
                f"{__name__}:{method} - Document marked as {values['processing_status'].name}",
                extra={
                    "document_id": str(document_id),
                    "processing_error": values.get("processing_error"),
                },
            )

        except Exception as e:
            logger.error(f"{__name__}:{method} - {type(e).__name__}: {e}")
            await self.db.rollback()
            raise
