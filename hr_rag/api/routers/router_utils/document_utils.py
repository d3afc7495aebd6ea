"""
Document router utility functions.

Background processing helpers for document endpoints. Each helper runs
after the response is sent and opens its own database sessions through
the processor.

Dependencies: hr_rag.core.document_processing
System role: Document processing utilities
"""

import logging
from uuid import UUID

from hr_rag.core.document_processing.entrypoint import DocumentProcessor

logger = logging.getLogger(__name__)


async def process_document_background(processor: DocumentProcessor, document_id: UUID) -> None:
    """
    Background task for first-time processing of a registered document.

    Args:
        processor: Document processing pipeline
        document_id: Document UUID (expected to be PENDING)
    """
    result = await processor.process(document_id)
    logger.info(
        f"{__name__}:process_document_background - Finished",
        extra={
            "document_id": str(document_id),
            "status": result.status.value if result.status else None,
            "skipped": result.skipped,
            "chunk_count": result.chunk_count,
        },
    )


async def run_claimed_document_background(processor: DocumentProcessor, document_id: UUID) -> None:
    """
    Background task for a document already claimed into PROCESSING (reprocess).

    Args:
        processor: Document processing pipeline
        document_id: Document UUID
    """
    result = await processor.run(document_id)
    logger.info(
        f"{__name__}:run_claimed_document_background - Finished",
        extra={
            "document_id": str(document_id),
            "status": result.status.value if result.status else None,
            "chunk_count": result.chunk_count,
        },
    )
