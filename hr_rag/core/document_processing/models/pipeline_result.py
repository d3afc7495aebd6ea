"""
Pipeline result model for document processing.

Represents the outcome of one processing attempt for a document.

Dependencies: pydantic, hr_rag.boundary.db.models
System role: Return type for DocumentProcessor.run()/process()/reprocess()
"""

from uuid import UUID

from pydantic import BaseModel, Field

from hr_rag.boundary.db.models import ProcessingStatus


class ProcessingResult(BaseModel):
    """Result of document processing pipeline execution."""

    document_id: UUID = Field(description="Processed document identifier")
    status: ProcessingStatus | None = Field(
        default=None,
        description="Final processing status (None when the run never started)",
    )
    chunk_count: int = Field(default=0, description="Number of chunks persisted")
    extracted_text_length: int = Field(default=0, description="Characters extracted")
    processing_time_ms: float = Field(default=0.0, description="Wall time in milliseconds")
    error_message: str | None = Field(default=None, description="Failure or skip reason")
    skipped: bool = Field(
        default=False,
        description="True when the document could not be claimed for processing",
    )
