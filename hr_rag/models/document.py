"""
Document domain models and schemas.

Request/response schemas for policy document operations.

Dependencies: pydantic, hr_rag.boundary.db.models
System role: Document API contracts
"""

from datetime import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field

from hr_rag.boundary.db.models import ProcessingStatus, PublicationStatus


class PresignedUrlRequest(BaseModel):
    """Request schema for generating presigned upload URL."""

    filename: str = Field(min_length=1, description="Original filename from user")
    content_type: str = Field(description="MIME type of the file")


class PresignedUrlResponse(BaseModel):
    """Response schema with presigned URL for direct S3 upload."""

    presigned_url: str = Field(description="URL for uploading file to S3")
    s3_key: str = Field(description="S3 object key (needed to register the upload)")
    expires_at: str = Field(description="ISO timestamp when URL expires")
    content_type: str = Field(description="Content type to use in upload")


class RegisterDocumentRequest(BaseModel):
    """Metadata sent once the raw file is in the documents bucket."""

    s3_key: str = Field(min_length=1, description="S3 object key from presigned URL response")
    file_name: str = Field(min_length=1, description="Original filename")
    file_type: str = Field(description="MIME type of the uploaded file")
    file_size: int | None = Field(default=None, ge=0, description="File size in bytes")
    title: str = Field(min_length=1, max_length=512)
    description: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    status: PublicationStatus = PublicationStatus.DRAFT


class UpdateDocumentRequest(BaseModel):
    """Partial update of editorial fields. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=512)
    description: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    status: PublicationStatus | None = None
    is_enabled: bool | None = None


class DocumentResponse(BaseModel):
    """Response schema for document operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    organization_id: uuid.UUID
    title: str
    description: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    version: int
    file_name: str
    file_type: str
    file_size: int | None = None
    status: PublicationStatus
    is_enabled: bool
    processing_status: ProcessingStatus
    processed_at: datetime | None = None
    processing_error: str | None = None
    extracted_text_length: int = 0
    created_at: datetime
    updated_at: datetime


class DocumentListResponse(BaseModel):
    """Document list response."""

    documents: list[DocumentResponse]
    total: int


class DocumentChunkResponse(BaseModel):
    """Stored chunk of a document, without its embedding."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    document_id: uuid.UUID
    chunk_index: int
    content: str
    created_at: datetime


class DocumentChunksResponse(BaseModel):
    """All chunks of one document in index order."""

    document_id: uuid.UUID
    chunks: list[DocumentChunkResponse]
    total: int


class ReprocessResponse(BaseModel):
    """Acknowledgement that a reprocess run has been scheduled."""

    document_id: uuid.UUID
    processing_status: ProcessingStatus


class DocumentStats(BaseModel):
    """Document counts by publication and processing status."""

    total: int = 0
    published: int = 0
    draft: int = 0
    archived: int = 0
    by_processing_status: dict[ProcessingStatus, int] = Field(default_factory=dict)
