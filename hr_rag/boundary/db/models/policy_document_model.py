"""
Policy document ORM model.

Represents uploaded HR policy documents with publication state and
ingestion (processing) state tracked separately.

Dependencies: sqlalchemy, hr_rag.boundary.db.base
System role: Document persistence for ingestion tracking and retrieval gating
"""

import enum
from datetime import datetime

from sqlalchemy import JSON, BigInteger, Boolean, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from hr_rag.boundary.db.base import Base, UUIDMixin, TimestampMixin


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class PublicationStatus(str, enum.Enum):
    """
    Editorial state of a policy document.

    Only PUBLISHED documents (that are also enabled) feed retrieval.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ProcessingStatus(str, enum.Enum):
    """
    Document ingestion lifecycle states.

    PENDING: Document registered, awaiting first processing run
    PROCESSING: Text extraction, chunking, and embedding in progress
    COMPLETED: All chunks persisted with embeddings
    FAILED: Processing error; processing_error contains details
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class PolicyDocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Policy document ORM model.

    Lifecycle: registration (PENDING) -> background processing (PROCESSING)
    -> COMPLETED or FAILED. An operator may reprocess COMPLETED or FAILED
    documents, which restarts the pipeline from scratch.

    Attributes:
        organization_id: Owning organization (cascade delete)
        title, description, category, tags: Editorial metadata
        file_path: Object storage key of the raw file
        file_name, file_type, file_size: Original upload attributes
        status: Publication status (draft/published/archived)
        is_enabled: Whether the document may be used for retrieval
        processing_status: Ingestion state
        processed_at: Completion timestamp of the last successful run
        processing_error: Error details of the last failed run (2048 char limit)
        extracted_text_length: Character count of the last extraction

    Relationships:
        organization: Parent OrganizationModel
        chunks: DocumentChunkModel rows (cascade delete)
    """

    __tablename__ = "policy_documents"

    organization_id: Mapped[UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(512), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    file_path: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="Object storage key of the raw document",
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_type: Mapped[str] = mapped_column(String(255), nullable=False)
    file_size: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    status: Mapped[PublicationStatus] = mapped_column(
        Enum(PublicationStatus, native_enum=False, values_callable=_enum_values),
        nullable=False,
        default=PublicationStatus.DRAFT,
        index=True,
    )
    is_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    processing_status: Mapped[ProcessingStatus] = mapped_column(
        Enum(ProcessingStatus, native_enum=False, values_callable=_enum_values),
        nullable=False,
        default=ProcessingStatus.PENDING,
        index=True,
    )
    processed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    processing_error: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        doc="Error details if processing failed",
    )
    extracted_text_length: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    organization = relationship("OrganizationModel", back_populates="documents")
    chunks = relationship(
        "DocumentChunkModel",
        back_populates="document",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
