"""
Document chunk ORM model.

Stores one contiguous text segment of a policy document with its
embedding vector (pgvector) for similarity search.

Dependencies: sqlalchemy, pgvector, hr_rag.boundary.db.base, hr_rag.configs
System role: Chunk persistence for RAG retrieval
"""

import uuid
from datetime import datetime

from pgvector.sqlalchemy import Vector
from sqlalchemy import DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from hr_rag.boundary.db.base import Base, UUIDMixin, utcnow
from hr_rag.configs import get_settings

EMBEDDING_DIMENSION = get_settings().database.embedding_dimension


class DocumentChunkModel(Base, UUIDMixin):
    """
    Document chunk ORM model.

    Chunks are owned by their parent document: they are created only by a
    processing run and deleted en masse on reprocess or document deletion.
    (document_id, chunk_index) is unique and indices run 0..N-1.

    Attributes:
        id: UUID primary key (auto-generated)
        document_id: Parent PolicyDocumentModel (ON DELETE CASCADE)
        content: Trimmed chunk text
        chunk_index: Zero-based position within the document
        embedding: Dense vector, nullable until computed
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "document_chunks"
    __table_args__ = (
        UniqueConstraint("document_id", "chunk_index", name="uq_document_chunks_document_index"),
    )

    document_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("policy_documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    embedding: Mapped[list[float] | None] = mapped_column(
        Vector(EMBEDDING_DIMENSION),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    document = relationship("PolicyDocumentModel", back_populates="chunks")
