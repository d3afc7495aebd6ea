"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - OrganizationModel, PolicyDocumentModel, DocumentChunkModel: Core domain entities
  - PublicationStatus, ProcessingStatus: Enum types for state tracking
  - organization_crud, document_crud, chunk_crud: CRUD operation singletons

Dependencies: sqlalchemy, pgvector, hr_rag.configs
System role: Database adapter for organizations, policy documents, and chunks
"""

from hr_rag.boundary.db.base import Base, TimestampMixin, UUIDMixin
from hr_rag.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from hr_rag.boundary.db.models import (
    EMBEDDING_DIMENSION,
    DocumentChunkModel,
    OrganizationModel,
    PolicyDocumentModel,
    ProcessingStatus,
    PublicationStatus,
)
from hr_rag.boundary.db.CRUD import (
    BaseCRUD,
    ChunkCRUD,
    DocumentCRUD,
    OrganizationCRUD,
    chunk_crud,
    document_crud,
    organization_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "OrganizationModel",
    "PolicyDocumentModel",
    "DocumentChunkModel",
    "PublicationStatus",
    "ProcessingStatus",
    "EMBEDDING_DIMENSION",
    # CRUD classes
    "BaseCRUD",
    "ChunkCRUD",
    "DocumentCRUD",
    "OrganizationCRUD",
    # CRUD singletons
    "organization_crud",
    "document_crud",
    "chunk_crud",
]
