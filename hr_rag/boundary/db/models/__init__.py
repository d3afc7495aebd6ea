"""
Database models package.

Exports:
  - OrganizationModel: Tenant that owns policy documents
  - PolicyDocumentModel, PublicationStatus, ProcessingStatus: Document ORM model and status enums
  - DocumentChunkModel, EMBEDDING_DIMENSION: Chunk ORM model and vector size

Dependencies: sqlalchemy, pgvector, hr_rag.boundary.db.base
System role: Database model definitions for domain entities
"""

from hr_rag.boundary.db.models.organization_model import OrganizationModel
from hr_rag.boundary.db.models.policy_document_model import (
    PolicyDocumentModel,
    ProcessingStatus,
    PublicationStatus,
)
from hr_rag.boundary.db.models.document_chunk_model import (
    EMBEDDING_DIMENSION,
    DocumentChunkModel,
)

__all__ = [
    "OrganizationModel",
    "PolicyDocumentModel",
    "PublicationStatus",
    "ProcessingStatus",
    "DocumentChunkModel",
    "EMBEDDING_DIMENSION",
]
