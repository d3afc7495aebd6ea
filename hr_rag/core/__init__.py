"""
Core business logic module.

Contains the document processing pipeline, retrieval, diagnostics, and
the exception hierarchy. All business rules and domain-specific logic reside here.
"""

from hr_rag.core.exceptions import (
    HRAssistantException,
    ValidationError,
    OrganizationNotFoundError,
    DocumentNotFoundError,
    DocumentProcessingError,
    ParsingError,
    ChunkingError,
    RemoteEmbeddingError,
    PersistenceError,
    UnsupportedFileTypeError,
    ProcessingConflictError,
    VectorStoreError,
    RetrievalError,
    StorageError,
)

__all__ = [
    "HRAssistantException",
    "ValidationError",
    "OrganizationNotFoundError",
    "DocumentNotFoundError",
    "DocumentProcessingError",
    "ParsingError",
    "ChunkingError",
    "RemoteEmbeddingError",
    "PersistenceError",
    "UnsupportedFileTypeError",
    "ProcessingConflictError",
    "VectorStoreError",
    "RetrievalError",
    "StorageError",
]
