"""
Exception hierarchy for the HR assistant backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class HRAssistantException(Exception):
    """Base exception for all HR assistant application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(HRAssistantException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class OrganizationNotFoundError(HRAssistantException):
    """Raised when an organization cannot be found."""

    def __init__(self, organization_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["organization_id"] = organization_id
        super().__init__(f"Organization not found: {organization_id}", details)


class DocumentNotFoundError(HRAssistantException):
    """Raised when a policy document cannot be found."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class DocumentProcessingError(HRAssistantException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_id: ID of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class ParsingError(DocumentProcessingError):
    """Raised when text extraction from a document fails."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            document_id: ID of the document
            file_type: MIME type of the file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, document_id, details)


class ChunkingError(DocumentProcessingError):
    """Raised when chunking parameters are invalid."""

    pass


class RemoteEmbeddingError(DocumentProcessingError):
    """Raised when the remote embedding call fails or returns malformed data."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding error.

        Args:
            message: Error message
            operation: Embedding operation (document, query)
            model: Embedding model identifier
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        if model:
            details["model"] = model
        super().__init__(message, details=details)


class PersistenceError(DocumentProcessingError):
    """Raised when a datastore write or delete fails during processing."""

    pass


class UnsupportedFileTypeError(DocumentProcessingError):
    """Raised when a document's file type is outside the processing allow-list."""

    def __init__(
        self,
        file_type: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["file_type"] = file_type
        super().__init__(f"Unsupported file type: {file_type}", document_id, details)


class ProcessingConflictError(DocumentProcessingError):
    """Raised when a document cannot enter processing from its current state."""

    def __init__(
        self,
        document_id: str,
        current_status: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if current_status:
            details["current_status"] = current_status
        super().__init__(
            f"Document {document_id} cannot be processed from status {current_status!r}",
            document_id,
            details,
        )


class VectorStoreError(HRAssistantException):
    """Raised when similarity search operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (search, insert, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class RetrievalError(HRAssistantException):
    """Raised when query embedding or similarity search fails at retrieval time."""

    def __init__(
        self,
        message: str,
        organization_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            organization_id: Organization scope of the failed retrieval
            details: Additional context
        """
        details = details or {}
        if organization_id:
            details["organization_id"] = organization_id
        super().__init__(message, details)


class StorageError(HRAssistantException):
    """Raised when object storage operations fail."""

    pass
