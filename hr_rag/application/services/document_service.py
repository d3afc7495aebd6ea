"""
Document service orchestrator.

Coordinates presigned uploads, document registration, editorial updates,
deletion, chunk inspection, and reprocessing for one organization's
policy documents.

Dependencies: hr_rag.boundary.db, hr_rag.boundary.aws, hr_rag.core
System role: Document management orchestration
"""

import logging
from typing import Sequence
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.boundary.aws.s3_client import S3DocumentClient, build_object_key
from hr_rag.boundary.db.CRUD.chunk_crud import chunk_crud
from hr_rag.boundary.db.CRUD.document_crud import document_crud
from hr_rag.boundary.db.CRUD.organization_crud import organization_crud
from hr_rag.boundary.db.models import (
    DocumentChunkModel,
    PolicyDocumentModel,
    ProcessingStatus,
    PublicationStatus,
)
from hr_rag.core.diagnostics import get_document_stats
from hr_rag.core.document_processing.entrypoint import REPROCESSABLE_STATUSES, DocumentProcessor
from hr_rag.core.document_processing.tasks import SUPPORTED_FILE_TYPES
from hr_rag.core.exceptions import (
    DocumentNotFoundError,
    OrganizationNotFoundError,
    UnsupportedFileTypeError,
    ValidationError,
)
from hr_rag.models.document import (
    DocumentStats,
    PresignedUrlResponse,
    RegisterDocumentRequest,
    UpdateDocumentRequest,
)

logger = logging.getLogger(__name__)

# Columns that may be changed but never cleared
NON_NULLABLE_UPDATES = ("title", "tags", "status", "is_enabled")


class DocumentService:
    """
    Document service orchestrator.

    Every operation is scoped to an organization; a document belonging to
    another organization is reported as not found.
    """

    def __init__(
        self,
        db: AsyncSession,
        storage: S3DocumentClient,
        processor: DocumentProcessor,
        presigned_url_expiry: int = 3600,
    ) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document metadata
            storage: Documents bucket client
            processor: Document processing pipeline
            presigned_url_expiry: Lifetime of presigned URLs in seconds
        """
        self.db = db
        self._storage = storage
        self._processor = processor
        self._presigned_url_expiry = presigned_url_expiry

    async def _require_organization(self, organization_id: UUID) -> None:
        if not await organization_crud.exists(self.db, organization_id):
            raise OrganizationNotFoundError(str(organization_id))

    @staticmethod
    def _require_supported(file_type: str) -> None:
        if file_type not in SUPPORTED_FILE_TYPES:
            raise UnsupportedFileTypeError(file_type)

    async def create_presigned_upload(
        self,
        organization_id: UUID,
        filename: str,
        content_type: str,
    ) -> PresignedUrlResponse:
        """
        Generate a presigned URL for uploading a policy document.

        Args:
            organization_id: Owning organization
            filename: Original filename
            content_type: MIME type of the file

        Returns:
            PresignedUrlResponse: URL, object key, and expiry

        Raises:
            OrganizationNotFoundError: Unknown organization
            UnsupportedFileTypeError: MIME type outside the allow-list
            StorageError: URL generation failed
        """
        await self._require_organization(organization_id)
        self._require_supported(content_type)

        s3_key = build_object_key(organization_id, uuid4(), filename)
        presigned_url, expires_at = self._storage.generate_presigned_upload_url(
            s3_key,
            content_type=content_type,
            expires_in=self._presigned_url_expiry,
        )
        return PresignedUrlResponse(
            presigned_url=presigned_url,
            s3_key=s3_key,
            expires_at=expires_at.isoformat(),
            content_type=content_type,
        )

    async def register_upload(
        self,
        organization_id: UUID,
        metadata: RegisterDocumentRequest,
    ) -> PolicyDocumentModel:
        """
        Record an uploaded file as a PENDING policy document.

        Args:
            organization_id: Owning organization
            metadata: Upload and editorial metadata

        Returns:
            PolicyDocumentModel: Created document (processing not yet started)

        Raises:
            OrganizationNotFoundError: Unknown organization
            UnsupportedFileTypeError: MIME type outside the allow-list
            ValidationError: Object key outside the organization or missing from storage
        """
        await self._require_organization(organization_id)
        self._require_supported(metadata.file_type)

        if not metadata.s3_key.startswith(f"{organization_id}/"):
            raise ValidationError("Object key does not belong to this organization", field="s3_key")
        if not self._storage.file_exists(metadata.s3_key):
            raise ValidationError("Uploaded file not found in storage", field="s3_key")

        document = await document_crud.create(
            self.db,
            organization_id=organization_id,
            title=metadata.title,
            description=metadata.description,
            category=metadata.category,
            tags=metadata.tags,
            file_path=metadata.s3_key,
            file_name=metadata.file_name,
            file_type=metadata.file_type,
            file_size=metadata.file_size,
            status=metadata.status,
            processing_status=ProcessingStatus.PENDING,
        )
        await self.db.commit()

        logger.info(
            f"{__name__}:register_upload - Document registered",
            extra={"document_id": str(document.id), "organization_id": str(organization_id)},
        )
        return document

    async def list_documents(
        self,
        organization_id: UUID,
        status: PublicationStatus | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> Sequence[PolicyDocumentModel]:
        """List an organization's documents, newest first, with optional filters."""
        return await document_crud.get_by_organization_id(
            self.db,
            organization_id,
            status=status,
            category=category,
            search=search,
        )

    async def get_document(self, organization_id: UUID, document_id: UUID) -> PolicyDocumentModel:
        """
        Fetch one document of an organization.

        Raises:
            DocumentNotFoundError: Missing or owned by another organization
        """
        document = await document_crud.get_by_id(self.db, document_id)
        if document is None or document.organization_id != organization_id:
            raise DocumentNotFoundError(str(document_id))
        return document

    async def update_document(
        self,
        organization_id: UUID,
        document_id: UUID,
        changes: UpdateDocumentRequest,
    ) -> PolicyDocumentModel:
        """
        Apply editorial changes to a document.

        Publishing or unpublishing takes effect on retrieval immediately;
        chunks are not touched.

        Raises:
            DocumentNotFoundError: Missing or owned by another organization
        """
        document = await self.get_document(organization_id, document_id)

        fields = changes.model_dump(exclude_unset=True)
        for name, value in fields.items():
            if value is None and name in NON_NULLABLE_UPDATES:
                continue
            setattr(document, name, value)

        await self.db.commit()
        await self.db.refresh(document)
        return document

    async def delete_document(self, organization_id: UUID, document_id: UUID) -> None:
        """
        Delete a document's blob, chunks, and row.

        Raises:
            DocumentNotFoundError: Missing or owned by another organization
            StorageError: Blob deletion failed (nothing is deleted from the database)
        """
        document = await self.get_document(organization_id, document_id)

        self._storage.delete_object(document.file_path)

        deleted_chunks = await chunk_crud.delete_by_document_id(self.db, document_id)
        await document_crud.delete_by_id(self.db, document_id)
        await self.db.commit()

        logger.info(
            f"{__name__}:delete_document - Document deleted",
            extra={"document_id": str(document_id), "deleted_chunks": deleted_chunks},
        )

    async def get_document_chunks(
        self,
        organization_id: UUID,
        document_id: UUID,
    ) -> Sequence[DocumentChunkModel]:
        """Return a document's chunks ordered by chunk_index."""
        await self.get_document(organization_id, document_id)
        return await chunk_crud.get_by_document_id(self.db, document_id)

    async def reprocess_document(
        self,
        organization_id: UUID,
        document_id: UUID,
    ) -> PolicyDocumentModel:
        """
        Claim a COMPLETED or FAILED document for a new processing run.

        The caller schedules DocumentProcessor.run() once this returns.

        Raises:
            DocumentNotFoundError: Missing or owned by another organization
            UnsupportedFileTypeError: MIME type outside the allow-list
            ProcessingConflictError: Document is PENDING or already PROCESSING
        """
        await self.get_document(organization_id, document_id)
        return await self._processor.claim(document_id, REPROCESSABLE_STATUSES)

    async def get_stats(self, organization_id: UUID) -> DocumentStats:
        """Document counts by publication and processing status."""
        return await get_document_stats(self.db, organization_id)
