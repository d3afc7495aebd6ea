"""
Test suite for DocumentService.

Tests presigned uploads, registration checks, organization scoping,
editorial updates, deletion order, and reprocess claiming. Uses the
in-memory database with a mocked storage client.

System role: Verification of document service orchestration layer
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from hr_rag.application.services.document_service import DocumentService
from hr_rag.boundary.aws.s3_client import S3DocumentClient
from hr_rag.boundary.db.CRUD.chunk_crud import chunk_crud
from hr_rag.boundary.db.CRUD.document_crud import document_crud
from hr_rag.boundary.db.models import ProcessingStatus, PublicationStatus
from hr_rag.core.document_processing.entrypoint import DocumentProcessor
from hr_rag.core.document_processing.tasks import ChunkingTask
from hr_rag.core.exceptions import (
    DocumentNotFoundError,
    OrganizationNotFoundError,
    ProcessingConflictError,
    StorageError,
    UnsupportedFileTypeError,
    ValidationError,
)
from hr_rag.models.document import RegisterDocumentRequest, UpdateDocumentRequest


@pytest.fixture
def mock_storage() -> MagicMock:
    """Provide mock documents bucket client."""
    storage = MagicMock(spec=S3DocumentClient)
    storage.file_exists.return_value = True
    storage.generate_presigned_upload_url.return_value = (
        "https://bucket.s3.amazonaws.com/upload?signature=abc",
        datetime(2030, 1, 1, tzinfo=timezone.utc),
    )
    return storage


@pytest.fixture
def document_service(test_async_db, session_factory, mock_storage, fake_extractor, embedding_task) -> DocumentService:
    processor = DocumentProcessor(
        session_factory=session_factory,
        extractor=fake_extractor,
        chunking_task=ChunkingTask(),
        embedding_task=embedding_task,
    )
    return DocumentService(db=test_async_db, storage=mock_storage, processor=processor)


def register_request(organization_id: uuid.UUID, **overrides) -> RegisterDocumentRequest:
    values = {
        "s3_key": f"{organization_id}/{uuid.uuid4()}/handbook.pdf",
        "file_name": "handbook.pdf",
        "file_type": "application/pdf",
        "file_size": 1024,
        "title": "Employee Handbook",
        "category": "general",
        "tags": ["onboarding"],
        "status": PublicationStatus.PUBLISHED,
    }
    values.update(overrides)
    return RegisterDocumentRequest(**values)


class TestCreatePresignedUpload:
    """Test suite for create_presigned_upload()."""

    @pytest.mark.asyncio
    async def test_key_should_be_scoped_to_organization(self, document_service, organization, mock_storage) -> None:
        response = await document_service.create_presigned_upload(
            organization.id, "handbook.pdf", "application/pdf"
        )

        assert response.s3_key.startswith(f"{organization.id}/")
        assert response.s3_key.endswith("/handbook.pdf")
        assert response.presigned_url.startswith("https://bucket.s3.amazonaws.com")
        assert response.expires_at == "2030-01-01T00:00:00+00:00"
        mock_storage.generate_presigned_upload_url.assert_called_once_with(
            response.s3_key, content_type="application/pdf", expires_in=3600
        )

    @pytest.mark.asyncio
    async def test_legacy_word_upload_should_be_accepted(self, document_service, organization, mock_storage) -> None:
        response = await document_service.create_presigned_upload(
            organization.id, "benefits.doc", "application/msword"
        )

        assert response.s3_key.endswith("/benefits.doc")
        mock_storage.generate_presigned_upload_url.assert_called_once()

    @pytest.mark.asyncio
    async def test_unknown_organization_should_raise(self, document_service) -> None:
        with pytest.raises(OrganizationNotFoundError):
            await document_service.create_presigned_upload(uuid.uuid4(), "a.pdf", "application/pdf")

    @pytest.mark.asyncio
    async def test_unsupported_type_should_raise(self, document_service, organization) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            await document_service.create_presigned_upload(organization.id, "a.png", "image/png")


class TestRegisterUpload:
    """Test suite for register_upload()."""

    @pytest.mark.asyncio
    async def test_register_should_create_pending_document(self, document_service, organization, mock_storage) -> None:
        request = register_request(organization.id)

        document = await document_service.register_upload(organization.id, request)

        assert document.processing_status == ProcessingStatus.PENDING
        assert document.status == PublicationStatus.PUBLISHED
        assert document.file_path == request.s3_key
        assert document.tags == ["onboarding"]
        mock_storage.file_exists.assert_called_once_with(request.s3_key)

    @pytest.mark.asyncio
    async def test_key_from_other_organization_should_be_rejected(self, document_service, organization) -> None:
        request = register_request(organization.id, s3_key=f"{uuid.uuid4()}/x/handbook.pdf")

        with pytest.raises(ValidationError) as exc_info:
            await document_service.register_upload(organization.id, request)

        assert exc_info.value.details["field"] == "s3_key"

    @pytest.mark.asyncio
    async def test_missing_object_should_be_rejected(self, document_service, organization, mock_storage) -> None:
        mock_storage.file_exists.return_value = False

        with pytest.raises(ValidationError):
            await document_service.register_upload(organization.id, register_request(organization.id))

    @pytest.mark.asyncio
    async def test_unsupported_type_should_be_rejected(self, document_service, organization, mock_storage) -> None:
        request = register_request(organization.id, file_type="image/png")

        with pytest.raises(UnsupportedFileTypeError):
            await document_service.register_upload(organization.id, request)

        mock_storage.file_exists.assert_not_called()


class TestDocumentScoping:
    """Test suite for organization-scoped reads."""

    @pytest.mark.asyncio
    async def test_document_of_other_organization_should_be_not_found(
        self, document_service, organization, make_document
    ) -> None:
        document = await make_document(organization.id)

        with pytest.raises(DocumentNotFoundError):
            await document_service.get_document(uuid.uuid4(), document.id)

    @pytest.mark.asyncio
    async def test_list_documents_should_apply_status_filter(
        self, document_service, organization, make_document
    ) -> None:
        await make_document(organization.id, title="Published")
        await make_document(organization.id, title="Draft", status=PublicationStatus.DRAFT)

        documents = await document_service.list_documents(organization.id, status=PublicationStatus.DRAFT)

        assert [d.title for d in documents] == ["Draft"]


class TestUpdateDocument:
    """Test suite for update_document()."""

    @pytest.mark.asyncio
    async def test_update_should_change_only_given_fields(
        self, document_service, organization, make_document
    ) -> None:
        document = await make_document(organization.id)

        updated = await document_service.update_document(
            organization.id,
            document.id,
            UpdateDocumentRequest(status=PublicationStatus.ARCHIVED, is_enabled=False),
        )

        assert updated.status == PublicationStatus.ARCHIVED
        assert updated.is_enabled is False
        assert updated.title == "Leave Policy"
        assert updated.category == "leave"

    @pytest.mark.asyncio
    async def test_explicit_null_should_clear_optional_but_not_required_fields(
        self, document_service, organization, make_document
    ) -> None:
        document = await make_document(organization.id)

        updated = await document_service.update_document(
            organization.id,
            document.id,
            UpdateDocumentRequest(title=None, description=None),
        )

        assert updated.title == "Leave Policy"
        assert updated.description is None


class TestDeleteDocument:
    """Test suite for delete_document()."""

    @pytest.mark.asyncio
    async def test_delete_should_remove_blob_chunks_and_row(
        self, document_service, test_async_db, organization, make_document, mock_storage
    ) -> None:
        document = await make_document(organization.id)
        await chunk_crud.create(test_async_db, document_id=document.id, content="text", chunk_index=0)
        await test_async_db.commit()

        await document_service.delete_document(organization.id, document.id)

        mock_storage.delete_object.assert_called_once_with(document.file_path)
        assert not await document_crud.exists(test_async_db, document.id)
        assert await chunk_crud.get_by_document_id(test_async_db, document.id) == []

    @pytest.mark.asyncio
    async def test_storage_failure_should_keep_database_rows(
        self, document_service, test_async_db, organization, make_document, mock_storage
    ) -> None:
        document = await make_document(organization.id)
        mock_storage.delete_object.side_effect = StorageError("Access denied")

        with pytest.raises(StorageError):
            await document_service.delete_document(organization.id, document.id)

        assert await document_crud.exists(test_async_db, document.id)


class TestReprocessDocument:
    """Test suite for reprocess_document()."""

    @pytest.mark.asyncio
    async def test_completed_document_should_be_claimed(
        self, document_service, organization, make_document
    ) -> None:
        document = await make_document(organization.id, processing_status=ProcessingStatus.COMPLETED)

        claimed = await document_service.reprocess_document(organization.id, document.id)

        assert claimed.id == document.id
        assert claimed.processing_status == ProcessingStatus.PROCESSING

    @pytest.mark.asyncio
    async def test_pending_document_should_conflict(self, document_service, organization, make_document) -> None:
        document = await make_document(organization.id)

        with pytest.raises(ProcessingConflictError):
            await document_service.reprocess_document(organization.id, document.id)


class TestGetStats:
    """Test suite for get_stats()."""

    @pytest.mark.asyncio
    async def test_stats_should_count_organization_documents(
        self, document_service, organization, make_document
    ) -> None:
        await make_document(organization.id)
        await make_document(organization.id, status=PublicationStatus.DRAFT)

        stats = await document_service.get_stats(organization.id)

        assert stats.total == 2
        assert stats.published == 1
        assert stats.draft == 1
        assert stats.by_processing_status == {ProcessingStatus.PENDING: 2}
