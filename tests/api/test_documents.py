import uuid
from unittest.mock import AsyncMock

import pytest

from hr_rag.api.deps.dependencies import get_document_processor, get_document_service
from hr_rag.boundary.db.models import ProcessingStatus, PublicationStatus
from hr_rag.core.document_processing.models import ProcessingResult
from hr_rag.core.exceptions import (
    DocumentNotFoundError,
    OrganizationNotFoundError,
    ProcessingConflictError,
    StorageError,
    UnsupportedFileTypeError,
)
from hr_rag.models.document import DocumentStats, PresignedUrlResponse


@pytest.fixture
def mock_document_service():
    return AsyncMock()


@pytest.fixture
def mock_processor():
    processor = AsyncMock()
    processor.process.side_effect = lambda document_id: ProcessingResult(
        document_id=document_id, status=ProcessingStatus.COMPLETED, chunk_count=3
    )
    processor.run.side_effect = lambda document_id: ProcessingResult(
        document_id=document_id, status=ProcessingStatus.COMPLETED, chunk_count=3
    )
    return processor


@pytest.fixture
def api(client, mock_document_service, mock_processor):
    client.app.dependency_overrides[get_document_service] = lambda: mock_document_service
    client.app.dependency_overrides[get_document_processor] = lambda: mock_processor
    return client


def documents_url(organization_id, suffix=""):
    return f"/api/v1/organizations/{organization_id}/documents{suffix}"


def test_create_presigned_upload_url(api, mock_document_service):
    organization_id = uuid.uuid4()
    mock_document_service.create_presigned_upload.return_value = PresignedUrlResponse(
        presigned_url="https://bucket.s3.amazonaws.com/upload?signature=abc",
        s3_key=f"{organization_id}/u/handbook.pdf",
        expires_at="2030-01-01T00:00:00+00:00",
        content_type="application/pdf",
    )

    response = api.post(
        documents_url(organization_id, "/presigned-url"),
        json={"filename": "handbook.pdf", "content_type": "application/pdf"},
    )

    assert response.status_code == 200
    assert response.json()["s3_key"].startswith(str(organization_id))
    mock_document_service.create_presigned_upload.assert_awaited_once_with(
        organization_id, filename="handbook.pdf", content_type="application/pdf"
    )


@pytest.mark.parametrize(
    "filename,content_type",
    [
        ("../etc/passwd.pdf", "application/pdf"),
        ("handbook", "application/pdf"),
        ("handbook.docx", "application/pdf"),
    ],
)
def test_presigned_upload_with_invalid_filename_returns_400(api, mock_document_service, filename, content_type):
    response = api.post(
        documents_url(uuid.uuid4(), "/presigned-url"),
        json={"filename": filename, "content_type": content_type},
    )

    assert response.status_code == 400
    mock_document_service.create_presigned_upload.assert_not_called()


def test_presigned_upload_for_unknown_organization_returns_404(api, mock_document_service):
    organization_id = uuid.uuid4()
    mock_document_service.create_presigned_upload.side_effect = OrganizationNotFoundError(str(organization_id))

    response = api.post(
        documents_url(organization_id, "/presigned-url"),
        json={"filename": "handbook.pdf", "content_type": "application/pdf"},
    )

    assert response.status_code == 404


def test_register_document_schedules_processing(api, mock_document_service, mock_processor, build_document):
    organization_id = uuid.uuid4()
    document = build_document(organization_id)
    mock_document_service.register_upload.return_value = document

    response = api.post(
        documents_url(organization_id),
        json={
            "s3_key": document.file_path,
            "file_name": "leave.pdf",
            "file_type": "application/pdf",
            "title": "Leave Policy",
            "status": "published",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == str(document.id)
    assert data["processing_status"] == "pending"
    assert data["status"] == "published"
    mock_processor.process.assert_awaited_once_with(document.id)


def test_register_unsupported_file_type_returns_400(api, mock_document_service, mock_processor):
    mock_document_service.register_upload.side_effect = UnsupportedFileTypeError("image/png")

    response = api.post(
        documents_url(uuid.uuid4()),
        json={"s3_key": "k", "file_name": "a.png", "file_type": "image/png", "title": "Logo"},
    )

    assert response.status_code == 400
    mock_processor.process.assert_not_called()


def test_list_documents_passes_filters(api, mock_document_service, build_document):
    organization_id = uuid.uuid4()
    mock_document_service.list_documents.return_value = [build_document(organization_id)]

    response = api.get(documents_url(organization_id), params={"status": "published", "category": "leave"})

    assert response.status_code == 200
    assert response.json()["total"] == 1
    mock_document_service.list_documents.assert_awaited_once_with(
        organization_id,
        status=PublicationStatus.PUBLISHED,
        category="leave",
        search=None,
    )


def test_document_stats(api, mock_document_service):
    mock_document_service.get_stats.return_value = DocumentStats(
        total=2, published=1, draft=1, by_processing_status={ProcessingStatus.COMPLETED: 2}
    )

    response = api.get(documents_url(uuid.uuid4(), "/stats"))

    assert response.status_code == 200
    assert response.json()["by_processing_status"] == {"completed": 2}


def test_get_missing_document_returns_404(api, mock_document_service):
    document_id = uuid.uuid4()
    mock_document_service.get_document.side_effect = DocumentNotFoundError(str(document_id))

    response = api.get(documents_url(uuid.uuid4(), f"/{document_id}"))

    assert response.status_code == 404


def test_update_document(api, mock_document_service, build_document):
    organization_id = uuid.uuid4()
    document = build_document(organization_id, status=PublicationStatus.ARCHIVED)
    mock_document_service.update_document.return_value = document

    response = api.patch(documents_url(organization_id, f"/{document.id}"), json={"status": "archived"})

    assert response.status_code == 200
    assert response.json()["status"] == "archived"


def test_delete_document(api, mock_document_service):
    organization_id = uuid.uuid4()
    document_id = uuid.uuid4()
    mock_document_service.delete_document.return_value = None

    response = api.delete(documents_url(organization_id, f"/{document_id}"))

    assert response.status_code == 204
    mock_document_service.delete_document.assert_awaited_once_with(organization_id, document_id)


def test_delete_document_storage_failure_returns_500(api, mock_document_service):
    mock_document_service.delete_document.side_effect = StorageError("Access denied")

    response = api.delete(documents_url(uuid.uuid4(), f"/{uuid.uuid4()}"))

    assert response.status_code == 500


def test_reprocess_document_returns_202_and_runs_pipeline(api, mock_document_service, mock_processor, build_document):
    organization_id = uuid.uuid4()
    document = build_document(organization_id, processing_status=ProcessingStatus.PROCESSING)
    mock_document_service.reprocess_document.return_value = document

    response = api.post(documents_url(organization_id, f"/{document.id}/reprocess"))

    assert response.status_code == 202
    assert response.json() == {"document_id": str(document.id), "processing_status": "processing"}
    mock_processor.run.assert_awaited_once_with(document.id)


def test_reprocess_pending_document_returns_409(api, mock_document_service, mock_processor):
    document_id = uuid.uuid4()
    mock_document_service.reprocess_document.side_effect = ProcessingConflictError(str(document_id), "pending")

    response = api.post(documents_url(uuid.uuid4(), f"/{document_id}/reprocess"))

    assert response.status_code == 409
    mock_processor.run.assert_not_called()
