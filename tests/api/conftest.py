"""
Fixtures for HTTP API tests.

Provides: TestClient over a fresh app with dependency overrides cleared
after each test, and an in-memory PolicyDocumentModel builder
Dependencies: fastapi.testclient
System role: API test infrastructure
"""

import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from hr_rag.api.main import create_app
from hr_rag.boundary.db.models import PolicyDocumentModel, ProcessingStatus, PublicationStatus


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def build_document():
    """Build an unsaved PolicyDocumentModel with every response field populated."""

    def _build(organization_id: uuid.UUID, **overrides) -> PolicyDocumentModel:
        now = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
        values = {
            "id": uuid.uuid4(),
            "organization_id": organization_id,
            "title": "Leave Policy",
            "description": "Annual and sick leave",
            "category": "leave",
            "tags": ["leave"],
            "version": 1,
            "file_path": f"{organization_id}/upload/leave.pdf",
            "file_name": "leave.pdf",
            "file_type": "application/pdf",
            "file_size": 2048,
            "status": PublicationStatus.PUBLISHED,
            "is_enabled": True,
            "processing_status": ProcessingStatus.PENDING,
            "processed_at": None,
            "processing_error": None,
            "extracted_text_length": 0,
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        return PolicyDocumentModel(**values)

    return _build
