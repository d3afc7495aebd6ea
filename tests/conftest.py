"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, organization/document factories,
deterministic embeddings, and a fake text extractor
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

import uuid

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

EMBEDDING_SIZE = 1536


@pytest.fixture
async def session_factory():
    """
    Create in-memory SQLite async database and a session factory bound to it.

    Yields:
        async_sessionmaker: Factory whose sessions share one in-memory database
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from hr_rag.boundary.db.base import Base

    # StaticPool keeps every session on the same in-memory connection
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_async_db(session_factory):
    """
    Session on the in-memory test database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def organization(test_async_db):
    """Persisted organization owning the test documents."""
    from hr_rag.boundary.db.CRUD.organization_crud import organization_crud

    org = await organization_crud.create(
        test_async_db,
        name="Acme Corp",
        slug=f"acme-{uuid.uuid4().hex[:8]}",
    )
    await test_async_db.commit()
    return org


@pytest.fixture
def make_document(test_async_db):
    """
    Factory for persisted policy documents.

    Returns:
        Callable: async (organization_id, **overrides) -> PolicyDocumentModel
    """
    from hr_rag.boundary.db.CRUD.document_crud import document_crud
    from hr_rag.boundary.db.models import ProcessingStatus, PublicationStatus

    async def _make(organization_id: uuid.UUID, **overrides):
        values = {
            "organization_id": organization_id,
            "title": "Leave Policy",
            "description": "Annual, sick, and parental leave",
            "category": "leave",
            "tags": ["leave"],
            "file_path": f"{organization_id}/{uuid.uuid4()}/leave.pdf",
            "file_name": "leave.pdf",
            "file_type": "application/pdf",
            "file_size": 2048,
            "status": PublicationStatus.PUBLISHED,
            "processing_status": ProcessingStatus.PENDING,
        }
        values.update(overrides)
        document = await document_crud.create(test_async_db, **values)
        await test_async_db.commit()
        return document

    return _make


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Deterministic embeddings with the production vector size."""
    return DeterministicFakeEmbedding(size=EMBEDDING_SIZE)


@pytest.fixture
def embedding_task(fake_embeddings):
    """EmbeddingTask over deterministic fake embeddings."""
    from hr_rag.core.document_processing.tasks import EmbeddingTask

    return EmbeddingTask(fake_embeddings, dimension=EMBEDDING_SIZE)


class FakeExtractor:
    """Returns fixed text (or raises) instead of downloading and parsing a file."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def extract(self, file_path: str, file_type: str):
        from hr_rag.core.document_processing.models import ExtractedText

        self.calls.append((file_path, file_type))
        if self.error is not None:
            raise self.error
        return ExtractedText(text=self.text)


@pytest.fixture
def fake_extractor() -> FakeExtractor:
    """Extractor returning 2500 characters of policy text (three chunks at 1000/200)."""
    sentence = "Employees accrue twenty days of annual leave per year. "
    text = (sentence * 50)[:2500]
    return FakeExtractor(text=text)


@pytest.fixture
def extractor_factory() -> type[FakeExtractor]:
    """FakeExtractor class for tests that need custom text or a failure."""
    return FakeExtractor
