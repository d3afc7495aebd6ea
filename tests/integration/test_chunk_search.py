"""
Test suite for pgvector similarity search.

The SQL is checked by compiling it for PostgreSQL; execution is checked
with a mocked session factory since SQLite has no vector operators.

System role: Verification of retrieval query scoping and result mapping
"""

import uuid
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from hr_rag.boundary.vdb.chunk_search import PgVectorChunkSearch, build_search_statement
from hr_rag.core.exceptions import VectorStoreError

QUERY_VECTOR = [0.1] * 1536


def compile_sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


@pytest.fixture
def mock_session() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_session_factory(mock_session) -> MagicMock:
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = mock_session
    factory.return_value.__aexit__.return_value = False
    return factory


class TestBuildSearchStatement:
    """Test suite for build_search_statement()."""

    def test_statement_should_rank_by_cosine_distance(self) -> None:
        sql = compile_sql(build_search_statement(QUERY_VECTOR, 0.5, 5))

        assert "<=>" in sql
        assert "ORDER BY document_chunks.embedding <=>" in sql
        assert "LIMIT" in sql

    def test_statement_should_only_include_published_enabled_embedded_chunks(self) -> None:
        stmt = build_search_statement(QUERY_VECTOR, 0.5, 5)
        sql = compile_sql(stmt)

        assert "JOIN policy_documents ON document_chunks.document_id = policy_documents.id" in sql
        assert "policy_documents.status =" in sql
        assert "policy_documents.is_enabled IS true" in sql
        assert "document_chunks.embedding IS NOT NULL" in sql

        params = stmt.compile(dialect=postgresql.dialect()).params
        assert "published" in [getattr(v, "value", v) for v in params.values()]

    def test_statement_without_organization_should_not_filter_by_organization(self) -> None:
        sql = compile_sql(build_search_statement(QUERY_VECTOR, 0.5, 5))

        assert "policy_documents.organization_id =" not in sql

    def test_statement_with_organization_should_filter_by_organization(self) -> None:
        organization_id = uuid.uuid4()
        stmt = build_search_statement(QUERY_VECTOR, 0.5, 5, organization_id)

        assert "policy_documents.organization_id =" in compile_sql(stmt)
        assert organization_id in stmt.compile(dialect=postgresql.dialect()).params.values()

    def test_statement_should_select_document_metadata(self) -> None:
        stmt = build_search_statement(QUERY_VECTOR, 0.5, 5)

        assert [c.name for c in stmt.selected_columns] == [
            "id",
            "document_id",
            "content",
            "chunk_index",
            "similarity",
            "title",
            "category",
            "description",
        ]


class TestPgVectorChunkSearch:
    """Test suite for PgVectorChunkSearch.search()."""

    @pytest.mark.asyncio
    async def test_rows_should_map_to_retrieved_chunks(self, mock_session_factory, mock_session) -> None:
        row = SimpleNamespace(
            id=uuid.uuid4(),
            document_id=uuid.uuid4(),
            content="Employees accrue twenty days of leave.",
            chunk_index=2,
            similarity=0.8123,
            title="Leave Policy",
            category="leave",
            description="Annual leave rules",
        )
        result = MagicMock()
        result.all.return_value = [row]
        mock_session.execute.return_value = result

        chunks = await PgVectorChunkSearch(mock_session_factory).search(QUERY_VECTOR, 0.5, 5)

        assert len(chunks) == 1
        assert chunks[0].id == row.id
        assert chunks[0].chunk_index == 2
        assert chunks[0].similarity == pytest.approx(0.8123)
        assert chunks[0].document_title == "Leave Policy"
        assert chunks[0].document_category == "leave"
        assert chunks[0].document_description == "Annual leave rules"

    @pytest.mark.asyncio
    async def test_database_error_should_raise_vector_store_error(
        self, mock_session_factory, mock_session
    ) -> None:
        mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("server closed"))

        with pytest.raises(VectorStoreError) as exc_info:
            await PgVectorChunkSearch(mock_session_factory).search(QUERY_VECTOR, 0.5, 5)

        assert exc_info.value.details["operation"] == "search"
