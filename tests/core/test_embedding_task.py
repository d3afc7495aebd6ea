"""
Test suite for EmbeddingTask.

Tests dimension enforcement, error wrapping, and opt-in retry using
LangChain fake embeddings.

System role: Verification of embedding generation contract
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings

from hr_rag.core.document_processing.tasks.embedding_task import EmbeddingTask
from hr_rag.core.exceptions import RemoteEmbeddingError


class FlakyEmbeddings(Embeddings):
    """Fails a fixed number of times before returning constant vectors."""

    def __init__(self, failures: int, size: int = 8) -> None:
        self.failures = failures
        self.size = size
        self.calls = 0

    def _next(self) -> list[float]:
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError("provider unavailable")
        return [0.5] * self.size

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self._next() for _ in texts]

    def embed_query(self, text: str) -> list[float]:
        return self._next()


class TestEmbeddingTaskInit:
    """Test suite for EmbeddingTask construction."""

    def test_init_with_non_positive_dimension_should_raise_value_error(self) -> None:
        with pytest.raises(ValueError):
            EmbeddingTask(DeterministicFakeEmbedding(size=8), dimension=0)

    def test_init_with_negative_retries_should_raise_value_error(self) -> None:
        with pytest.raises(ValueError):
            EmbeddingTask(DeterministicFakeEmbedding(size=8), dimension=8, max_retries=-1)


class TestEmbeddingTaskEmbed:
    """Test suite for embed_document() and embed_query()."""

    @pytest.mark.asyncio
    async def test_embed_document_should_return_vector_of_configured_dimension(self) -> None:
        task = EmbeddingTask(DeterministicFakeEmbedding(size=16), dimension=16)

        vector = await task.embed_document("Remote work requires manager approval.")

        assert len(vector) == 16
        assert all(isinstance(v, float) for v in vector)

    @pytest.mark.asyncio
    async def test_embed_query_should_be_deterministic_for_same_text(self) -> None:
        task = EmbeddingTask(DeterministicFakeEmbedding(size=16), dimension=16)

        first = await task.embed_query("How many vacation days do I get?")
        second = await task.embed_query("How many vacation days do I get?")

        assert first == second

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_embed_blank_text_should_raise_value_error(self, text: str) -> None:
        task = EmbeddingTask(DeterministicFakeEmbedding(size=8), dimension=8)

        with pytest.raises(ValueError):
            await task.embed_document(text)
        with pytest.raises(ValueError):
            await task.embed_query(text)

    @pytest.mark.asyncio
    async def test_dimension_mismatch_should_raise_remote_embedding_error(self) -> None:
        task = EmbeddingTask(DeterministicFakeEmbedding(size=8), dimension=1536)

        with pytest.raises(RemoteEmbeddingError) as exc_info:
            await task.embed_query("parental leave")

        assert exc_info.value.details["operation"] == "query"
        assert exc_info.value.details["expected"] == 1536
        assert exc_info.value.details["actual"] == 8

    @pytest.mark.asyncio
    async def test_malformed_vector_should_raise_remote_embedding_error(self) -> None:
        embeddings = MagicMock(spec=Embeddings)
        embeddings.aembed_query = AsyncMock(return_value=["not", "numbers"])
        task = EmbeddingTask(embeddings, dimension=2)

        with pytest.raises(RemoteEmbeddingError):
            await task.embed_query("expenses")

    @pytest.mark.asyncio
    async def test_empty_provider_response_should_raise_remote_embedding_error(self) -> None:
        embeddings = MagicMock(spec=Embeddings)
        embeddings.aembed_documents = AsyncMock(return_value=[])
        task = EmbeddingTask(embeddings, dimension=2)

        with pytest.raises(RemoteEmbeddingError):
            await task.embed_document("expenses")

    @pytest.mark.asyncio
    async def test_provider_failure_without_retries_should_fail_on_first_error(self) -> None:
        embeddings = FlakyEmbeddings(failures=1)
        task = EmbeddingTask(embeddings, dimension=8)

        with pytest.raises(RemoteEmbeddingError) as exc_info:
            await task.embed_document("probation period")

        assert embeddings.calls == 1
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert exc_info.value.details["model"] == "FlakyEmbeddings"

    @pytest.mark.asyncio
    async def test_provider_failure_with_retries_should_recover(self, monkeypatch) -> None:
        monkeypatch.setattr("asyncio.sleep", AsyncMock())
        embeddings = FlakyEmbeddings(failures=2)
        task = EmbeddingTask(embeddings, dimension=8, max_retries=2)

        vector = await task.embed_query("probation period")

        assert vector == [0.5] * 8
        assert embeddings.calls == 3
