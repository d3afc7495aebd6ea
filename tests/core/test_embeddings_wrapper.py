"""
Test suite for FixedDimensionEmbeddings.

Replaces the Gemini client with an in-process fake and checks the
dimension requested on the async embed path used by EmbeddingTask.

System role: Verification of embedding dimension pinning
"""

from types import SimpleNamespace

import pytest

from hr_rag.core.document_processing.embeddings_wrapper import FixedDimensionEmbeddings
from hr_rag.core.document_processing.tasks.embedding_task import EmbeddingTask


class FakeAsyncModels:
    """Records embed_content configs and returns vectors of the requested size."""

    def __init__(self) -> None:
        self.configs = []

    async def embed_content(self, *args, **kwargs):
        config = kwargs.get("config")
        self.configs.append(config)
        contents = kwargs.get("contents", args[1] if len(args) > 1 else [])
        count = len(contents) if isinstance(contents, list) else 1
        size = getattr(config, "output_dimensionality", None) or 3072
        return SimpleNamespace(
            embeddings=[SimpleNamespace(values=[0.01] * size) for _ in range(count)]
        )


@pytest.fixture
def fake_models() -> FakeAsyncModels:
    return FakeAsyncModels()


@pytest.fixture
def embeddings(fake_models) -> FixedDimensionEmbeddings:
    emb = FixedDimensionEmbeddings(output_dimensionality=1536, google_api_key="test-key")
    emb.client = SimpleNamespace(aio=SimpleNamespace(models=fake_models))
    return emb


class TestFixedDimensionEmbeddings:
    """Test suite for the pinned output dimensionality."""

    def test_init_should_set_output_dimensionality_field(self) -> None:
        emb = FixedDimensionEmbeddings(output_dimensionality=768, google_api_key="test-key")

        assert emb.output_dimensionality == 768

    @pytest.mark.asyncio
    async def test_async_document_embedding_should_request_configured_dimension(
        self, embeddings, fake_models
    ) -> None:
        task = EmbeddingTask(embeddings, dimension=1536)

        vector = await task.embed_document("Annual leave policy")

        assert len(vector) == 1536
        assert [c.output_dimensionality for c in fake_models.configs] == [1536]

    @pytest.mark.asyncio
    async def test_async_query_embedding_should_request_configured_dimension(
        self, embeddings, fake_models
    ) -> None:
        task = EmbeddingTask(embeddings, dimension=1536)

        vector = await task.embed_query("How many vacation days do I get?")

        assert len(vector) == 1536
        assert [c.output_dimensionality for c in fake_models.configs] == [1536]
