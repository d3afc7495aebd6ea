"""
Embedding generation task.

Wraps a LangChain Embeddings provider (Google Gemini by default) and
guarantees that every returned vector has the configured dimension.
Retrying is opt-in: with max_retries=0 the first provider failure is final.

Dependencies: langchain_core, tenacity, hr_rag.core.exceptions
System role: Third stage of document ingestion pipeline, query embedding for retrieval
"""

import logging
from numbers import Real
from typing import Any, Awaitable, Callable

from langchain_core.embeddings import Embeddings
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from hr_rag.core.exceptions import RemoteEmbeddingError

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate document and query embeddings with dimension checks."""

    def __init__(
        self,
        embeddings: Embeddings,
        dimension: int = 1536,
        max_retries: int = 0,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            embeddings: LangChain embeddings provider
            dimension: Expected vector length
            max_retries: Extra attempts after a provider failure (0 disables retrying)

        Raises:
            ValueError: Non-positive dimension or negative max_retries
        """
        if dimension <= 0:
            raise ValueError("dimension must be positive")
        if max_retries < 0:
            raise ValueError("max_retries cannot be negative")

        self._embeddings = embeddings
        self._dimension = dimension
        self._max_retries = max_retries
        self._model = getattr(embeddings, "model", None) or type(embeddings).__name__

    @property
    def dimension(self) -> int:
        return self._dimension

    async def embed_document(self, text: str) -> list[float]:
        """
        Embed one chunk of document text.

        Args:
            text: Non-empty chunk content

        Returns:
            list[float]: Vector of the configured dimension

        Raises:
            ValueError: text is empty or whitespace
            RemoteEmbeddingError: Provider failure or malformed vector
        """
        self._require_text(text)

        async def call() -> Any:
            vectors = await self._embeddings.aembed_documents([text])
            if not vectors:
                raise RemoteEmbeddingError(
                    "Embedding provider returned no vectors",
                    operation="document",
                    model=self._model,
                )
            return vectors[0]

        return await self._embed("document", call)

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a search query.

        Args:
            text: Non-empty query text

        Returns:
            list[float]: Vector of the configured dimension

        Raises:
            ValueError: text is empty or whitespace
            RemoteEmbeddingError: Provider failure or malformed vector
        """
        self._require_text(text)
        return await self._embed("query", lambda: self._embeddings.aembed_query(text))

    @staticmethod
    def _require_text(text: str) -> None:
        if not text or not text.strip():
            raise ValueError("Cannot embed empty text")

    async def _embed(self, operation: str, call: Callable[[], Awaitable[Any]]) -> list[float]:
        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(Exception),
                stop=stop_after_attempt(self._max_retries + 1),
                wait=wait_exponential_jitter(initial=1, max=30, jitter=2),
                before_sleep=lambda retry_state: logger.warning(
                    f"{__name__}:_embed - Retry {retry_state.attempt_number}/{self._max_retries} "
                    f"for {operation} embedding"
                ),
                reraise=True,
            ):
                with attempt:
                    vector = await call()
        except RemoteEmbeddingError:
            raise
        except Exception as e:
            logger.error(
                f"{__name__}:_embed - Embedding call failed",
                extra={"operation": operation, "model": self._model, "error": str(e)},
            )
            raise RemoteEmbeddingError(
                f"Failed to generate {operation} embedding: {e}",
                operation=operation,
                model=self._model,
            ) from e

        return self._validate(vector, operation)

    def _validate(self, vector: Any, operation: str) -> list[float]:
        if not isinstance(vector, (list, tuple)) or not all(
            isinstance(value, Real) and not isinstance(value, bool) for value in vector
        ):
            raise RemoteEmbeddingError(
                "Embedding provider returned a malformed vector",
                operation=operation,
                model=self._model,
            )
        if len(vector) != self._dimension:
            raise RemoteEmbeddingError(
                f"Embedding dimension mismatch: expected {self._dimension}, got {len(vector)}",
                operation=operation,
                model=self._model,
                details={"expected": self._dimension, "actual": len(vector)},
            )
        return [float(value) for value in vector]
