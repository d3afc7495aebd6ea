"""
Dependency injection container.

Factory functions for FastAPI dependencies. Long-lived clients (embedding
provider, chat model, S3, processor) are cached once per process in
ServiceCache; database sessions are request scoped.

Dependencies: hr_rag.configs, hr_rag.application, hr_rag.boundary, hr_rag.core
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.application.services import ChatService, DocumentService
from hr_rag.boundary.aws.s3_client import S3DocumentClient
from hr_rag.boundary.db import EMBEDDING_DIMENSION, get_async_db, get_async_session_factory
from hr_rag.configs import Settings, get_settings
from hr_rag.core.document_processing.entrypoint import DocumentProcessor
from hr_rag.core.retriever import Retriever


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._embedding_task = None
        self._retriever = None
        self._document_processor = None
        self._s3_client = None
        self._chat_model = None

    @property
    def embedding_task(self):
        """Get cached embedding task (Gemini embeddings at the chunk column dimension)."""
        if self._embedding_task is None:
            from hr_rag.core.document_processing.configs import get_pipeline_settings
            from hr_rag.core.document_processing.embeddings_wrapper import FixedDimensionEmbeddings
            from hr_rag.core.document_processing.tasks import EmbeddingTask

            pipeline_settings = get_pipeline_settings()
            self._embedding_task = EmbeddingTask(
                embeddings=FixedDimensionEmbeddings(
                    model=pipeline_settings.embedding_model_id,
                    output_dimensionality=EMBEDDING_DIMENSION,
                ),
                dimension=EMBEDDING_DIMENSION,
                max_retries=pipeline_settings.embedding_max_retries,
            )
        return self._embedding_task

    @property
    def retriever(self):
        """Get cached retriever backed by pgvector search."""
        if self._retriever is None:
            from hr_rag.boundary.vdb import PgVectorChunkSearch

            self._retriever = Retriever(
                embedding_task=self.embedding_task,
                search_client=PgVectorChunkSearch(get_async_session_factory()),
            )
        return self._retriever

    @property
    def document_processor(self):
        """Get cached document processor."""
        if self._document_processor is None:
            from hr_rag.core.document_processing.configs import get_pipeline_settings
            from hr_rag.core.document_processing.tasks import (
                ChunkingTask,
                ParsingTask,
                S3DownloadTask,
            )

            pipeline_settings = get_pipeline_settings()
            s3_settings = get_settings().s3_documents
            self._document_processor = DocumentProcessor(
                session_factory=get_async_session_factory(),
                extractor=ParsingTask(
                    S3DownloadTask(
                        bucket=s3_settings.bucket,
                        region=s3_settings.region,
                    )
                ),
                chunking_task=ChunkingTask(
                    chunk_size=pipeline_settings.chunk_size,
                    chunk_overlap=pipeline_settings.chunk_overlap,
                ),
                embedding_task=self.embedding_task,
            )
        return self._document_processor

    @property
    def s3_client(self):
        """Get cached S3 document client."""
        if self._s3_client is None:
            settings = get_settings()
            self._s3_client = S3DocumentClient(
                bucket=settings.s3_documents.bucket,
                region=settings.s3_documents.region,
            )
        return self._s3_client

    @property
    def chat_model(self):
        """Get cached Gemini chat model."""
        if self._chat_model is None:
            from dotenv import load_dotenv
            from langchain_google_genai import ChatGoogleGenerativeAI

            load_dotenv()

            rag_settings = get_settings().rag
            self._chat_model = ChatGoogleGenerativeAI(
                model=rag_settings.chat_model_id,
                temperature=rag_settings.chat_temperature,
                max_output_tokens=rag_settings.chat_max_output_tokens,
            )
        return self._chat_model

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedding_task = None
        self._retriever = None
        self._document_processor = None
        self._s3_client = None
        self._chat_model = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_s3_document_client() -> S3DocumentClient:
    """Get cached S3 document client."""
    return get_service_cache().s3_client


def get_retriever() -> Retriever:
    """Get cached retriever."""
    return get_service_cache().retriever


def get_document_processor() -> DocumentProcessor:
    """Get cached document processor."""
    return get_service_cache().document_processor


def get_document_service(
    db: AsyncSession = Depends(get_async_db),
    storage: S3DocumentClient = Depends(get_s3_document_client),
    processor: DocumentProcessor = Depends(get_document_processor),
    settings: Settings = Depends(get_settings_dependency),
) -> DocumentService:
    """
    Get document service instance.

    Args:
        db: Async database session (injected via Depends)
        storage: Documents bucket client
        processor: Document processing pipeline
        settings: Application settings

    Returns:
        DocumentService: Document service instance
    """
    return DocumentService(
        db=db,
        storage=storage,
        processor=processor,
        presigned_url_expiry=settings.s3_documents.presigned_url_expiry,
    )


def get_chat_service(
    retriever: Retriever = Depends(get_retriever),
    settings: Settings = Depends(get_settings_dependency),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        retriever: Policy retriever
        settings: Application settings

    Returns:
        ChatService: Chat service with the cached Gemini chat model
    """
    return ChatService(
        retriever=retriever,
        chat_model=get_service_cache().chat_model,
        settings=settings.rag,
    )
