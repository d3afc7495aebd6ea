"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_document_processor,
    get_document_service,
    get_retriever,
    get_s3_document_client,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_chat_service",
    "get_document_processor",
    "get_document_service",
    "get_retriever",
    "get_s3_document_client",
    "get_service_cache",
    "get_settings_dependency",
]
