"""
Document processing pipeline.

Exports: DocumentProcessor, DocumentPipelineSettings, get_pipeline_settings,
FixedDimensionEmbeddings
"""

from .configs import DocumentPipelineSettings, get_pipeline_settings
from .embeddings_wrapper import FixedDimensionEmbeddings
from .entrypoint import REPROCESSABLE_STATUSES, DocumentProcessor

__all__ = [
    "DocumentProcessor",
    "DocumentPipelineSettings",
    "FixedDimensionEmbeddings",
    "REPROCESSABLE_STATUSES",
    "get_pipeline_settings",
]
