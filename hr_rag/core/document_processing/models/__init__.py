"""
Models for document processing pipeline.

Exports: ChunkDraft, EmbeddedChunk, ExtractedText, ProcessingResult
"""

from .chunk import ChunkDraft, EmbeddedChunk
from .extraction import ExtractedText
from .pipeline_result import ProcessingResult

__all__ = [
    "ChunkDraft",
    "EmbeddedChunk",
    "ExtractedText",
    "ProcessingResult",
]
