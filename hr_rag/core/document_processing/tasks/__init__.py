"""
Document processing tasks.

Exports: ChunkingTask, split_into_chunks, EmbeddingTask, ParsingTask, S3DownloadTask
"""

from .chunking_task import ChunkingTask, split_into_chunks
from .embedding_task import EmbeddingTask
from .parsing_task import SUPPORTED_FILE_TYPES, ParsingTask
from .s3_download_task import S3DownloadTask

__all__ = [
    "ChunkingTask",
    "split_into_chunks",
    "EmbeddingTask",
    "ParsingTask",
    "S3DownloadTask",
    "SUPPORTED_FILE_TYPES",
]
