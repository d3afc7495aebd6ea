"""
Text extraction task using LangChain document loaders.

Downloads the raw upload from S3 and converts it to plain text with
PyPDFLoader, Docx2txtLoader, UnstructuredWordDocumentLoader (legacy .doc),
or TextLoader depending on its MIME type.

Dependencies: langchain_community.document_loaders, hr_rag.core.exceptions
System role: Text extraction stage of document ingestion pipeline
"""

import asyncio
import logging
import os
import shutil

from langchain_community.document_loaders import (
    Docx2txtLoader,
    PyPDFLoader,
    TextLoader,
    UnstructuredWordDocumentLoader,
)
from langchain_core.documents import Document

from hr_rag.core.document_processing.models import ExtractedText
from hr_rag.core.document_processing.tasks.s3_download_task import S3DownloadTask
from hr_rag.core.exceptions import ParsingError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME_TYPE = "application/msword"
TEXT_MIME_TYPE = "text/plain"

SUPPORTED_FILE_TYPES = frozenset({PDF_MIME_TYPE, DOCX_MIME_TYPE, DOC_MIME_TYPE, TEXT_MIME_TYPE})

MIN_TEXT_LENGTH = 10


def load_documents(local_path: str, file_type: str) -> list[Document]:
    """
    Load a local file into LangChain Documents.

    Args:
        local_path: Path to the downloaded file
        file_type: MIME type recorded at upload

    Returns:
        list[Document]: One document per PDF page, or a single document

    Raises:
        UnsupportedFileTypeError: MIME type outside the allow-list
    """
    if file_type == PDF_MIME_TYPE:
        loader = PyPDFLoader(local_path)
    elif file_type == DOCX_MIME_TYPE:
        loader = Docx2txtLoader(local_path)
    elif file_type == DOC_MIME_TYPE:
        loader = UnstructuredWordDocumentLoader(local_path)
    elif file_type == TEXT_MIME_TYPE:
        loader = TextLoader(local_path, encoding="utf-8", autodetect_encoding=True)
    else:
        raise UnsupportedFileTypeError(file_type)
    return loader.load()


def join_page_texts(documents: list[Document]) -> str:
    """Concatenate loaded pages with blank lines and strip the result."""
    return "\n\n".join(doc.page_content for doc in documents if doc.page_content).strip()


class ParsingTask:
    """Extract plain text from a stored policy document."""

    def __init__(self, download_task: S3DownloadTask) -> None:
        """
        Initialize parsing task.

        Args:
            download_task: Fetches the raw object from the documents bucket
        """
        self._download_task = download_task

    async def extract(self, file_path: str, file_type: str) -> ExtractedText:
        """
        Download and extract text from a stored document.

        Args:
            file_path: Object storage key of the document
            file_type: MIME type of the document

        Returns:
            ExtractedText: Stripped text and page count (PDF only)

        Raises:
            UnsupportedFileTypeError: MIME type outside the allow-list
            StorageError: Download failed
            ParsingError: Loader failed or the text is too short
        """
        if file_type not in SUPPORTED_FILE_TYPES:
            raise UnsupportedFileTypeError(file_type)

        return await asyncio.to_thread(self._extract_sync, file_path, file_type)

    def _extract_sync(self, file_path: str, file_type: str) -> ExtractedText:
        local_path = self._download_task.download(file_path)
        try:
            try:
                documents = load_documents(local_path, file_type)
            except Exception as e:
                raise ParsingError(
                    f"Failed to extract text: {e}",
                    file_type=file_type,
                    details={"file_path": file_path},
                ) from e

            text = join_page_texts(documents)
            if len(text) < MIN_TEXT_LENGTH:
                raise ParsingError(
                    "Extracted text is too short or empty. "
                    "The PDF may be scanned or contain only images.",
                    file_type=file_type,
                    details={"file_path": file_path, "text_length": len(text)},
                )

            page_count = len(documents) if file_type == PDF_MIME_TYPE else None
            logger.info(
                f"{__name__}:extract - Text extracted",
                extra={"file_path": file_path, "text_length": len(text), "page_count": page_count},
            )
            return ExtractedText(text=text, page_count=page_count)
        finally:
            shutil.rmtree(os.path.dirname(local_path), ignore_errors=True)
