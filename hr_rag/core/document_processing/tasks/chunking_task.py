"""
Fixed-size text chunking with overlap.

Splits extracted document text into overlapping character windows.
The output depends only on the input text and the two parameters.

Dependencies: hr_rag.core.exceptions
System role: Second stage of document ingestion pipeline
"""

from hr_rag.core.document_processing.models import ChunkDraft
from hr_rag.core.exceptions import ChunkingError

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200


def _validate(chunk_size: int, overlap: int) -> None:
    if chunk_size <= 0:
        raise ChunkingError(
            f"chunk_size must be positive, got {chunk_size}",
            details={"chunk_size": chunk_size},
        )
    if overlap < 0 or overlap >= chunk_size:
        raise ChunkingError(
            f"overlap must be in [0, chunk_size), got {overlap}",
            details={"chunk_size": chunk_size, "overlap": overlap},
        )


def split_into_chunks(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[str]:
    """
    Split text into overlapping windows of at most chunk_size characters.

    Each window starts chunk_size - overlap characters after the previous
    one. Windows are trimmed and dropped when nothing but whitespace
    remains. The final window always reaches the end of the text.

    Args:
        text: Text to split
        chunk_size: Window length in characters
        overlap: Characters shared by consecutive windows

    Returns:
        list[str]: Non-empty trimmed chunks in document order

    Raises:
        ChunkingError: chunk_size <= 0 or overlap outside [0, chunk_size)
    """
    _validate(chunk_size, overlap)

    chunks: list[str] = []
    step = chunk_size - overlap
    text_length = len(text)
    start = 0

    while start < text_length:
        end = min(start + chunk_size, text_length)
        window = text[start:end].strip()
        if window:
            chunks.append(window)
        if end == text_length:
            break
        start += step

    return chunks


class ChunkingTask:
    """Split extracted text into indexed chunk drafts."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> None:
        """
        Initialize chunking task.

        Args:
            chunk_size: Window length in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ChunkingError: Invalid size/overlap combination
        """
        _validate(chunk_size, chunk_overlap)
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap

    def chunk(self, text: str) -> list[ChunkDraft]:
        """
        Split text into chunks numbered 0..N-1.

        Args:
            text: Extracted document text

        Returns:
            list[ChunkDraft]: Chunks with contiguous indices (empty for blank text)
        """
        pieces = split_into_chunks(text, self._chunk_size, self._chunk_overlap)
        return [ChunkDraft(chunk_index=i, content=piece) for i, piece in enumerate(pieces)]
