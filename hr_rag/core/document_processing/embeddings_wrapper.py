"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so that every embed call, sync or async,
requests the same vector size as the document_chunks.embedding column.

Dependencies: langchain_google_genai, dotenv
System role: Embedding dimension consistency for pgvector storage
"""

import logging

from dotenv import load_dotenv
from langchain_google_genai import GoogleGenerativeAIEmbeddings

# GOOGLE_API_KEY is read from the process environment by the Gemini client
load_dotenv()
logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings pinned to one output dimensionality.

    The dimension is stored in the base class's output_dimensionality field,
    which both the sync and the native async embed paths read.
    """

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1536,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(
            model=model,
            output_dimensionality=output_dimensionality,
            **kwargs,
        )
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )
