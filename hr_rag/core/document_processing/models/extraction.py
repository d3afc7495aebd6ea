"""
Extracted text model.

Dependencies: pydantic
System role: Output of the text extraction stage
"""

from pydantic import BaseModel, Field


class ExtractedText(BaseModel):
    """Plain text recovered from an uploaded document."""

    text: str = Field(description="Concatenated, stripped document text")
    page_count: int | None = Field(default=None, description="Number of pages, when known")
