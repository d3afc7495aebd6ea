"""
Chat domain models and schemas.

Request/response schemas for chat operations.

Dependencies: pydantic, hr_rag.boundary.vdb
System role: Chat API contracts
"""

from typing import Literal
import uuid

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """Single turn of earlier conversation."""

    role: Literal["user", "assistant"] = Field(description="Message role")
    content: str = Field(description="Message content")


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    message: str = Field(min_length=1, description="Employee question")
    history: list[ChatMessage] = Field(default_factory=list, description="Earlier turns")


class ChatSource(BaseModel):
    """Policy document passage used to ground an answer."""

    document_id: uuid.UUID
    document_title: str | None = None
    chunk_index: int
    similarity: float | None = None


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    answer: str
    sources: list[ChatSource] = Field(default_factory=list)
    used_fallback: bool = Field(
        default=False,
        description="True when no policy context was found and the fixed reply was used",
    )
