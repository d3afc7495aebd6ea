"""
Health check API endpoints.

Routes: GET /health, GET /health/db, GET /health/rag

Dependencies: hr_rag.boundary, hr_rag.core.diagnostics
System role: Health check HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.api.deps import get_retriever, get_settings_dependency
from hr_rag.boundary.db import get_async_db
from hr_rag.configs import Settings
from hr_rag.core.diagnostics import run_rag_health_check
from hr_rag.core.retriever import Retriever
from hr_rag.models.rag import RAGHealthCheck

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(db: AsyncSession = Depends(get_async_db)) -> HealthResponse:
    """
    Database health check.

    Raises:
        HTTPException(503): Database unreachable
    """
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"{__name__}:health_check_db - {type(e).__name__}: {e}")
        raise HTTPException(status_code=503, detail="Database connection failed") from e
    return HealthResponse(status="healthy", message="Database connection OK")


@router.get("/rag", response_model=RAGHealthCheck)
async def health_check_rag(
    organization_id: UUID | None = None,
    retriever: Retriever = Depends(get_retriever),
    settings: Settings = Depends(get_settings_dependency),
) -> RAGHealthCheck:
    """Run the sample retrieval and report whether it found anything."""
    return await run_rag_health_check(
        retriever,
        query=settings.rag.health_check_query,
        match_threshold=settings.rag.health_check_threshold,
        match_count=settings.rag.health_check_count,
        organization_id=organization_id,
    )
