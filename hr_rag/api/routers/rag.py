"""
Retrieval API endpoints.

Routes:
- POST /organizations/{id}/rag/search - Ranked chunks plus the assembled context
- GET /organizations/{id}/rag/diagnostics - Index coverage statistics

Dependencies: hr_rag.core.retriever, hr_rag.core.diagnostics
System role: Retrieval inspection HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.api.deps import get_retriever, get_settings_dependency
from hr_rag.api.routers.router_utils import to_http_exception
from hr_rag.boundary.db import get_async_db
from hr_rag.configs import Settings
from hr_rag.core.diagnostics import get_rag_diagnostics
from hr_rag.core.exceptions import HRAssistantException
from hr_rag.core.retriever import Retriever, build_context
from hr_rag.models.rag import RAGDiagnostics, SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/organizations/{organization_id}/rag", tags=["rag"])


@router.post("/search", response_model=SearchResponse)
async def search(
    organization_id: UUID,
    request: SearchRequest,
    retriever: Retriever = Depends(get_retriever),
    settings: Settings = Depends(get_settings_dependency),
) -> SearchResponse:
    """
    Search published, enabled policy chunks of the organization.

    Raises:
        HTTPException(400): Invalid query or tunables
        HTTPException(502): Embedding or search backend failed
    """
    threshold = (
        request.match_threshold
        if request.match_threshold is not None
        else settings.rag.search_match_threshold
    )
    count = request.match_count or settings.rag.search_match_count

    try:
        chunks = await retriever.retrieve(
            request.query,
            match_threshold=threshold,
            match_count=count,
            organization_id=organization_id,
        )
    except HRAssistantException as e:
        raise to_http_exception(e) from e

    return SearchResponse(chunks=chunks, context=build_context(chunks), total=len(chunks))


@router.get("/diagnostics", response_model=RAGDiagnostics)
async def diagnostics(
    organization_id: UUID,
    db: AsyncSession = Depends(get_async_db),
) -> RAGDiagnostics:
    """Chunk and document counts for the organization."""
    return await get_rag_diagnostics(db, organization_id)
