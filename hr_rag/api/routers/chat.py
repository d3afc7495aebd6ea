"""Chat API endpoints.

Routes:
- POST /organizations/{organization_id}/chat - Answer an employee question from policy documents

Dependencies: hr_rag.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from hr_rag.api.deps import get_chat_service
from hr_rag.api.routers.router_utils import to_http_exception
from hr_rag.application.services.chat_service import ChatService
from hr_rag.core.exceptions import HRAssistantException
from hr_rag.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/organizations", tags=["chat"])


@router.post("/{organization_id}/chat", response_model=ChatResponse)
async def chat(
    organization_id: UUID,
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer a question grounded in the organization's published policies.

    When no relevant policy text is found the fixed fallback reply is
    returned with used_fallback=True.

    Raises:
        HTTPException(400): Invalid question
    """
    try:
        return await chat_service.answer(
            request.message,
            organization_id=organization_id,
            history=request.history,
        )
    except HRAssistantException as e:
        logger.warning(
            "Chat request failed",
            extra={"organization_id": str(organization_id), "error": str(e)},
        )
        raise to_http_exception(e) from e
