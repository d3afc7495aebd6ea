"""
Chat service for policy Q&A with RAG.

Retrieves policy passages for a question and asks the chat model to
answer from them. When nothing relevant is found the fixed fallback reply
is returned without calling the model.

Dependencies: langchain_core, hr_rag.core.retriever, hr_rag.configs
System role: Chat service orchestration layer
"""

import logging
from uuid import UUID

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser

from hr_rag.configs.rag import RAGSettings
from hr_rag.core.chat_prompt import EMPTY_ANSWER, HR_CHAT_PROMPT, NO_CONTEXT_ANSWER
from hr_rag.core.exceptions import RetrievalError
from hr_rag.core.retriever import Retriever, build_context
from hr_rag.models.chat import ChatMessage, ChatResponse, ChatSource

logger = logging.getLogger(__name__)

_HISTORY_ROLES = {"user": "human", "assistant": "ai"}


class ChatService:
    """
    Chat service for grounded HR answers.

    Retrieval failures never reach the employee: they are logged and the
    question is answered with the fallback reply.
    """

    def __init__(
        self,
        retriever: Retriever,
        chat_model: BaseChatModel,
        settings: RAGSettings,
    ) -> None:
        """
        Initialize chat service.

        Args:
            retriever: Policy retriever
            chat_model: LangChain chat model (Gemini in production)
            settings: Retrieval tunables for the chat flow
        """
        self._retriever = retriever
        self._settings = settings
        self._chain = HR_CHAT_PROMPT | chat_model | StrOutputParser()

    async def answer(
        self,
        question: str,
        organization_id: UUID | None = None,
        history: list[ChatMessage] | None = None,
    ) -> ChatResponse:
        """
        Answer an employee question from the organization's policies.

        Args:
            question: Employee question
            organization_id: Organization whose documents ground the answer
            history: Earlier turns of the conversation

        Returns:
            ChatResponse: Answer with cited sources, or the fallback reply
        """
        chunks = []
        try:
            chunks = await self._retriever.retrieve(
                question,
                match_threshold=self._settings.chat_match_threshold,
                match_count=self._settings.chat_match_count,
                organization_id=organization_id,
            )
        except RetrievalError as e:
            logger.error(
                f"{__name__}:answer - Retrieval failed, using fallback reply",
                extra={"organization_id": str(organization_id), "error": str(e)},
            )

        context = build_context(chunks)
        if not context:
            return ChatResponse(answer=NO_CONTEXT_ANSWER, used_fallback=True)

        answer = await self._chain.ainvoke({
            "context": context,
            "history": [(_HISTORY_ROLES[m.role], m.content) for m in history or []],
            "question": question,
        })

        logger.info(
            f"{__name__}:answer - Answer generated",
            extra={"organization_id": str(organization_id), "source_count": len(chunks)},
        )
        return ChatResponse(
            answer=answer.strip() or EMPTY_ANSWER,
            sources=[
                ChatSource(
                    document_id=chunk.document_id,
                    document_title=chunk.document_title,
                    chunk_index=chunk.chunk_index,
                    similarity=chunk.similarity,
                )
                for chunk in chunks
            ],
        )
