"""
Document chunk CRUD operations.

Every bulk operation is keyed on document_id so that reprocessing or
deleting one document never touches the chunks of another.

Dependencies: sqlalchemy, hr_rag.boundary.db.models
System role: Chunk persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.boundary.db.CRUD.base_crud import BaseCRUD
from hr_rag.boundary.db.models.document_chunk_model import DocumentChunkModel
from hr_rag.boundary.db.models.policy_document_model import PolicyDocumentModel


class ChunkCRUD(BaseCRUD[DocumentChunkModel]):
    """CRUD operations for DocumentChunkModel."""

    def __init__(self) -> None:
        super().__init__(DocumentChunkModel)

    async def get_by_document_id(
        self,
        session: AsyncSession,
        document_id: UUID,
    ) -> Sequence[DocumentChunkModel]:
        """
        Retrieve a document's chunks in original order.

        Args:
            session: Async database session
            document_id: Parent document UUID

        Returns:
            Chunks ordered by chunk_index
        """
        stmt = (
            select(DocumentChunkModel)
            .where(DocumentChunkModel.document_id == document_id)
            .order_by(DocumentChunkModel.chunk_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_document_id(self, session: AsyncSession, document_id: UUID) -> int:
        """
        Delete every chunk of one document.

        Args:
            session: Async database session
            document_id: Parent document UUID

        Returns:
            Number of deleted rows (0 when the document had none)
        """
        stmt = delete(DocumentChunkModel).where(DocumentChunkModel.document_id == document_id)
        result = await session.execute(stmt)
        return result.rowcount or 0

    async def count_chunks(
        self,
        session: AsyncSession,
        organization_id: UUID | None = None,
    ) -> tuple[int, int]:
        """
        Count chunks and the number of distinct documents that own them.

        Args:
            session: Async database session
            organization_id: Optional organization scope

        Returns:
            tuple[int, int]: (total_chunks, documents_with_chunks)
        """
        stmt = select(
            func.count(DocumentChunkModel.id),
            func.count(distinct(DocumentChunkModel.document_id)),
        )
        if organization_id is not None:
            stmt = stmt.join(
                PolicyDocumentModel,
                DocumentChunkModel.document_id == PolicyDocumentModel.id,
            ).where(PolicyDocumentModel.organization_id == organization_id)
        result = await session.execute(stmt)
        total_chunks, documents_with_chunks = result.one()
        return int(total_chunks or 0), int(documents_with_chunks or 0)


chunk_crud = ChunkCRUD()
