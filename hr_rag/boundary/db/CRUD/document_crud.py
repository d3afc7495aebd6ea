"""
Policy document CRUD operations.

Provides Create, Read, Update, Delete operations for PolicyDocumentModel
with document-specific query methods for organization scoping, editorial
filters, and status counting.

Dependencies: sqlalchemy, hr_rag.boundary.db.models
System role: Document persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.boundary.db.CRUD.base_crud import BaseCRUD
from hr_rag.boundary.db.models.policy_document_model import (
    PolicyDocumentModel,
    ProcessingStatus,
    PublicationStatus,
)


class DocumentCRUD(BaseCRUD[PolicyDocumentModel]):
    """
    CRUD operations for PolicyDocumentModel.

    Extends BaseCRUD with organization-scoped listing and status queries.
    """

    def __init__(self) -> None:
        """Initialize DocumentCRUD with PolicyDocumentModel."""
        super().__init__(PolicyDocumentModel)

    async def get_by_organization_id(
        self,
        session: AsyncSession,
        organization_id: UUID,
        status: PublicationStatus | None = None,
        category: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[PolicyDocumentModel]:
        """
        Retrieve an organization's documents, newest first.

        Args:
            session: Async database session
            organization_id: Owning organization UUID
            status: Optional publication status filter
            category: Optional category filter
            search: Optional case-insensitive match on title or description
            limit: Maximum number of documents to return
            offset: Number of documents to skip

        Returns:
            Sequence of matching PolicyDocumentModels
        """
        stmt = select(PolicyDocumentModel).where(
            PolicyDocumentModel.organization_id == organization_id
        )
        if status is not None:
            stmt = stmt.where(PolicyDocumentModel.status == status)
        if category:
            stmt = stmt.where(PolicyDocumentModel.category == category)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    PolicyDocumentModel.title.ilike(pattern),
                    PolicyDocumentModel.description.ilike(pattern),
                )
            )
        stmt = stmt.order_by(PolicyDocumentModel.created_at.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_processing_status(
        self,
        session: AsyncSession,
        processing_status: ProcessingStatus,
        limit: int | None = None,
    ) -> Sequence[PolicyDocumentModel]:
        """
        Retrieve documents by ingestion state.

        Args:
            session: Async database session
            processing_status: Processing status to filter by
            limit: Maximum number of documents to return

        Returns:
            Sequence of PolicyDocumentModels with matching status
        """
        stmt = select(PolicyDocumentModel).where(
            PolicyDocumentModel.processing_status == processing_status
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_by_status(
        self,
        session: AsyncSession,
        organization_id: UUID | None = None,
    ) -> dict[PublicationStatus, int]:
        """Count documents per publication status, optionally per organization."""
        return await self._count_grouped(session, PolicyDocumentModel.status, organization_id)

    async def count_by_processing_status(
        self,
        session: AsyncSession,
        organization_id: UUID | None = None,
    ) -> dict[ProcessingStatus, int]:
        """Count documents per processing status, optionally per organization."""
        return await self._count_grouped(
            session, PolicyDocumentModel.processing_status, organization_id
        )

    async def _count_grouped(self, session: AsyncSession, column, organization_id: UUID | None) -> dict:
        stmt = select(column, func.count()).group_by(column)
        if organization_id is not None:
            stmt = stmt.where(PolicyDocumentModel.organization_id == organization_id)
        result = await session.execute(stmt)
        return {key: count for key, count in result.all()}


document_crud = DocumentCRUD()
