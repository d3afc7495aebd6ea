"""
Organization CRUD operations.

Dependencies: sqlalchemy, hr_rag.boundary.db.models
System role: Tenant persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.boundary.db.CRUD.base_crud import BaseCRUD
from hr_rag.boundary.db.models.organization_model import OrganizationModel


class OrganizationCRUD(BaseCRUD[OrganizationModel]):
    """CRUD operations for OrganizationModel."""

    def __init__(self) -> None:
        super().__init__(OrganizationModel)

    async def get_by_slug(self, session: AsyncSession, slug: str) -> OrganizationModel | None:
        """Retrieve an organization by its unique slug."""
        stmt = select(OrganizationModel).where(OrganizationModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


organization_crud = OrganizationCRUD()
