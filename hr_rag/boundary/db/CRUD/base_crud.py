"""
Shared primary-key operations for the HR assistant tables.

Organizations, policy documents and chunks are all keyed by a UUID `id`.
The model-specific CRUD classes inherit these lookups and add their own
organization-scoped and status queries.

Dependencies: sqlalchemy
System role: Primary-key persistence helpers for CRUD singletons
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from hr_rag.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Primary-key operations for one UUID-keyed model.

    Writes are flushed so generated ids and defaults are visible, but never
    committed; the service or processor that owns the session commits.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values) -> ModelT:
        """
        Insert a row and return it with server defaults loaded.

        Args:
            session: Async database session
            **values: Column values for the new row

        Returns:
            The persisted instance (flushed, not committed)
        """
        row = self.model(**values)
        session.add(row)
        await session.flush()
        await session.refresh(row)
        return row

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """Load a row by id, or None when it does not exist."""
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a row by id.

        Rows that reference it through ON DELETE CASCADE go with it on
        PostgreSQL. Callers that also run on SQLite delete dependents first.

        Returns:
            True if a row was deleted
        """
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        """Check for a row without loading it."""
        result = await session.execute(select(self.model.id).where(self.model.id == id))
        return result.scalar_one_or_none() is not None
