"""
Organization ORM model.

Tenant boundary for policy documents. Retrieval is scoped by organization.

Dependencies: sqlalchemy, hr_rag.boundary.db.base
System role: Tenant persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_rag.boundary.db.base import Base, UUIDMixin, TimestampMixin


class OrganizationModel(Base, UUIDMixin, TimestampMixin):
    """
    Organization ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        slug: Unique URL-safe identifier
        documents: Policy documents owned by the organization (cascade delete)
    """

    __tablename__ = "organizations"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    documents = relationship(
        "PolicyDocumentModel",
        back_populates="organization",
        cascade="all, delete-orphan",
    )
