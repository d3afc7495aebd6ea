"""
CRUD operations package.

Exports CRUD classes and their module-level singletons.
"""

from hr_rag.boundary.db.CRUD.base_crud import BaseCRUD
from hr_rag.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from hr_rag.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud
from hr_rag.boundary.db.CRUD.organization_crud import OrganizationCRUD, organization_crud

__all__ = [
    "BaseCRUD",
    "ChunkCRUD",
    "DocumentCRUD",
    "OrganizationCRUD",
    "chunk_crud",
    "document_crud",
    "organization_crud",
]
