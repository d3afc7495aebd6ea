"""
Document API endpoints.

Routes:
- POST /organizations/{id}/documents/presigned-url - Generate presigned URL for S3 upload
- POST /organizations/{id}/documents - Register uploaded file and schedule processing
- GET /organizations/{id}/documents - List documents (status/category/search filters)
- GET /organizations/{id}/documents/stats - Document counts by status
- GET /organizations/{id}/documents/{doc_id} - Get document
- PATCH /organizations/{id}/documents/{doc_id} - Update editorial fields
- DELETE /organizations/{id}/documents/{doc_id} - Delete document, blob, and chunks
- GET /organizations/{id}/documents/{doc_id}/chunks - List chunks in order
- POST /organizations/{id}/documents/{doc_id}/reprocess - Rebuild chunks

Dependencies: hr_rag.application.services, hr_rag.models
System role: Document HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from hr_rag.api.deps import get_document_processor, get_document_service
from hr_rag.api.routers.router_utils import (
    process_document_background,
    run_claimed_document_background,
    to_http_exception,
    validate_filename,
)
from hr_rag.application.services.document_service import DocumentService
from hr_rag.boundary.db.models import PublicationStatus
from hr_rag.core.document_processing.entrypoint import DocumentProcessor
from hr_rag.core.exceptions import HRAssistantException
from hr_rag.models.document import (
    DocumentChunkResponse,
    DocumentChunksResponse,
    DocumentListResponse,
    DocumentResponse,
    DocumentStats,
    PresignedUrlRequest,
    PresignedUrlResponse,
    RegisterDocumentRequest,
    ReprocessResponse,
    UpdateDocumentRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/organizations/{organization_id}/documents", tags=["documents"])


@router.post("/presigned-url", response_model=PresignedUrlResponse)
async def create_presigned_upload_url(
    organization_id: UUID,
    request: PresignedUrlRequest,
    document_service: DocumentService = Depends(get_document_service),
) -> PresignedUrlResponse:
    """
    Generate presigned URL for direct S3 upload.

    The frontend uploads the file with this URL, then registers it with
    POST /documents using the returned s3_key.

    Raises:
        HTTPException(400): Invalid filename or unsupported file type
        HTTPException(404): Organization not found
        HTTPException(500): Failed to generate URL
    """
    try:
        validate_filename(request.filename, request.content_type)
        return await document_service.create_presigned_upload(
            organization_id,
            filename=request.filename,
            content_type=request.content_type,
        )
    except HRAssistantException as e:
        raise to_http_exception(e) from e


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def register_document(
    organization_id: UUID,
    request: RegisterDocumentRequest,
    background_tasks: BackgroundTasks,
    document_service: DocumentService = Depends(get_document_service),
    processor: DocumentProcessor = Depends(get_document_processor),
) -> DocumentResponse:
    """
    Register an uploaded file and schedule background processing.

    Returns as soon as the document row exists; processing_status moves
    from pending to processing and then completed or failed.

    Raises:
        HTTPException(400): Unsupported file type or invalid object key
        HTTPException(404): Organization not found
    """
    try:
        document = await document_service.register_upload(organization_id, request)
    except HRAssistantException as e:
        raise to_http_exception(e) from e

    background_tasks.add_task(process_document_background, processor, document.id)

    logger.info(
        "Document registered, processing scheduled",
        extra={"organization_id": str(organization_id), "document_id": str(document.id)},
    )
    return DocumentResponse.model_validate(document)


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    organization_id: UUID,
    status_filter: PublicationStatus | None = Query(default=None, alias="status"),
    category: str | None = None,
    search: str | None = None,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentListResponse:
    """List an organization's documents, newest first."""
    documents = await document_service.list_documents(
        organization_id,
        status=status_filter,
        category=category,
        search=search,
    )
    return DocumentListResponse(
        documents=[DocumentResponse.model_validate(doc) for doc in documents],
        total=len(documents),
    )


@router.get("/stats", response_model=DocumentStats)
async def get_document_stats(
    organization_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentStats:
    """Document counts by publication status and processing status."""
    return await document_service.get_stats(organization_id)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    organization_id: UUID,
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """
    Get one document.

    Raises:
        HTTPException(404): Document not found in this organization
    """
    try:
        document = await document_service.get_document(organization_id, document_id)
    except HRAssistantException as e:
        raise to_http_exception(e) from e
    return DocumentResponse.model_validate(document)


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    organization_id: UUID,
    document_id: UUID,
    request: UpdateDocumentRequest,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """
    Update title, description, category, tags, publication status, or enabled flag.

    Raises:
        HTTPException(404): Document not found in this organization
    """
    try:
        document = await document_service.update_document(organization_id, document_id, request)
    except HRAssistantException as e:
        raise to_http_exception(e) from e
    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    organization_id: UUID,
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
) -> None:
    """
    Delete a document with its stored file and chunks.

    Raises:
        HTTPException(404): Document not found in this organization
        HTTPException(500): Storage deletion failed
    """
    try:
        await document_service.delete_document(organization_id, document_id)
    except HRAssistantException as e:
        logger.warning(
            "Document deletion failed",
            extra={"document_id": str(document_id), "error": str(e)},
        )
        raise to_http_exception(e) from e


@router.get("/{document_id}/chunks", response_model=DocumentChunksResponse)
async def get_document_chunks(
    organization_id: UUID,
    document_id: UUID,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentChunksResponse:
    """
    List a document's chunks in index order.

    Raises:
        HTTPException(404): Document not found in this organization
    """
    try:
        chunks = await document_service.get_document_chunks(organization_id, document_id)
    except HRAssistantException as e:
        raise to_http_exception(e) from e
    return DocumentChunksResponse(
        document_id=document_id,
        chunks=[DocumentChunkResponse.model_validate(chunk) for chunk in chunks],
        total=len(chunks),
    )


@router.post(
    "/{document_id}/reprocess",
    response_model=ReprocessResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def reprocess_document(
    organization_id: UUID,
    document_id: UUID,
    background_tasks: BackgroundTasks,
    document_service: DocumentService = Depends(get_document_service),
    processor: DocumentProcessor = Depends(get_document_processor),
) -> ReprocessResponse:
    """
    Rebuild a completed or failed document's chunks.

    The claim happens before responding, so a document that is pending or
    already processing is rejected with 409 instead of queued.

    Raises:
        HTTPException(400): Unsupported file type
        HTTPException(404): Document not found in this organization
        HTTPException(409): Document is pending or processing
    """
    try:
        document = await document_service.reprocess_document(organization_id, document_id)
    except HRAssistantException as e:
        raise to_http_exception(e) from e

    background_tasks.add_task(run_claimed_document_background, processor, document_id)
    return ReprocessResponse(
        document_id=document_id,
        processing_status=document.processing_status,
    )

