"""Document API routes.

CRUD over the document store plus export, statistics, recent documents
and word count goal progress.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status

from writers_app.api.deps import get_writers_app
from writers_app.api.schemas import (
    DocumentCreate,
    DocumentListResponse,
    DocumentProgress,
    DocumentUpdate,
    ExportResponse,
)
from writers_app.interfaces.exporter import ExportFormat
from writers_app.services.workspace import AppStatistics, WritersApp
from writers_app.strategies.stores.models import Document
from writers_app.strategies.template_engine.models import TemplateCategory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


# =============================================================================
# Aggregate Endpoints
# =============================================================================


@router.get("/statistics", response_model=AppStatistics)
async def get_statistics(
    writers_app: WritersApp = Depends(get_writers_app),
) -> AppStatistics:
    return writers_app.get_statistics()


@router.get("/recent", response_model=DocumentListResponse)
async def list_recent_documents(
    limit: int = Query(default=10, ge=1, le=100),
    writers_app: WritersApp = Depends(get_writers_app),
) -> DocumentListResponse:
    documents = writers_app.documents.recent(limit)
    return DocumentListResponse(documents=documents, total=len(documents))


@router.get("/progress", response_model=list[DocumentProgress])
async def list_progress(
    writers_app: WritersApp = Depends(get_writers_app),
) -> list[DocumentProgress]:
    """Documents with a word count goal, highest progress first."""
    return [
        DocumentProgress(document=document, progress=progress)
        for document, progress in writers_app.documents.progress_by_goal()
    ]


# =============================================================================
# CRUD Endpoints
# =============================================================================


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    category: TemplateCategory | None = Query(default=None),
    q: str | None = Query(default=None, min_length=1, description="Search title or content"),
    writers_app: WritersApp = Depends(get_writers_app),
) -> DocumentListResponse:
    """List documents, most recently modified first."""
    if q is not None:
        documents = writers_app.documents.search(q)
        if category is not None:
            documents = [d for d in documents if d.category == category]
    elif category is not None:
        documents = writers_app.documents.list_by_category(category)
    else:
        documents = writers_app.documents.list_all()

    return DocumentListResponse(documents=documents, total=len(documents))


@router.post("", response_model=Document, status_code=status.HTTP_201_CREATED)
async def create_blank_document(
    payload: DocumentCreate,
    writers_app: WritersApp = Depends(get_writers_app),
) -> Document:
    return writers_app.create_blank_document(payload.title, payload.category)


@router.get("/{document_id}", response_model=Document)
async def get_document(
    document_id: uuid.UUID,
    writers_app: WritersApp = Depends(get_writers_app),
) -> Document:
    """Fetch a document and record that it was opened."""
    if writers_app.documents.get(document_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")

    writers_app.documents.mark_opened(document_id)
    return writers_app.documents.get(document_id)


@router.patch("/{document_id}", response_model=Document)
async def update_document(
    document_id: uuid.UUID,
    payload: DocumentUpdate,
    writers_app: WritersApp = Depends(get_writers_app),
) -> Document:
    document = writers_app.documents.get(document_id)
    if document is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")

    writers_app.documents.update(payload.apply(document))
    logger.info(f"Updated document {document_id}")
    return writers_app.documents.get(document_id)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: uuid.UUID,
    writers_app: WritersApp = Depends(get_writers_app),
) -> None:
    writers_app.documents.delete(document_id)


@router.get("/{document_id}/export", response_model=ExportResponse)
async def export_document(
    document_id: uuid.UUID,
    export_format: ExportFormat = Query(default=ExportFormat.MARKDOWN, alias="format"),
    writers_app: WritersApp = Depends(get_writers_app),
) -> ExportResponse:
    """Render a document as plain text, Markdown or HTML.

    Raises:
        DocumentNotFoundError: Mapped to 404 by the application handler.
    """
    content = writers_app.export_document(document_id, export_format)
    return ExportResponse(
        document_id=document_id,
        format=export_format.value,
        content=content,
    )
