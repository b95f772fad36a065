"""Template API routes.

Browse, search, add and delete templates, and render a template into a
stored document.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status

from writers_app.api.deps import get_writers_app
from writers_app.api.schemas import (
    RenderRequest,
    TemplateCreate,
    TemplateListResponse,
)
from writers_app.services.workspace import WritersApp
from writers_app.strategies.stores.models import Document
from writers_app.strategies.template_engine.models import Template, TemplateCategory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListResponse)
async def list_templates(
    category: TemplateCategory | None = Query(default=None),
    q: str | None = Query(default=None, min_length=1, description="Search name or description"),
    writers_app: WritersApp = Depends(get_writers_app),
) -> TemplateListResponse:
    """List templates sorted by name, optionally filtered.

    When both ``category`` and ``q`` are given, search results are
    narrowed to the category.
    """
    if q is not None:
        templates = writers_app.templates.search(q)
        if category is not None:
            templates = [t for t in templates if t.category == category]
    elif category is not None:
        templates = writers_app.templates.list_by_category(category)
    else:
        templates = writers_app.templates.list_all()

    return TemplateListResponse(templates=templates, total=len(templates))


@router.get("/{template_id}", response_model=Template)
async def get_template(
    template_id: uuid.UUID,
    writers_app: WritersApp = Depends(get_writers_app),
) -> Template:
    template = writers_app.templates.get(template_id)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return template


@router.post("", response_model=Template, status_code=status.HTTP_201_CREATED)
async def create_template(
    payload: TemplateCreate,
    writers_app: WritersApp = Depends(get_writers_app),
) -> Template:
    template = payload.to_template()
    writers_app.templates.add(template)
    logger.info(f"Added template {template.id} ('{template.name}')")
    return template


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
    template_id: uuid.UUID,
    writers_app: WritersApp = Depends(get_writers_app),
) -> None:
    writers_app.templates.delete(template_id)


@router.post(
    "/{template_id}/documents",
    response_model=Document,
    status_code=status.HTTP_201_CREATED,
)
async def create_document_from_template(
    template_id: uuid.UUID,
    payload: RenderRequest,
    writers_app: WritersApp = Depends(get_writers_app),
) -> Document:
    """Render a template into a new document.

    Required placeholders must have a non-empty value or a default.

    Raises:
        HTTPException: 404 for an unknown template, 422 when required
            values are missing.
    """
    template = writers_app.templates.get(template_id)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")

    missing = template.missing_required(payload.values)
    if missing:
        logger.warning(f"Rejected render of template {template_id}: missing {missing}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Missing required placeholder values: {', '.join(missing)}",
        )

    return writers_app.create_document_from_template(template_id, payload.values)
