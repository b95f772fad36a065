"""AI assistance API routes.

Every route here requires AI features to be enabled; ``AIDisabledError``
and ``TextGenerationError`` are mapped to HTTP responses by the
application exception handlers.
"""

import logging
import uuid

from fastapi import APIRouter, Depends

from writers_app.api.deps import get_writers_app
from writers_app.api.schemas import (
    AssistanceRequest,
    DocumentAssistanceRequest,
    GeneratedTextResponse,
    TitleSuggestionsResponse,
)
from writers_app.services.workspace import WritersApp
from writers_app.strategies.assistance.models import (
    AIResponse,
    DocumentAnalysis,
    WritingInsights,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assistance"])


@router.post("/assistance", response_model=AIResponse)
async def request_assistance(
    payload: AssistanceRequest,
    writers_app: WritersApp = Depends(get_writers_app),
) -> AIResponse:
    """Run one assistance request against free text."""
    logger.info(f"Assistance request: {payload.assistance.display_name}")
    return await writers_app.assist(payload.text, payload.assistance, payload.context)


@router.post("/documents/{document_id}/assistance/continue", response_model=GeneratedTextResponse)
async def continue_document(
    document_id: uuid.UUID,
    payload: DocumentAssistanceRequest,
    writers_app: WritersApp = Depends(get_writers_app),
) -> GeneratedTextResponse:
    """Generate a continuation, appending it to the document when ``apply`` is set."""
    continuation = await writers_app.continue_document(
        document_id,
        append_to_document=payload.apply,
        context=payload.context,
    )
    return GeneratedTextResponse(
        document_id=document_id,
        generated_content=continuation,
        applied=payload.apply,
    )


@router.post("/documents/{document_id}/assistance/improve", response_model=GeneratedTextResponse)
async def improve_document(
    document_id: uuid.UUID,
    payload: DocumentAssistanceRequest,
    writers_app: WritersApp = Depends(get_writers_app),
) -> GeneratedTextResponse:
    """Generate an improved version, replacing the content when ``apply`` is set."""
    improved = await writers_app.improve_document(
        document_id,
        replace_content=payload.apply,
        context=payload.context,
    )
    return GeneratedTextResponse(
        document_id=document_id,
        generated_content=improved,
        applied=payload.apply,
    )


@router.post("/documents/{document_id}/assistance/titles", response_model=TitleSuggestionsResponse)
async def suggest_titles(
    document_id: uuid.UUID,
    payload: DocumentAssistanceRequest,
    writers_app: WritersApp = Depends(get_writers_app),
) -> TitleSuggestionsResponse:
    titles = await writers_app.generate_document_titles(document_id, payload.context)
    return TitleSuggestionsResponse(document_id=document_id, titles=titles)


@router.post("/documents/{document_id}/assistance/analysis", response_model=DocumentAnalysis)
async def analyze_document(
    document_id: uuid.UUID,
    writers_app: WritersApp = Depends(get_writers_app),
) -> DocumentAnalysis:
    return await writers_app.analyze_document(document_id)


@router.post("/documents/{document_id}/assistance/insights", response_model=WritingInsights)
async def writing_insights(
    document_id: uuid.UUID,
    writers_app: WritersApp = Depends(get_writers_app),
) -> WritingInsights:
    return await writers_app.writing_insights(document_id)
