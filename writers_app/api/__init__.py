"""HTTP API routers."""

from writers_app.api.assistance import router as assistance_router
from writers_app.api.documents import router as documents_router
from writers_app.api.templates import router as templates_router

__all__ = [
    "assistance_router",
    "documents_router",
    "templates_router",
]
