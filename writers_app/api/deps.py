"""FastAPI dependencies for dependency injection.

The application instance lives on ``app.state`` so every FastAPI app
owns its own stores.
"""

import logging

from fastapi import HTTPException, Request, status

from writers_app.services.workspace import WritersApp

logger = logging.getLogger(__name__)


def get_writers_app(request: Request) -> WritersApp:
    """Dependency returning the WritersApp bound to this FastAPI app.

    Raises:
        HTTPException: If the application state was not initialized.
    """
    writers_app = getattr(request.app.state, "writers_app", None)
    if writers_app is None:
        logger.error("WritersApp missing from application state")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Application not initialized",
        )
    return writers_app
