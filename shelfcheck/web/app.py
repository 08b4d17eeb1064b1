"""
Application FastAPI de ShelfCheck.

Initialise l'application web avec le Container DI, monte les routes et
traduit les erreurs bloquantes du pipeline en réponses HTTP opaques.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..container import Container, close_clients
from ..core.errors import ShelfCheckError
from ..logging_config import pipeline_logger
from .routes.check import router as check_router
from .routes.collection import router as collection_router
from .routes.health import router as health_router

logger = pipeline_logger("web")


async def _shelfcheck_error_handler(request: Request, exc: ShelfCheckError) -> JSONResponse:
    """
    Réponse opaque 500 pour toute erreur du pipeline.

    Le détail amont (et la gravité) ne part que dans les logs.
    """
    logger.error(f"{request.method} {request.url.path} en echec ({exc.kind.value}): {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Server Error"},
    )


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI à utiliser (un nouveau est créé au démarrage si absent)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise le Container DI au démarrage et ferme les clients à l'arrêt."""
        app.state.container = container if container is not None else Container()
        yield
        await close_clients(app.state.container)

    app = FastAPI(title="ShelfCheck", lifespan=lifespan)
    app.add_exception_handler(ShelfCheckError, _shelfcheck_error_handler)

    app.include_router(check_router)
    app.include_router(collection_router)
    app.include_router(health_router)
    return app


app = create_app()
