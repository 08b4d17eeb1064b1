"""
Routes de vérification : par code-barres et par titre saisi.

Les deux routes renvoient le corps SearchResult. Les échecs bloquants
(ShelfCheckError) sont traduits en 500 par le handler de l'application.
"""

from fastapi import APIRouter, Request

from ...logging_config import pipeline_logger
from ..schemas import BarcodeCheckRequest, TitleCheckRequest

logger = pipeline_logger("web")

router = APIRouter()


@router.post("/check-barcode")
async def check_barcode(request: Request, body: BarcodeCheckRequest):
    """Vérifie le film correspondant à un code-barres scanné."""
    container = request.app.state.container
    result = await container.barcode_check_service().check(body.barcode)
    return result.to_response()


@router.post("/check-title")
async def check_title(request: Request, body: TitleCheckRequest):
    """Vérifie un titre saisi manuellement (sans nettoyage)."""
    logger.info(f"Recherche manuelle: {body.title}")
    container = request.app.state.container
    result = await container.search_orchestrator().search(body.title)
    return result.to_response()
