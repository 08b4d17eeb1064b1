"""
Route de recherche directe dans la vidéothèque.

Contourne la normalisation TMDB : le terme est transmis tel quel (espaces
retirés) à Jellyfin et la liste brute des films est renvoyée.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...core.errors import LibraryIndexError
from ...logging_config import pipeline_logger
from ..schemas import CollectionSearchRequest

logger = pipeline_logger("collection")

router = APIRouter()


@router.post("/search-collection")
async def search_collection(request: Request, body: CollectionSearchRequest):
    """Liste les films de la vidéothèque correspondant au terme."""
    term = body.term.strip()
    logger.info(f"Recherche dans la collection: '{term}'")

    container = request.app.state.container
    try:
        items = await container.collection_matcher().search(term)
    except LibraryIndexError as e:
        logger.error(f"Erreur de recherche dans la collection: {e}")
        return JSONResponse(status_code=500, content={"error": "Library Search Failed"})

    logger.info(f"{len(items)} film(s) trouve(s)")
    return [item.to_dict() for item in items]
