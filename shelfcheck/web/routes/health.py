"""Route de supervision."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Indique que le service répond et si la normalisation TMDB est active."""
    container = request.app.state.container
    return {"status": "ok", "normalization": container.title_normalizer().enabled}
