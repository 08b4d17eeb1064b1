"""
Execution des requetes HTTP vers les API externes.

Aucune requete n'est relancee automatiquement : chaque appel aboutit ou
echoue une seule fois. Les erreurs de transport, les statuts HTTP en erreur
et les corps non JSON sont convertis en l'erreur typee fournie par
l'appelant (MetadataServiceError, LibraryIndexError, ...).

Usage:
    data = await request_json(
        client, "GET", "/search/movie",
        error_cls=MetadataServiceError,
        params={"query": "Inception"},
    )
"""

from typing import Any

import httpx

from shelfcheck.core.errors import ShelfCheckError


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    error_cls: type[ShelfCheckError],
    **kwargs,
) -> Any:
    """
    Execute une requete HTTP et retourne le corps JSON decode.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler (relative a base_url du client)
        error_cls: Erreur du domaine a lever en cas d'echec
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        Corps de la reponse decode depuis JSON

    Raises:
        error_cls: Timeout, erreur reseau, statut 4xx/5xx ou corps invalide
    """
    try:
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise error_cls(
            f"{method} {e.request.url.path} -> HTTP {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise error_cls(f"{method} {url} -> {type(e).__name__}: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise error_cls(f"{method} {url} -> reponse non JSON") from e
