"""
Client Jellyfin pour la recherche dans la vidéothèque.

Implémente l'interface ILibraryIndex : recherche plein texte sur l'endpoint
/Items, récursive sur toute l'arborescence, restreinte à un type de média.

Usage:
    client = JellyfinClient(base_url="http://jellyfin:8096", api_key="xxx")
    items = await client.search_items("Inception")
    await client.close()
"""

from typing import Any, Optional

import httpx

from shelfcheck.adapters.api.request import request_json
from shelfcheck.core.entities.library import LibraryItem
from shelfcheck.core.errors import LibraryIndexError
from shelfcheck.core.ports.api_clients import ILibraryIndex


def _to_library_item(raw: dict[str, Any]) -> LibraryItem:
    """Convertit un item Jellyfin (Name, ProductionYear, Id) en LibraryItem."""
    year = raw.get("ProductionYear")
    return LibraryItem(
        title=raw["Name"],
        year=int(year) if year is not None else None,
        id=str(raw.get("Id", "")),
    )


class JellyfinClient(ILibraryIndex):
    """
    Client API Jellyfin.

    Un échec de l'index est une erreur bloquante (LibraryIndexError) :
    sans réponse de la vidéothèque, aucun verdict n'est possible.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialise le client Jellyfin.

        Args:
            base_url: URL du serveur Jellyfin (sans / final)
            api_key: Clé d'API Jellyfin
            timeout: Délai maximal par requête, en secondes
        """
        self._base_url = base_url
        self._api_key = api_key
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si nécessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            params = {"api_key": self._api_key} if self._api_key else {}
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def search_items(self, term: str, item_type: str = "Movie") -> list[LibraryItem]:
        """
        Recherche des items dans toute la vidéothèque.

        Args:
            term: Terme de recherche
            item_type: Type de média Jellyfin (défaut: Movie)

        Returns:
            Items dans l'ordre de pertinence de Jellyfin (vide si aucun)

        Raises:
            LibraryIndexError: Serveur injoignable, erreur HTTP ou réponse invalide
        """
        data = await request_json(
            self._get_client(),
            "GET",
            "/Items",
            error_cls=LibraryIndexError,
            params={
                "SearchTerm": term,
                "IncludeItemTypes": item_type,
                "Recursive": "true",
            },
        )

        try:
            return [_to_library_item(raw) for raw in data["Items"]]
        except (KeyError, TypeError, ValueError) as e:
            raise LibraryIndexError(f"Réponse Jellyfin invalide: {e!r}") from e

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
