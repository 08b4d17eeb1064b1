"""
Client UPCitemdb pour la résolution des codes-barres.

Implémente l'interface IBarcodeLookup sur l'API d'essai publique
(https://api.upcitemdb.com/prod/trial/lookup). Seuls les titres bruts des
produits sont exploités.
"""

from typing import Optional

import httpx

from shelfcheck.adapters.api.request import request_json
from shelfcheck.core.errors import BarcodeLookupError
from shelfcheck.core.ports.api_clients import IBarcodeLookup


class UPCItemDBClient(IBarcodeLookup):
    """Client API UPCitemdb (offre d'essai, sans clé)."""

    UPC_BASE_URL = "https://api.upcitemdb.com/prod/trial"

    def __init__(self, timeout: float = 10.0) -> None:
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si nécessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.UPC_BASE_URL,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    async def lookup(self, barcode: str) -> list[str]:
        """
        Retourne les titres bruts des produits associés au code-barres.

        Args:
            barcode: Code UPC/EAN scanné

        Returns:
            Titres bruts dans l'ordre de la base (vide si code inconnu)

        Raises:
            BarcodeLookupError: Base injoignable, erreur HTTP ou réponse invalide
        """
        data = await request_json(
            self._get_client(),
            "GET",
            "/lookup",
            error_cls=BarcodeLookupError,
            params={"upc": barcode},
        )

        # La liste des produits fait foi, le compteur "total" est ignore
        try:
            titles = [item["title"] for item in data.get("items") or []]
        except (AttributeError, KeyError, TypeError) as e:
            raise BarcodeLookupError(f"Réponse UPCitemdb invalide: {e!r}") from e

        if any(not isinstance(title, str) for title in titles):
            raise BarcodeLookupError("Réponse UPCitemdb invalide: titre manquant")
        return titles

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
