"""
Client TMDB pour la normalisation des titres de films.

Implemente l'interface IMetadataClient pour TMDB (The Movie Database):
- recherche de films par texte libre (classement TMDB conserve)
- recuperation du titre d'un film dans une langue donnee

Usage:
    client = TMDBClient(api_key="your_key")
    candidates = await client.search("Inception")
    title = await client.get_title(candidates[0].id, language="de-DE")
    await client.close()
"""

from typing import Optional

import httpx

from shelfcheck.adapters.api.request import request_json
from shelfcheck.core.errors import MetadataServiceError
from shelfcheck.core.ports.api_clients import IMetadataClient, MetadataCandidate


class TMDBClient(IMetadataClient):
    """
    Client API TMDB pour les titres de films.

    Toute erreur (reseau, timeout, statut HTTP, reponse mal formee) est
    convertie en MetadataServiceError, une erreur degradee que le
    normaliseur absorbe.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(self, api_key: Optional[str], timeout: float = 10.0) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API v3 ou Read Access Token v4 (None = client desactive)
            timeout: Delai maximal par requete, en secondes
        """
        self._api_key = api_key
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key or "") > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @property
    def enabled(self) -> bool:
        """Vrai si une cle API est configuree."""
        return bool(self._api_key)

    async def search(self, query: str) -> list[MetadataCandidate]:
        """
        Recherche des films par titre.

        La requete est envoyee sans langue : TMDB renvoie les titres dans sa
        langue par defaut, ce qui sert a la comparaison exacte avec le titre
        candidat.

        Args:
            query: Texte libre a rechercher

        Returns:
            Candidats dans l'ordre de pertinence TMDB (vide si aucun resultat)

        Raises:
            MetadataServiceError: Service injoignable ou reponse invalide
        """
        data = await request_json(
            self._get_client(),
            "GET",
            "/search/movie",
            error_cls=MetadataServiceError,
            params={"query": query},
        )

        try:
            results = data["results"]
            candidates = [
                MetadataCandidate(id=str(item["id"]), title=item["title"])
                for item in results
            ]
        except (KeyError, TypeError) as e:
            raise MetadataServiceError(f"Reponse de recherche TMDB invalide: {e!r}") from e

        # Un titre absent ou non textuel rendrait la comparaison exacte impossible
        if any(not isinstance(c.title, str) for c in candidates):
            raise MetadataServiceError("Reponse de recherche TMDB invalide: titre manquant")
        return candidates

    async def get_title(self, media_id: str, language: str) -> str:
        """
        Recupere le titre d'un film dans la langue demandee.

        Args:
            media_id: ID TMDB du film
            language: Etiquette de langue TMDB (ex: "en-US", "de-DE")

        Returns:
            Titre localise du film

        Raises:
            MetadataServiceError: Service injoignable, film inconnu ou reponse invalide
        """
        data = await request_json(
            self._get_client(),
            "GET",
            f"/movie/{media_id}",
            error_cls=MetadataServiceError,
            params={"language": language},
        )

        title = data.get("title") if isinstance(data, dict) else None
        if not isinstance(title, str) or not title:
            raise MetadataServiceError(f"Details TMDB sans titre pour le film {media_id}")
        return title

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
