"""
Rapprochement d'un titre avec la vidéothèque.

Le premier item renvoyé par l'index est considéré comme la correspondance :
la pertinence de Jellyfin fait foi, sans re-classement ni départage par année.
"""

from typing import Optional

from shelfcheck.core.entities.library import LibraryItem
from shelfcheck.core.ports.api_clients import ILibraryIndex

# Type de média Jellyfin interrogé
MOVIE_ITEM_TYPE = "Movie"


class CollectionMatcher:
    """
    Service de recherche dans la vidéothèque.

    Les erreurs de l'index (LibraryIndexError) ne sont pas absorbées :
    elles remontent à l'appelant.
    """

    def __init__(self, library: ILibraryIndex) -> None:
        self._library = library

    async def search(self, term: str) -> list[LibraryItem]:
        """Liste brute des films correspondant au terme, sans normalisation."""
        return await self._library.search_items(term, item_type=MOVIE_ITEM_TYPE)

    async def match(self, title: str) -> Optional[LibraryItem]:
        """
        Retourne le film de la vidéothèque correspondant au titre.

        Args:
            title: Titre canonique à rechercher

        Returns:
            Premier item renvoyé par l'index, ou None si aucun
        """
        items = await self.search(title)
        return items[0] if items else None
