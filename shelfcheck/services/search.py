"""
Orchestration de la vérification d'un titre.

SearchOrchestrator enchaîne la normalisation (TMDB) puis la recherche dans la
vidéothèque (Jellyfin), et produit le verdict SearchResult.

Gravité des échecs :
- TMDB en échec : dégradé, absorbé par TitleNormalizer, la recherche continue
- Jellyfin en échec : bloquant, SearchFailedError, aucun verdict partiel
"""

from shelfcheck.core.entities.library import SearchResult
from shelfcheck.core.errors import SearchFailedError
from shelfcheck.logging_config import pipeline_logger
from shelfcheck.services.collection_matcher import CollectionMatcher
from shelfcheck.services.normalizer import TitleNormalizer

logger = pipeline_logger("search")


class SearchOrchestrator:
    """
    Service de vérification d'un titre dans la vidéothèque.

    Example:
        orchestrator = SearchOrchestrator(normalizer=normalizer, matcher=matcher)
        result = await orchestrator.search("Inception")
        if result.in_collection:
            print(f"Déjà possédé: {result.match} ({result.year})")
    """

    def __init__(self, normalizer: TitleNormalizer, matcher: CollectionMatcher) -> None:
        self._normalizer = normalizer
        self._matcher = matcher

    async def search(self, candidate: str) -> SearchResult:
        """
        Vérifie si le film désigné par le titre est dans la vidéothèque.

        Args:
            candidate: Titre nettoyé (code-barres) ou saisi librement

        Returns:
            SearchResult avec found=True (in_collection vrai ou faux)

        Raises:
            SearchFailedError: La recherche dans la vidéothèque a échoué
        """
        normalized = await self._normalizer.resolve(candidate)
        title = normalized.title

        try:
            item = await self._matcher.match(title)
        except Exception as e:
            logger.error(f"Erreur de recherche dans la videotheque pour '{title}': {e}")
            raise SearchFailedError(f"Recherche echouee pour '{title}'") from e

        if item is None:
            logger.info(f"Absent: '{title}'")
            return SearchResult.missing(title)

        logger.info(f"Trouve: '{item.title}'")
        return SearchResult.owned(title, item)
