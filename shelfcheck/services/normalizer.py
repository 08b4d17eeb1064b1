"""
Normalisation des titres via le service de métadonnées (TMDB).

Le titre candidat (nettoyé ou saisi) est remplacé par le titre canonique du
film correspondant, dans la langue cible de la vidéothèque. La normalisation
est un enrichissement optionnel : tout échec retombe sur le titre candidat.

Sélection du film :
- par défaut, le premier résultat (classement TMDB)
- un résultat dont le titre est égal au candidat (casse ignorée) est prioritaire
"""

from typing import Optional

from shelfcheck.core.entities.title import NormalizationStatus, NormalizedTitle
from shelfcheck.core.ports.api_clients import IMetadataClient, MetadataCandidate
from shelfcheck.logging_config import pipeline_logger

logger = pipeline_logger("normalize")


def select_candidate(query: str, candidates: list[MetadataCandidate]) -> MetadataCandidate:
    """
    Choisit le candidat à retenir parmi une liste non vide.

    Une correspondance exacte (casse ignorée) l'emporte sur le classement ;
    sinon le premier candidat est retenu. Pas de classement plus fin.
    """
    wanted = query.lower()
    for candidate in candidates:
        if candidate.title.lower() == wanted:
            return candidate
    return candidates[0]


class TitleNormalizer:
    """
    Service de normalisation des titres.

    Example:
        normalizer = TitleNormalizer(client=tmdb_client, language="de-DE")
        result = await normalizer.resolve("Inception")
        if result.is_fallback:
            ...
    """

    def __init__(
        self,
        client: Optional[IMetadataClient],
        language: str = "en-US",
    ) -> None:
        """
        Initialise le normaliseur.

        Args:
            client: Client de métadonnées (None ou sans clé = normalisation désactivée)
            language: Langue des titres canoniques
        """
        self._client = client
        self._language = language

    @property
    def enabled(self) -> bool:
        """Vrai si un service de métadonnées est configuré."""
        return self._client is not None and self._client.enabled

    async def resolve(self, candidate: str) -> NormalizedTitle:
        """
        Résout le titre canonique d'un candidat.

        Ne lève jamais : un échec du service (réseau, timeout, réponse
        invalide) donne un NormalizedTitle de statut FAILED portant le
        titre candidat inchangé.

        Args:
            candidate: Titre à normaliser

        Returns:
            NormalizedTitle avec le titre retenu et l'issue de la normalisation
        """
        if not self.enabled:
            return NormalizedTitle(candidate, NormalizationStatus.SKIPPED)

        try:
            results = await self._client.search(candidate)
            if not results:
                logger.info(f"Aucun resultat TMDB pour: {candidate}")
                return NormalizedTitle(candidate, NormalizationStatus.NO_MATCH)

            chosen = select_candidate(candidate, results)
            title = await self._client.get_title(chosen.id, self._language)
        except Exception as e:
            logger.warning(
                f"Erreur TMDB pour '{candidate}', titre d'origine conserve: {e}"
            )
            return NormalizedTitle(candidate, NormalizationStatus.FAILED, error=str(e))

        logger.info(f"Titre TMDB ({self._language}): '{title}'")
        return NormalizedTitle(title, NormalizationStatus.NORMALIZED)

    async def normalize(self, candidate: str) -> str:
        """Retourne directement le titre retenu (canonique ou candidat)."""
        return (await self.resolve(candidate)).title
