"""
Vérification d'un film à partir de son code-barres.

Résout le code-barres en titre brut (UPCitemdb), nettoie ce titre puis délègue
la vérification à SearchOrchestrator. Un code-barres inconnu n'est pas une
erreur : il produit le verdict {found: false}.
"""

from shelfcheck.core.entities.library import SearchResult
from shelfcheck.core.ports.api_clients import IBarcodeLookup
from shelfcheck.logging_config import pipeline_logger
from shelfcheck.services.search import SearchOrchestrator
from shelfcheck.services.title_cleaner import TitleCleaner

logger = pipeline_logger("barcode")


class BarcodeCheckService:
    """Service de vérification par code-barres."""

    def __init__(
        self,
        barcode_lookup: IBarcodeLookup,
        cleaner: TitleCleaner,
        orchestrator: SearchOrchestrator,
    ) -> None:
        self._barcode_lookup = barcode_lookup
        self._cleaner = cleaner
        self._orchestrator = orchestrator

    async def check(self, barcode: str) -> SearchResult:
        """
        Vérifie si le film correspondant au code-barres est dans la vidéothèque.

        Seul le premier produit renvoyé par la base est exploité.

        Raises:
            BarcodeLookupError: La base de codes-barres est injoignable
            SearchFailedError: La recherche dans la vidéothèque a échoué
        """
        logger.info(f"Scan du code-barres: {barcode}")
        titles = await self._barcode_lookup.lookup(barcode)
        if not titles:
            logger.info(f"Code-barres inconnu: {barcode}")
            return SearchResult.not_found()

        search_title = self._cleaner.clean(titles[0])
        logger.info(f"Titre nettoye: '{search_title}'")
        return await self._orchestrator.search(search_title)
