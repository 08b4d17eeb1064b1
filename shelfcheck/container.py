"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
La configuration est chargee une seule fois puis partagee en lecture seule.
"""

from dependency_injector import containers, providers

from .adapters.api.jellyfin_client import JellyfinClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.api.upc_client import UPCItemDBClient
from .config import Settings
from .services.barcode_check import BarcodeCheckService
from .services.collection_matcher import CollectionMatcher
from .services.normalizer import TitleNormalizer
from .services.search import SearchOrchestrator
from .services.title_cleaner import TitleCleaner


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        orchestrator = container.search_orchestrator()
        result = await orchestrator.search("Inception")
        await close_clients(container)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Clients API - Singleton pour partager le pool de connexions
    # Si tmdb_api_key est None, le client est cree mais desactive
    # (TitleNormalizer verifie client.enabled avant utilisation)
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        timeout=config.provided.http_timeout,
    )

    jellyfin_client = providers.Singleton(
        JellyfinClient,
        base_url=config.provided.jellyfin_url,
        api_key=config.provided.jellyfin_api_key,
        timeout=config.provided.http_timeout,
    )

    upc_client = providers.Singleton(
        UPCItemDBClient,
        timeout=config.provided.http_timeout,
    )

    # Services sans etat - Singletons
    title_cleaner = providers.Singleton(
        TitleCleaner,
        junk_pattern=config.provided.junk_keywords,
    )

    title_normalizer = providers.Singleton(
        TitleNormalizer,
        client=tmdb_client,
        language=config.provided.tmdb_language,
    )

    collection_matcher = providers.Singleton(
        CollectionMatcher,
        library=jellyfin_client,
    )

    search_orchestrator = providers.Singleton(
        SearchOrchestrator,
        normalizer=title_normalizer,
        matcher=collection_matcher,
    )

    barcode_check_service = providers.Singleton(
        BarcodeCheckService,
        barcode_lookup=upc_client,
        cleaner=title_cleaner,
        orchestrator=search_orchestrator,
    )


async def close_clients(container) -> None:
    """Ferme les clients HTTP du container (a appeler a l'arret)."""
    await container.tmdb_client().close()
    await container.jellyfin_client().close()
    await container.upc_client().close()
