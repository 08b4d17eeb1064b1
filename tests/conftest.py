"""
Fixtures pytest partagees pour les tests ShelfCheck.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test (URLs factices, log dans tmp_path)
- Mocks des ports (IMetadataClient, ILibraryIndex, IBarcodeLookup)
- Container DI branche sur les Settings de test
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers

from shelfcheck.config import Settings
from shelfcheck.container import Container
from shelfcheck.core.ports.api_clients import (
    IBarcodeLookup,
    ILibraryIndex,
    IMetadataClient,
)

JELLYFIN_TEST_URL = "http://jellyfin.test"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec TMDB active et un Jellyfin factice."""
    return Settings(
        jellyfin_url=JELLYFIN_TEST_URL,
        jellyfin_api_key="jellyfin_test_key",
        tmdb_api_key="test_api_key",
        tmdb_language="en-US",
        junk_keywords="edition|bluray|dvd",
        http_timeout=5.0,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def container(test_settings: Settings) -> Container:
    """Container DI dont la configuration est remplacee par test_settings."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    return container


@pytest.fixture
def mock_metadata_client() -> MagicMock:
    """
    Mock de IMetadataClient.

    Active par defaut, sans resultat de recherche. Configurer search et
    get_title dans chaque test.
    """
    client = MagicMock(spec=IMetadataClient)
    client.enabled = True
    client.search = AsyncMock(return_value=[])
    client.get_title = AsyncMock(return_value="")
    return client


@pytest.fixture
def mock_library() -> MagicMock:
    """Mock de ILibraryIndex, vidéothèque vide par defaut."""
    library = MagicMock(spec=ILibraryIndex)
    library.search_items = AsyncMock(return_value=[])
    return library


@pytest.fixture
def mock_barcode_lookup() -> MagicMock:
    """Mock de IBarcodeLookup, code-barres inconnu par defaut."""
    lookup = MagicMock(spec=IBarcodeLookup)
    lookup.lookup = AsyncMock(return_value=[])
    return lookup
