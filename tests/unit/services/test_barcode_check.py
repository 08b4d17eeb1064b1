"""
Tests for BarcodeCheckService - barcode lookup, cleaning and delegation.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from shelfcheck.core.entities.library import SearchResult
from shelfcheck.core.errors import BarcodeLookupError
from shelfcheck.services.barcode_check import BarcodeCheckService
from shelfcheck.services.search import SearchOrchestrator
from shelfcheck.services.title_cleaner import TitleCleaner


@pytest.fixture
def mock_orchestrator() -> MagicMock:
    orchestrator = MagicMock(spec=SearchOrchestrator)
    orchestrator.search = AsyncMock(
        return_value=SearchResult.missing("Inception")
    )
    return orchestrator


@pytest.fixture
def service(mock_barcode_lookup: MagicMock, mock_orchestrator: MagicMock) -> BarcodeCheckService:
    return BarcodeCheckService(
        barcode_lookup=mock_barcode_lookup,
        cleaner=TitleCleaner(),
        orchestrator=mock_orchestrator,
    )


class TestBarcodeCheck:
    """Tests for BarcodeCheckService.check()."""

    @pytest.mark.asyncio
    async def test_unknown_barcode_is_not_found(
        self, service: BarcodeCheckService, mock_orchestrator: MagicMock
    ) -> None:
        result = await service.check("000000000000")

        assert result == SearchResult.not_found()
        assert result.to_response() == {"found": False}
        mock_orchestrator.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_first_title_is_cleaned_and_searched(
        self,
        service: BarcodeCheckService,
        mock_barcode_lookup: MagicMock,
        mock_orchestrator: MagicMock,
    ) -> None:
        mock_barcode_lookup.lookup.return_value = [
            "Inception (2010) [Director's Cut]",
            "Inception - Bluray",
        ]

        result = await service.check("883929106196")

        mock_barcode_lookup.lookup.assert_awaited_once_with("883929106196")
        mock_orchestrator.search.assert_awaited_once_with("Inception")
        assert result == SearchResult.missing("Inception")

    @pytest.mark.asyncio
    async def test_lookup_failure_propagates(
        self, service: BarcodeCheckService, mock_barcode_lookup: MagicMock
    ) -> None:
        mock_barcode_lookup.lookup.side_effect = BarcodeLookupError("HTTP 429")

        with pytest.raises(BarcodeLookupError):
            await service.check("883929106196")
