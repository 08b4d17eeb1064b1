"""
Tests for CollectionMatcher - first-item library matching.
"""

from unittest.mock import MagicMock

import pytest

from shelfcheck.core.entities.library import LibraryItem
from shelfcheck.core.errors import LibraryIndexError
from shelfcheck.services.collection_matcher import MOVIE_ITEM_TYPE, CollectionMatcher


@pytest.fixture
def matcher(mock_library: MagicMock) -> CollectionMatcher:
    return CollectionMatcher(library=mock_library)


class TestMatch:
    """Tests for CollectionMatcher.match()."""

    @pytest.mark.asyncio
    async def test_returns_first_item(self, matcher: CollectionMatcher, mock_library: MagicMock) -> None:
        """Le premier item gagne, meme en cas d'homonymes d'annees differentes."""
        mock_library.search_items.return_value = [
            LibraryItem(title="Alien", year=1979, id="a"),
            LibraryItem(title="Alien", year=2003, id="b"),
        ]

        item = await matcher.match("Alien")

        assert item == LibraryItem(title="Alien", year=1979, id="a")
        mock_library.search_items.assert_awaited_once_with("Alien", item_type=MOVIE_ITEM_TYPE)

    @pytest.mark.asyncio
    async def test_returns_none_on_empty_library(self, matcher: CollectionMatcher) -> None:
        assert await matcher.match("Inception") is None

    @pytest.mark.asyncio
    async def test_propagates_library_errors(
        self, matcher: CollectionMatcher, mock_library: MagicMock
    ) -> None:
        mock_library.search_items.side_effect = LibraryIndexError("HTTP 500")

        with pytest.raises(LibraryIndexError):
            await matcher.match("Inception")


class TestSearch:
    """Tests for CollectionMatcher.search()."""

    @pytest.mark.asyncio
    async def test_returns_raw_list(self, matcher: CollectionMatcher, mock_library: MagicMock) -> None:
        items = [LibraryItem(title="Heat", year=1995, id="1"), LibraryItem(title="Heat 2", id="2")]
        mock_library.search_items.return_value = items

        assert await matcher.search("Heat") == items
