"""Nexus Hub API client for item search."""

from typing import Any

from nexushub.adapters.nexus_hub.base import NexusHubAPIClient
from nexushub.domain.models import NotFound


class SearchClient(NexusHubAPIClient):
    """Client for fuzzy item search and autocomplete suggestions.

    Usage:
        async with SearchClient() as client:
            hits = await client.search("Ironfow", limit=1, threshold=0.8)
    """

    async def search(
        self,
        query: str,
        limit: int = 10,
        threshold: float = 0.4,
    ) -> list[dict[str, Any]] | NotFound:
        """Fuzzy item search.

        Args:
            query: Search text; misspellings are tolerated.
            limit: Maximum results to return.
            threshold: Match threshold between 0 and 1.

        Returns:
            List of item hits (itemId, name, uniqueName, imgUrl), or NotFound.
        """
        return await self._get(
            "search",
            params={"query": query, "limit": limit, "threshold": threshold},
        )

    async def suggestions(self, query: str, limit: int = 10) -> list[dict[str, Any]] | NotFound:
        """Prefix-based item suggestions for autocomplete."""
        return await self._get("search/suggestions", params={"query": query, "limit": limit})
