"""Nexus Hub API client for content phases, servers and news."""

from typing import Any, Optional

from nexushub.adapters.nexus_hub.base import NexusHubAPIClient
from nexushub.domain.models import NotFound


class ContentClient(NexusHubAPIClient):
    """Client for general game data.

    Usage:
        async with ContentClient() as client:
            active = await client.phase()
            articles = await client.news(2)
    """

    async def phase(self, number: Optional[int] = None) -> Optional[dict[str, Any] | NotFound]:
        """Get the active content phase, or the phase with the given number.

        Args:
            number: Phase number. When omitted the active phase is returned.

        Returns:
            Phase record with contentPhase/description/releaseDate, or None
            when no phase has that number.
        """
        if number is None:
            return await self._get("content/active")

        phases = await self.phases()
        if isinstance(phases, NotFound):
            return phases
        return next((p for p in phases if p.get("contentPhase") == number), None)

    async def phases(self) -> list[dict[str, Any]] | NotFound:
        """Get all content phases."""
        return await self._get("content")

    async def servers(self) -> list[dict[str, Any]] | NotFound:
        """Get all servers with name, region and slug."""
        return await self._get("servers/full")

    async def news(self, limit: int = 4) -> list[dict[str, Any]] | NotFound:
        """Get the latest Wowhead news articles.

        Args:
            limit: Number of articles to return.
        """
        return await self._get("news", params={"limit": limit})

    async def latest_news(self) -> Optional[dict[str, Any] | NotFound]:
        """Get the single most recent news article, or None if there is none."""
        articles = await self.news(limit=1)
        if isinstance(articles, NotFound):
            return articles
        return articles[0] if articles else None
