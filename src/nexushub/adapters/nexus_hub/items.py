"""Nexus Hub API client for item and pricing data."""

from typing import Any, Optional

from nexushub.adapters.nexus_hub.base import NexusHubAPIClient
from nexushub.domain.models import Faction, NotFound


class ItemsClient(NexusHubAPIClient):
    """Client for item details, item deals and price history.

    Usage:
        async with ItemsClient() as client:
            item = await client.item(22265)
            pricing = await client.item(22844, "netherwind", "alliance")
    """

    async def item(
        self,
        item_id: int,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
    ) -> dict[str, Any] | NotFound:
        """Get item details, with current and previous prices when a server is given.

        Args:
            item_id: The item ID.
            server: Server slug. Omit for realm-independent item data.
            faction: Faction; defaults to the configured faction.

        Returns:
            Item record, or NotFound (e.g. reason "Item Not Found").
        """
        if server is None:
            return await self._get(f"item/{item_id}")
        return await self._get(f"items/{self._realm(server, faction)}/{item_id}")

    async def items(
        self,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
    ) -> list[dict[str, Any]] | NotFound:
        """Get the item overview of a realm."""
        return await self._get(f"items/{self._realm(server, faction)}")

    async def item_deals(
        self,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        min_quantity: Optional[int] = None,
        relative: Optional[bool] = None,
        compare_with: Optional[str] = None,
    ) -> list[dict[str, Any]] | NotFound:
        """Get items currently listed below their usual value.

        ``relative`` and ``compare_with`` are passed through to the API as-is.

        Args:
            server: Server slug; defaults to the configured server.
            faction: Faction; defaults to the configured faction.
            limit: Maximum items to return.
            skip: Items to skip before returning.
            min_quantity: Minimum quantity on the auction house.
            relative: Rank deals by relative instead of absolute difference.
            compare_with: Value to compare the buyout against (e.g. "marketValue").

        Returns:
            List of deal records, or NotFound.
        """
        return await self._get(
            f"items/{self._realm(server, faction)}/deals",
            params={
                "limit": limit,
                "skip": skip,
                "min_quantity": min_quantity,
                "relative": relative,
                "compare_with": compare_with,
            },
        )

    async def item_prices(
        self,
        item_id: int,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
    ) -> dict[str, Any] | NotFound:
        """Get the price history of an item on a realm.

        Args:
            item_id: The item ID.
            server: Server slug; defaults to the configured server.
            faction: Faction; defaults to the configured faction.

        Returns:
            Price history record whose "data" entry lists price snapshots, or NotFound.
        """
        return await self._get(f"items/{self._realm(server, faction)}/{item_id}/prices")
