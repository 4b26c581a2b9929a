"""Nexus Hub API client for crafting data."""

from typing import Any, Optional

from nexushub.adapters.nexus_hub.base import NexusHubAPIClient
from nexushub.domain.models import Faction, NotFound


class CraftingClient(NexusHubAPIClient):
    """Client for crafting recipes, crafting deals and professions.

    Usage:
        async with CraftingClient() as client:
            bandage = await client.craftable(14530)
            deals = await client.crafting_deals("netherwind", "alliance", limit=5)
    """

    async def craftable(
        self,
        item_id: int,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
    ) -> dict[str, Any] | NotFound:
        """Get the reagents of an item and what it is a reagent for.

        Pricing is included when a server is given.

        Args:
            item_id: The item ID.
            server: Server slug (e.g. "netherwind"). Omit for price-less data.
            faction: Faction; defaults to the configured faction.

        Returns:
            Crafting record with createdBy/reagentFor, or NotFound.
        """
        if server is None:
            return await self._get(f"crafting/{item_id}")
        return await self._get(f"crafting/{self._realm(server, faction)}/{item_id}")

    async def crafting_deals(
        self,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        min_quantity: Optional[int] = None,
    ) -> list[dict[str, Any]] | NotFound:
        """Get craftables currently identified as profitable to craft.

        Args:
            server: Server slug; defaults to the configured server.
            faction: Faction; defaults to the configured faction.
            limit: Maximum items to return.
            skip: Items to skip before returning.
            min_quantity: Minimum quantity on the auction house.

        Returns:
            List of deal records, or NotFound.
        """
        return await self._get(
            f"crafting/{self._realm(server, faction)}/deals",
            params={"limit": limit, "skip": skip, "min_quantity": min_quantity},
        )

    async def professions(self) -> list[dict[str, Any]] | NotFound:
        """Get all professions with their icons."""
        return await self._get("crafting/professions")
