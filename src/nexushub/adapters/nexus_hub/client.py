"""Nexus Hub API client covering every endpoint."""

from nexushub.adapters.nexus_hub.content import ContentClient
from nexushub.adapters.nexus_hub.crafting import CraftingClient
from nexushub.adapters.nexus_hub.items import ItemsClient
from nexushub.adapters.nexus_hub.search import SearchClient
from nexushub.ports.nexus_hub import NexusHubPort


class NexusHubClient(CraftingClient, ItemsClient, ContentClient, SearchClient, NexusHubPort):
    """Client for the World of Warcraft Classic portion of the Nexus Hub API.

    This adapter implements the NexusHubPort interface by combining the
    specialized endpoint clients.

    Usage:
        async with NexusHubClient() as client:
            phase = await client.phase()
            item = await client.item(22265)
            if isinstance(item, NotFound):
                print(item.reason)
    """
