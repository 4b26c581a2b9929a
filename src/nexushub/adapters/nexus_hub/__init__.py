"""Nexus Hub API adapters for World of Warcraft Classic data."""

from nexushub.adapters.nexus_hub.base import NexusHubAPIClient
from nexushub.adapters.nexus_hub.client import NexusHubClient
from nexushub.adapters.nexus_hub.content import ContentClient
from nexushub.adapters.nexus_hub.crafting import CraftingClient
from nexushub.adapters.nexus_hub.items import ItemsClient
from nexushub.adapters.nexus_hub.normalizer import normalize_keys, normalize_response
from nexushub.adapters.nexus_hub.request import build_request, build_url, realm_slug
from nexushub.adapters.nexus_hub.search import SearchClient

__all__ = [
    # Base client
    "NexusHubAPIClient",
    # Specialized clients
    "CraftingClient",
    "ItemsClient",
    "ContentClient",
    "SearchClient",
    # Combined client
    "NexusHubClient",
    # Request/response pipeline
    "build_request",
    "build_url",
    "realm_slug",
    "normalize_keys",
    "normalize_response",
]
