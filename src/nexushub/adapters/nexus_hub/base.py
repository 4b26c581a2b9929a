"""Base Nexus Hub API client with transport lifecycle and common utilities."""

import logging
from typing import Any, Mapping, Optional, Self

import httpx

from nexushub.adapters.nexus_hub.normalizer import normalize_response
from nexushub.adapters.nexus_hub.request import build_request, build_url, realm_slug
from nexushub.config.loader import NexusHubConfig
from nexushub.domain.models import Faction, NotFound

logger = logging.getLogger(__name__)


class NexusHubAPIClient:
    """Base client for the Nexus Hub WoW Classic API.

    This class provides the common functionality needed by all endpoint clients:
    - HTTP client lifecycle management
    - Request building against the configured base URL
    - Response normalization and 404 handling
    - Server/faction defaults

    Subclasses should implement specific API endpoints.

    Usage:
        class MyClient(NexusHubAPIClient):
            async def get_something(self) -> dict:
                return await self._get("something")
    """

    def __init__(
        self,
        config: Optional[NexusHubConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            config: API configuration. Defaults to NexusHubConfig().
            http_client: Optional externally managed transport. It is used
                as-is and never closed by this client.
        """
        self.config = config or NexusHubConfig()
        self.api_base = self.config.api_base_url
        self.default_server = self.config.default_server
        self.default_faction = self.config.default_faction

        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> Self:
        """Async context manager entry."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                headers={"User-Agent": self.config.user_agent},
            )
            self._owns_client = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _realm(self, server: Optional[str] = None, faction: Optional[Faction | str] = None) -> str:
        """Realm slug for the given or default server and faction."""
        return realm_slug(server or self.default_server, faction or self.default_faction)

    async def _get(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any | NotFound:
        """Make a GET request to the API.

        Args:
            endpoint: API path relative to the base URL (e.g., "crafting/14530").
            params: Query parameters; None values are omitted.

        Returns:
            Normalized JSON response, or NotFound for a 404 with a reason.
        """
        if self._client is None:
            raise RuntimeError("Client is not open; use 'async with' to open it")

        descriptor = build_request(endpoint, params)
        url = build_url(self.api_base, descriptor)

        logger.debug("GET %s", url)
        response = await self._client.get(url, timeout=self.config.timeout)
        logger.debug("%s %s", response.status_code, url)

        return normalize_response(response)
