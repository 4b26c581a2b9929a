"""
Nexus Hub Port - Interface for fetching World of Warcraft Classic market data.

This port defines the contract for accessing the Nexus Hub API.
Every operation is a single request; results are normalized JSON trees
whose allow-listed keys are FieldKey members, or a NotFound value when
the API reports a missing resource.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from nexushub.domain.models import Faction, NotFound


class NexusHubPort(ABC):
    """
    Abstract interface for Nexus Hub API access.

    All methods are async so callers can run requests concurrently.
    The adapter is responsible for:
    - Building request URLs and query strings
    - Normalizing response keys
    - Mapping 404 responses to NotFound
    """

    # =========================================================================
    # Context Manager
    # =========================================================================

    @abstractmethod
    async def __aenter__(self) -> "NexusHubPort":
        """Enter async context - initialize HTTP client."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - cleanup HTTP client."""
        pass

    # =========================================================================
    # Crafting Methods
    # =========================================================================

    @abstractmethod
    async def craftable(
        self,
        item_id: int,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
    ) -> dict[str, Any] | NotFound:
        """
        Fetch the crafting tree of an item, priced when a server is given.

        Args:
            item_id: The item ID.
            server: Optional server slug.
            faction: Optional faction.

        Returns:
            Crafting record, or NotFound.
        """
        pass

    @abstractmethod
    async def crafting_deals(
        self,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        min_quantity: Optional[int] = None,
    ) -> list[dict[str, Any]] | NotFound:
        """
        Fetch craftables identified as profitable.

        Returns:
            List of deal records, or NotFound.
        """
        pass

    @abstractmethod
    async def professions(self) -> list[dict[str, Any]] | NotFound:
        """
        Fetch all professions.

        Returns:
            List of profession records.
        """
        pass

    # =========================================================================
    # Item Methods
    # =========================================================================

    @abstractmethod
    async def item(
        self,
        item_id: int,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
    ) -> dict[str, Any] | NotFound:
        """
        Fetch details for a specific item, with prices when a server is given.

        Returns:
            Item record, or NotFound.
        """
        pass

    @abstractmethod
    async def items(
        self,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
    ) -> list[dict[str, Any]] | NotFound:
        """
        Fetch the item overview of a realm.

        Returns:
            List of item records, or NotFound.
        """
        pass

    @abstractmethod
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
        """
        Fetch items listed below their usual value.

        Returns:
            List of deal records, or NotFound.
        """
        pass

    @abstractmethod
    async def item_prices(
        self,
        item_id: int,
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
    ) -> dict[str, Any] | NotFound:
        """
        Fetch the price history of an item on a realm.

        Returns:
            Price history record, or NotFound.
        """
        pass

    # =========================================================================
    # Content Methods
    # =========================================================================

    @abstractmethod
    async def phase(self, number: Optional[int] = None) -> Optional[dict[str, Any] | NotFound]:
        """
        Fetch the active content phase, or a phase by number.

        Returns:
            Phase record, or None if no phase has that number.
        """
        pass

    @abstractmethod
    async def phases(self) -> list[dict[str, Any]] | NotFound:
        """
        Fetch all content phases.

        Returns:
            List of phase records.
        """
        pass

    @abstractmethod
    async def servers(self) -> list[dict[str, Any]] | NotFound:
        """
        Fetch all servers.

        Returns:
            List of server records.
        """
        pass

    @abstractmethod
    async def news(self, limit: int = 4) -> list[dict[str, Any]] | NotFound:
        """
        Fetch the latest news articles.

        Returns:
            List of article records.
        """
        pass

    @abstractmethod
    async def latest_news(self) -> Optional[dict[str, Any] | NotFound]:
        """
        Fetch the most recent news article.

        Returns:
            Article record, or None if there are no articles.
        """
        pass

    # =========================================================================
    # Search Methods
    # =========================================================================

    @abstractmethod
    async def search(
        self,
        query: str,
        limit: int = 10,
        threshold: float = 0.4,
    ) -> list[dict[str, Any]] | NotFound:
        """
        Fuzzy search for items by name.

        Returns:
            List of item hits.
        """
        pass

    @abstractmethod
    async def suggestions(self, query: str, limit: int = 10) -> list[dict[str, Any]] | NotFound:
        """
        Prefix-based item suggestions.

        Returns:
            List of item hits.
        """
        pass
