"""Use case for collecting the price history of several items."""

import asyncio
import logging
from typing import Optional

import pandas as pd

from nexushub.domain.models import Faction, NotFound
from nexushub.ports.nexus_hub import NexusHubPort
from nexushub.usecases.data_transformers import PRICE_HISTORY_COLUMNS, price_history_to_dataframe

logger = logging.getLogger(__name__)


class CollectPriceHistoryUseCase:
    """Fetches price histories for a list of items and combines them.

    The use case is agnostic to the specific client implementation,
    relying on the NexusHubPort interface.

    Usage:
        async with NexusHubClient() as client:
            use_case = CollectPriceHistoryUseCase(client)
            df = await use_case.execute([22844, 14530], server="netherwind")
    """

    def __init__(self, nexus_hub: NexusHubPort):
        """Initialize the use case with the required port.

        Args:
            nexus_hub: Implementation of the NexusHubPort interface.
        """
        self.nexus_hub = nexus_hub

    async def fetch_price_histories(
        self,
        item_ids: list[int],
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
        max_concurrent: int = 5,
    ) -> dict[int, pd.DataFrame]:
        """Fetch price histories for multiple items concurrently.

        Items the API reports as not found are skipped.

        Args:
            item_ids: Item IDs to fetch.
            server: Server slug; defaults to the client's configured server.
            faction: Faction; defaults to the client's configured faction.
            max_concurrent: Maximum number of concurrent requests.

        Returns:
            Dictionary mapping item_id to its price history DataFrame.
        """
        semaphore = asyncio.Semaphore(max_concurrent)

        async def fetch_with_semaphore(item_id: int) -> tuple[int, Optional[pd.DataFrame]]:
            async with semaphore:
                history = await self.nexus_hub.item_prices(item_id, server, faction)
                if isinstance(history, NotFound):
                    logger.info("Skipping item %s: %s", item_id, history.reason)
                    return item_id, None
                return item_id, price_history_to_dataframe(history, item_id=item_id)

        # TaskGroup cancels the remaining fetches as soon as one fails
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(fetch_with_semaphore(item_id)) for item_id in item_ids]
        except ExceptionGroup as eg:
            raise eg.exceptions[0]

        results = [task.result() for task in tasks]
        return {item_id: df for item_id, df in results if df is not None}

    async def execute(
        self,
        item_ids: list[int],
        server: Optional[str] = None,
        faction: Optional[Faction | str] = None,
        max_concurrent: int = 5,
    ) -> pd.DataFrame:
        """Collect price histories into a single DataFrame.

        Returns:
            Combined DataFrame ordered by item_id then scanned_at; empty with
            the price history columns when nothing was found.
        """
        logger.info("Fetching price history for %d items", len(item_ids))
        histories = await self.fetch_price_histories(item_ids, server, faction, max_concurrent)
        logger.info("Found price history for %d of %d items", len(histories), len(item_ids))

        frames = [df for df in histories.values() if len(df) > 0]
        if not frames:
            return pd.DataFrame(columns=PRICE_HISTORY_COLUMNS)

        combined = pd.concat(frames, ignore_index=True)
        return combined.sort_values(["item_id", "scanned_at"], kind="stable").reset_index(drop=True)
