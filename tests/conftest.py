"""Pytest fixtures for Nexus Hub client tests."""

import httpx
import pytest

from nexushub.adapters.nexus_hub import NexusHubClient
from nexushub.config import NexusHubConfig


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def make_client():
    """Build a NexusHubClient whose transport answers with the given handler."""

    def _make(handler, config: NexusHubConfig | None = None):
        transport = RecordingTransport(handler)
        client = NexusHubClient(
            config=config,
            http_client=httpx.AsyncClient(transport=transport),
        )
        return client, transport

    return _make


@pytest.fixture
def json_handler():
    """Handler factory returning the same JSON payload for every request."""

    def _handler(payload, status_code: int = 200):
        return lambda request: httpx.Response(status_code, json=payload)

    return _handler


@pytest.fixture
def price_history_payload():
    """Price history response as returned by items/{server}-{faction}/{itemId}/prices."""
    return {
        "slug": "netherwind-alliance",
        "itemId": 22844,
        "name": "Major Nature Protection Potion",
        "uniqueName": "major-nature-protection-potion-22844",
        "timerange": 7,
        "data": [
            {
                "marketValue": 1250807,
                "minBuyout": 1778000,
                "quantity": 5,
                "scannedAt": "2021-08-13T03:06:14.000Z",
            },
            {
                "marketValue": 1085116,
                "minBuyout": 1776000,
                "quantity": 10,
                "scannedAt": "2021-08-12T21:06:14.000Z",
            },
        ],
    }
