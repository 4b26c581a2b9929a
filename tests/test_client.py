import httpx
import pytest

from nexushub.adapters.nexus_hub import NexusHubClient
from nexushub.config import NexusHubConfig
from nexushub.domain import EncodingError, Faction, FieldKey, NotFound, NotFoundError

BASE = "https://api.nexushub.co/wow-classic/v1/"

PHASES = [
    {"contentPhase": 1, "description": "Karazhan, Gruul's and Magtheridon's Lair", "releaseDate": "2021-06-01T00:00:00.000Z"},
    {"contentPhase": 2, "description": "Serpent Shrine Cavern and Tempest Keep", "releaseDate": None},
    {"contentPhase": 3, "description": "Battle for Mount Hyjal and Black Temple", "releaseDate": None},
]


@pytest.mark.asyncio
async def test_active_phase_end_to_end(make_client, json_handler):
    client, transport = make_client(json_handler(PHASES[0]))

    async with client:
        phase = await client.phase()

    assert str(transport.requests[0].url) == f"{BASE}content/active"
    assert phase == {
        "contentPhase": 1,
        "description": "Karazhan, Gruul's and Magtheridon's Lair",
        "releaseDate": "2021-06-01T00:00:00.000Z",
    }
    assert set(phase) == {FieldKey.CONTENT_PHASE, FieldKey.DESCRIPTION, FieldKey.RELEASE_DATE}
    assert isinstance(phase["contentPhase"], int)


@pytest.mark.asyncio
async def test_phase_by_number_filters_all_phases(make_client, json_handler):
    client, transport = make_client(json_handler(PHASES))

    async with client:
        third = await client.phase(3)
        missing = await client.phase(6)

    assert third["description"] == "Battle for Mount Hyjal and Black Temple"
    assert missing is None
    assert all(r.url.path.endswith("/content") for r in transport.requests)


@pytest.mark.asyncio
async def test_item_not_found_returns_value(make_client, json_handler):
    client, transport = make_client(json_handler({"reason": "Item Not Found"}, status_code=404))

    async with client:
        result = await client.item(123456789)

    assert str(transport.requests[0].url) == f"{BASE}item/123456789"
    assert isinstance(result, NotFound)
    assert result.reason == "Item Not Found"
    with pytest.raises(NotFoundError, match="Item Not Found"):
        result.raise_error()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call, expected",
    [
        (lambda c: c.craftable(14530), "crafting/14530"),
        (lambda c: c.craftable(24261, "netherwind", "alliance"), "crafting/netherwind-alliance/24261"),
        (lambda c: c.professions(), "crafting/professions"),
        (lambda c: c.item(22265), "item/22265"),
        (lambda c: c.item(22844, "netherwind", Faction.HORDE), "items/netherwind-horde/22844"),
        (lambda c: c.items("netherwind", "alliance"), "items/netherwind-alliance"),
        (lambda c: c.item_prices(22844, "netherwind", "alliance"), "items/netherwind-alliance/22844/prices"),
        (lambda c: c.phases(), "content"),
        (lambda c: c.servers(), "servers/full"),
    ],
)
async def test_endpoint_paths(make_client, json_handler, call, expected):
    client, transport = make_client(json_handler([]))

    async with client:
        await call(client)

    assert str(transport.requests[0].url) == BASE + expected


@pytest.mark.asyncio
async def test_crafting_deals_query(make_client, json_handler):
    client, transport = make_client(json_handler([]))

    async with client:
        await client.crafting_deals("netherwind", "alliance", limit=1, skip=0, min_quantity=3)

    url = transport.requests[0].url
    assert url.path == "/wow-classic/v1/crafting/netherwind-alliance/deals"
    assert dict(url.params) == {"limit": "1", "skip": "0", "min_quantity": "3"}


@pytest.mark.asyncio
async def test_item_deals_passes_through_optional_params(make_client, json_handler):
    client, transport = make_client(json_handler([]))

    async with client:
        await client.item_deals("herod", "horde", limit=5, relative=True, compare_with="marketValue")
        await client.item_deals("herod", "horde")

    first, second = transport.requests
    assert dict(first.url.params) == {"limit": "5", "relative": "true", "compare_with": "marketValue"}
    assert str(second.url) == f"{BASE}items/herod-horde/deals"


@pytest.mark.asyncio
async def test_server_and_faction_fall_back_to_config(make_client, json_handler):
    config = NexusHubConfig(default_server="Whitemane", default_faction="horde")
    client, transport = make_client(json_handler([]), config=config)

    async with client:
        await client.crafting_deals()
        await client.item_deals(faction="alliance")

    assert transport.requests[0].url.path.endswith("/crafting/whitemane-horde/deals")
    assert transport.requests[1].url.path.endswith("/items/whitemane-alliance/deals")


@pytest.mark.asyncio
async def test_search_and_suggestions_query(make_client, json_handler):
    hits = [{"itemId": 11684, "name": "Ironfoe", "uniqueName": "ironfoe", "imgUrl": "x.jpg"}]
    client, transport = make_client(json_handler(hits))

    async with client:
        found = await client.search("Ironfow", 1, 0.8)
        await client.suggestions("devi", 3)

    assert found[0][FieldKey.IMG_URL] == "x.jpg"
    assert dict(transport.requests[0].url.params) == {"query": "Ironfow", "limit": "1", "threshold": "0.8"}
    assert transport.requests[1].url.path.endswith("/search/suggestions")
    assert dict(transport.requests[1].url.params) == {"query": "devi", "limit": "3"}


@pytest.mark.asyncio
async def test_news_and_latest_news(make_client):
    articles = [{"title": "First", "categories": ["TBC"]}, {"title": "Second", "categories": []}]

    def handler(request):
        limit = int(request.url.params["limit"])
        return httpx.Response(200, json=articles[:limit])

    client, transport = make_client(handler)

    async with client:
        news = await client.news(2)
        latest = await client.latest_news()

    assert [a["title"] for a in news] == ["First", "Second"]
    assert latest == {"title": "First", "categories": ["TBC"]}
    assert transport.requests[1].url.params["limit"] == "1"


@pytest.mark.asyncio
async def test_latest_news_empty(make_client, json_handler):
    client, _ = make_client(json_handler([]))

    async with client:
        assert await client.latest_news() is None


@pytest.mark.asyncio
async def test_encoding_error_sends_no_request(make_client, json_handler):
    client, transport = make_client(json_handler([]))

    async with client:
        with pytest.raises(EncodingError):
            await client.news(limit=[1, 2])

    assert transport.requests == []


@pytest.mark.asyncio
async def test_custom_base_url(make_client, json_handler):
    config = NexusHubConfig(api_base_url="http://localhost:8080/v1")
    client, transport = make_client(json_handler([]), config=config)

    async with client:
        await client.servers()

    assert str(transport.requests[0].url) == "http://localhost:8080/v1/servers/full"


@pytest.mark.asyncio
async def test_request_outside_context_raises():
    client = NexusHubClient()

    with pytest.raises(RuntimeError):
        await client.servers()


@pytest.mark.asyncio
async def test_external_http_client_is_not_closed(make_client, json_handler):
    client, _ = make_client(json_handler([]))
    http_client = client._client

    async with client:
        await client.servers()

    assert not http_client.is_closed
    await http_client.aclose()


@pytest.mark.asyncio
async def test_unencodable_query_sends_no_request(make_client, json_handler):
    client, transport = make_client(json_handler([]))

    async with client:
        with pytest.raises(EncodingError):
            await client.search("bad\ud800")

    assert transport.requests == []
