"""Domain models representing core Nexus Hub entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from nexushub.domain.errors import NotFoundError


class Faction(str, Enum):
    """Auction house factions."""

    ALLIANCE = "alliance"
    HORDE = "horde"


class FieldKey(str, Enum):
    """Allow-listed API field names.

    JSON keys matching one of these values are replaced by the member during
    normalization. Members hash and compare like their string value, so
    ``data["itemId"]`` and ``data[FieldKey.ITEM_ID]`` read the same entry.
    """

    IMG_URL = "imgUrl"
    TYPE = "type"
    CATEGORIES = "categories"
    CONTENT = "content"
    GUID = "guid"
    ISO_DATE = "isoDate"
    LINK = "link"
    PUB_DATE = "pubDate"
    TITLE = "title"
    REGION = "region"
    SLUG = "slug"
    REAGENT_FOR = "reagentFor"
    CREATED_BY = "createdBy"
    ERROR = "error"
    REASON = "reason"
    RECIPES = "recipes"
    REQUIRED_SKILL = "requiredSkill"
    AMOUNT = "amount"
    CATEGORY = "category"
    CREATED_BY_COSTS = "createdByCosts"
    ITEM_PROFIT = "itemProfit"
    PROFIT = "profit"
    REAGENTS = "reagents"
    CONTENT_PHASE = "contentPhase"
    DESCRIPTION = "description"
    RELEASE_DATE = "releaseDate"
    SCANNED_AT = "scannedAt"
    ICON = "icon"
    ITEM_ID = "itemId"
    ITEM_LEVEL = "itemLevel"
    ITEM_LINK = "itemLink"
    NAME = "name"
    REQUIRED_LEVEL = "requiredLevel"
    SELL_PRICE = "sellPrice"
    SERVER = "server"
    STATS = "stats"
    CURRENT = "current"
    HISTORICAL_VALUE = "historicalValue"
    MARKET_VALUE = "marketValue"
    MIN_BUYOUT = "minBuyout"
    NUM_AUCTIONS = "numAuctions"
    QUANTITY = "quantity"
    LAST_UPDATED = "lastUpdated"
    PREVIOUS = "previous"
    TAGS = "tags"
    TOOLTIP = "tooltip"
    UNIQUE_NAME = "uniqueName"
    VENDOR_PRICE = "vendorPrice"
    FORMAT = "format"
    LABEL = "label"

    @classmethod
    def lookup(cls, key: str) -> Optional["FieldKey"]:
        """Return the member for an exact field name, or None."""
        return _FIELD_KEYS.get(key)


# Built once at import, never mutated.
_FIELD_KEYS: dict[str, FieldKey] = {member.value: member for member in FieldKey}


Scalar = Union[str, int, float, bool]


@dataclass(frozen=True)
class EndpointDescriptor:
    """Relative path plus the query parameters of one API call."""

    path: str
    params: tuple[tuple[str, Scalar], ...] = field(default_factory=tuple)

    @property
    def query(self) -> dict[str, Scalar]:
        """Query parameters as an ordered mapping."""
        return dict(self.params)


@dataclass(frozen=True)
class NotFound:
    """Returned instead of data when the API answers 404 with a reason."""

    reason: str

    def raise_error(self) -> None:
        """Raise the reason as a NotFoundError."""
        raise NotFoundError(self.reason)


@dataclass(frozen=True)
class PriceSnapshot:
    """One point of an item's price history."""

    scanned_at: datetime
    market_value: Optional[int] = None
    min_buyout: Optional[int] = None
    quantity: Optional[int] = None
    historical_value: Optional[int] = None
    num_auctions: Optional[int] = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "PriceSnapshot":
        """Create a PriceSnapshot from a normalized price record."""
        scanned_at = data["scannedAt"]
        return cls(
            scanned_at=datetime.fromisoformat(scanned_at.replace("Z", "+00:00")),
            market_value=data.get("marketValue"),
            min_buyout=data.get("minBuyout"),
            quantity=data.get("quantity"),
            historical_value=data.get("historicalValue"),
            num_auctions=data.get("numAuctions"),
        )
