"""
Data transformers - Convert normalized API results to DataFrames for analysis.

Normalized results keep the API's camelCase field names (as FieldKey members
or plain strings). The transformers here flatten them into pandas DataFrames
with snake_case columns and compact dtypes.
"""

import re
from enum import Enum
from typing import Any, Optional

import pandas as pd

from nexushub.domain.models import PriceSnapshot

PRICE_HISTORY_COLUMNS = [
    "item_id",
    "scanned_at",
    "market_value",
    "min_buyout",
    "quantity",
    "historical_value",
    "num_auctions",
]

_PRICE_COLUMNS = ["market_value", "min_buyout", "quantity", "historical_value", "num_auctions"]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


# =============================================================================
# Transformer Functions
# =============================================================================


def price_history_to_dataframe(
    history: dict[str, Any] | list[dict[str, Any]],
    item_id: Optional[int] = None,
) -> pd.DataFrame:
    """
    Convert an item price history response to a DataFrame.

    Args:
        history: Normalized response of the item prices endpoint. Either the
            record with a "data" list of snapshots, or the list itself.
        item_id: Item ID to stamp on every row. Taken from the record when omitted.

    Returns:
        DataFrame with one row per snapshot, ordered by scan time.
    """
    if isinstance(history, dict):
        records = history.get("data") or []
        if item_id is None:
            item_id = history.get("itemId")
    else:
        records = history

    rows = []
    for record in records:
        snapshot = PriceSnapshot.from_api_response(record)
        rows.append(
            {
                "item_id": item_id,
                "scanned_at": snapshot.scanned_at,
                "market_value": snapshot.market_value,
                "min_buyout": snapshot.min_buyout,
                "quantity": snapshot.quantity,
                "historical_value": snapshot.historical_value,
                "num_auctions": snapshot.num_auctions,
            }
        )

    df = pd.DataFrame(rows, columns=PRICE_HISTORY_COLUMNS)

    if len(df) > 0:
        df = _optimize_price_dtypes(df)
        df = df.sort_values("scanned_at", kind="stable").reset_index(drop=True)

    return df


def deals_to_dataframe(deals: list[dict[str, Any]]) -> pd.DataFrame:
    """
    Convert crafting or item deal records to a DataFrame.

    Nested values (reagents, recipes, amount ranges) are dropped; only
    scalar fields become columns.
    """
    df = pd.DataFrame([flatten_record(deal) for deal in deals])

    if "item_id" in df.columns:
        df["item_id"] = df["item_id"].astype("Int64")

    return df


def search_results_to_dataframe(hits: list[dict[str, Any]]) -> pd.DataFrame:
    """Convert search or suggestion hits to a DataFrame."""
    df = pd.DataFrame([flatten_record(hit) for hit in hits])

    if "type" in df.columns:
        df["type"] = df["type"].astype("category")

    return df


def flatten_record(record: dict[str, Any]) -> dict[str, Any]:
    """Keep the scalar fields of a normalized record under snake_case names."""
    return {
        to_snake_case(_plain_key(key)): value
        for key, value in record.items()
        if not isinstance(value, (dict, list))
    }


def to_snake_case(name: str) -> str:
    """Convert a camelCase API field name to snake_case."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _plain_key(key: Any) -> str:
    return key.value if isinstance(key, Enum) else str(key)


def _optimize_price_dtypes(df: pd.DataFrame) -> pd.DataFrame:
    """
    Optimize DataFrame column dtypes for price history.

    Uses:
    - nullable Int64 for item_id and every price/quantity column
    - UTC timestamps for scanned_at
    """
    df["item_id"] = df["item_id"].astype("Int64")
    df["scanned_at"] = pd.to_datetime(df["scanned_at"], utc=True)

    for column in _PRICE_COLUMNS:
        df[column] = df[column].astype("Int64")

    return df
