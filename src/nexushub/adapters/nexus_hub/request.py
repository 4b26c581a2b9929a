"""Request builder: relative path + query parameters -> full request URL."""

from enum import Enum
from typing import Any, Mapping, Optional

import httpx

from nexushub.domain.errors import EncodingError
from nexushub.domain.models import EndpointDescriptor, Faction, Scalar

_ENCODABLE = (str, int, float, bool)


def build_request(
    relative_path: str,
    query_params: Optional[Mapping[str, Any]] = None,
) -> EndpointDescriptor:
    """Build an endpoint descriptor, dropping omitted parameters.

    Args:
        relative_path: Path relative to the API base URL (e.g. "crafting/professions").
        query_params: Parameter name to value. None and empty-string values are omitted.

    Returns:
        EndpointDescriptor with the path and the encodable parameters in order.

    Raises:
        EncodingError: If a parameter value is not a string, number, boolean or enum.
    """
    params: list[tuple[str, Scalar]] = []
    for name, value in (query_params or {}).items():
        if value is None or value == "":
            continue
        params.append((name, _encode_value(name, value)))

    return EndpointDescriptor(path=relative_path.lstrip("/"), params=tuple(params))


def build_url(base_url: str, descriptor: EndpointDescriptor) -> str:
    """Join the base URL, relative path and query string.

    No "?" is appended when the descriptor has no parameters.
    """
    url = base_url.rstrip("/") + "/" + descriptor.path
    if not descriptor.params:
        return url

    query = str(httpx.QueryParams(list(descriptor.params)))
    return f"{url}?{query}"


def realm_slug(server: str, faction: Faction | str) -> str:
    """Compose the "{server}-{faction}" path segment.

    Both parts are used as given; only a Faction member is reduced to its value.
    """
    if isinstance(faction, Enum):
        faction = faction.value
    return f"{server}-{faction}"


def _encode_value(name: str, value: Any) -> Scalar:
    """Reduce a parameter value to something httpx encodes predictably."""
    if isinstance(value, Enum):
        value = value.value
    # bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(name, value) from e
        return value
    if isinstance(value, _ENCODABLE):
        return value
    raise EncodingError(name, value)
