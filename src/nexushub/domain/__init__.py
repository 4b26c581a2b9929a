"""Domain models for the Nexus Hub client."""

from nexushub.domain.errors import (
    DecodeError,
    EncodingError,
    NexusHubError,
    NotFoundError,
    UnexpectedResponseError,
)
from nexushub.domain.models import (
    EndpointDescriptor,
    Faction,
    FieldKey,
    NotFound,
    PriceSnapshot,
)

__all__ = [
    "EndpointDescriptor",
    "Faction",
    "FieldKey",
    "NotFound",
    "PriceSnapshot",
    "NexusHubError",
    "EncodingError",
    "DecodeError",
    "UnexpectedResponseError",
    "NotFoundError",
]
