"""Async client for the World of Warcraft Classic Nexus Hub API."""

from nexushub.adapters.nexus_hub import NexusHubClient
from nexushub.config import Config, NexusHubConfig, load_config
from nexushub.domain import (
    DecodeError,
    EncodingError,
    Faction,
    FieldKey,
    NexusHubError,
    NotFound,
    NotFoundError,
    UnexpectedResponseError,
)

__all__ = [
    "NexusHubClient",
    "Config",
    "NexusHubConfig",
    "load_config",
    "Faction",
    "FieldKey",
    "NotFound",
    "NexusHubError",
    "EncodingError",
    "DecodeError",
    "UnexpectedResponseError",
    "NotFoundError",
]
