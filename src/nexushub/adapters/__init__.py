"""Adapters (implementations) for the hexagonal architecture."""

from nexushub.adapters.nexus_hub import NexusHubClient

__all__ = [
    "NexusHubClient",
]
