"""Ports (interfaces) for the hexagonal architecture."""

from nexushub.ports.nexus_hub import NexusHubPort

__all__ = [
    "NexusHubPort",
]
