"""Configuration module for the Nexus Hub client."""

from nexushub.config.loader import (
    DEFAULT_BASE_URL,
    load_config,
    Config,
    NexusHubConfig,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "load_config",
    "Config",
    "NexusHubConfig",
]
