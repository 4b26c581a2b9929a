"""
Configuration loader with TOML support, environment variable overrides, and validation.
"""

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nexushub.domain.models import Faction

DEFAULT_BASE_URL = "https://api.nexushub.co/wow-classic/v1/"


class NexusHubConfig(BaseModel):
    """Nexus Hub API configuration."""

    api_base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=10.0)
    user_agent: str = Field(default="nexushub-python/0.1")
    default_server: str = Field(default="netherwind")
    default_faction: Faction = Field(default=Faction.ALLIANCE)

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is properly formatted."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API base URL must start with http:// or https://")
        return v.rstrip("/") + "/"

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate that the timeout is positive."""
        if v <= 0:
            raise ValueError("Timeout must be greater than zero")
        return v

    @field_validator("default_server")
    @classmethod
    def validate_server(cls, v: str) -> str:
        """Normalize the server slug."""
        if not v or v.strip() == "":
            raise ValueError("Default server must be provided")
        return v.strip().lower()


class Config(BaseSettings):
    """Main library configuration."""

    model_config = SettingsConfigDict(
        env_prefix="NH_",
        env_nested_delimiter="__",
        env_file=".env",
        case_sensitive=False,
    )

    nexushub: NexusHubConfig = Field(default_factory=NexusHubConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Let environment variables take precedence over TOML values."""
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_config(config_path: Optional[str | Path] = None) -> Config:
    """
    Load configuration from an optional TOML file with environment variable overrides.

    Environment variables follow the pattern:
    - NH_NEXUSHUB__API_BASE_URL
    - NH_NEXUSHUB__TIMEOUT
    - NH_NEXUSHUB__DEFAULT_SERVER
    - NH_NEXUSHUB__DEFAULT_FACTION

    Args:
        config_path: Path to a TOML configuration file. When omitted, only
            environment variables and defaults are used.

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If the given config file doesn't exist
        ValueError: If configuration is invalid
    """
    if config_path is None:
        return Config()

    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "rb") as f:
        toml_data = tomllib.load(f)

    # Environment variables override TOML values via settings_customise_sources
    return Config(**toml_data)
