"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
network file location, search options and logging.

Configuration can be overridden via environment variables:
- SS_NETWORK_DATA_DIR=/path/to/data
- SS_NETWORK_NETWORK_FILE=roads.txt
- SS_SEARCH_REJECT_NEGATIVE_WEIGHTS=false
- SS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Road network file configuration.

    Environment variables prefixed with SS_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="SS_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    network_file: str = "network.txt"
    encoding: str = "utf-8"
    comment_prefix: str = "#"

    @property
    def network_path(self) -> Path:
        """Full path to the network file."""
        return self.data_dir / self.network_file


class SearchConfig(BaseSettings):
    """Shortest-path search configuration.

    Environment variables prefixed with SS_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="SS_SEARCH_")

    reject_negative_weights: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with SS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SS_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.network.network_path)
        print(config.search.reject_negative_weights)

    Environment variables prefixed with SS_.
    """

    model_config = SettingsConfigDict(env_prefix="SS_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
