"""Centralized configuration using Pydantic Settings.

A graph needs no configuration to be built; these settings only tune
the ambient behavior around it:
- whether the representation invariant is checked after each mutation
- log level and format

Configuration can be overridden via environment variables:
- EDGEGRAPH_GRAPH_CHECK_REP=false
- EDGEGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph behavior configuration.

    Environment variables prefixed with EDGEGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="EDGEGRAPH_GRAPH_")

    # Turning this off skips the invariant check, like running with -O.
    check_rep: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with EDGEGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="EDGEGRAPH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.check_rep)

    Environment variables prefixed with EDGEGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="EDGEGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
