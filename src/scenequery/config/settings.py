"""Configuration settings using Pydantic Settings.

Provides typed defaults for queries and scenes with environment variable
support.

Usage:
    from scenequery.config import QuerySettings

    # Load from environment variables (SCENEQUERY_*)
    settings = QuerySettings()

    # Or override with explicit values
    settings = QuerySettings(auto_refresh=True)
    query = Query(scene, settings=settings)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class QuerySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for queries and the default graph provider.

    Attributes:
        auto_refresh: Default for queries constructed without an explicit
            ``auto_refresh`` flag.
        warn_on_lookup_miss: Whether name and tag lookups that match no node
            emit a ``LookupMissWarning``.
        default_tag: Tag given to nodes created without one.

    Environment Variables:
        SCENEQUERY_AUTO_REFRESH
        SCENEQUERY_WARN_ON_LOOKUP_MISS
        SCENEQUERY_DEFAULT_TAG
    """

    model_config = SettingsConfigDict(
        env_prefix="SCENEQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    auto_refresh: bool = False
    warn_on_lookup_miss: bool = True
    default_tag: str = "Untagged"
