"""Configuration module using Pydantic Settings.

Usage:
    from scenequery.config import QuerySettings

    settings = QuerySettings(auto_refresh=True)
"""

from scenequery.config.settings import QuerySettings

__all__ = [
    "QuerySettings",
]
