"""Strategy providers: capability protocols and the graph-backed default."""

from scenequery.providers.default import GraphProvider
from scenequery.providers.protocol import (
    Capability,
    NodeLookup,
    RelationLookup,
    SceneLookup,
    SelectionLookup,
    capability_groups,
)

__all__ = [
    # Protocols
    "SceneLookup",
    "RelationLookup",
    "NodeLookup",
    "SelectionLookup",
    "Capability",
    "capability_groups",
    # Implementations
    "GraphProvider",
]
