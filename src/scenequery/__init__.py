"""scenequery: composable, cached entity lookups over a live scene graph.

Usage:
    from scenequery import Entity, LocalScene, Node, Query

    class Health(Entity):
        def __init__(self, points: int):
            super().__init__()
            self.points = points

    scene = LocalScene()
    scene.create_node("Player", Health(100), tag="Player")

    query = Query(scene).on_tag("Player", Health)
    query.value()  # Health on the Player node
"""

__version__ = "0.1.0"

# Core primitives
from scenequery.core import (
    ALL_ENTITIES,
    InvalidArgumentError,
    LookupMissWarning,
    PreconditionViolationError,
    TypeWhitelist,
    filter_entities,
)

# Configuration
from scenequery.config import QuerySettings

# Scene graph
from scenequery.graph import (
    Entity,
    LocalScene,
    Node,
    SceneGraph,
)

# Providers
from scenequery.providers import (
    Capability,
    GraphProvider,
    NodeLookup,
    RelationLookup,
    SceneLookup,
    SelectionLookup,
)

# Queries
from scenequery.query import (
    ByName,
    ByTag,
    ByType,
    CacheState,
    CustomStep,
    FromSelection,
    OnChildren,
    OnNode,
    OnParent,
    Query,
    QueryStep,
    StepKind,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "TypeWhitelist",
    "ALL_ENTITIES",
    "filter_entities",
    "InvalidArgumentError",
    "PreconditionViolationError",
    "LookupMissWarning",
    # Config
    "QuerySettings",
    # Graph
    "Entity",
    "Node",
    "SceneGraph",
    "LocalScene",
    # Providers
    "Capability",
    "SceneLookup",
    "RelationLookup",
    "NodeLookup",
    "SelectionLookup",
    "GraphProvider",
    # Query
    "Query",
    "QueryStep",
    "StepKind",
    "ByName",
    "ByTag",
    "ByType",
    "OnChildren",
    "OnParent",
    "OnNode",
    "FromSelection",
    "CustomStep",
    "CacheState",
]
