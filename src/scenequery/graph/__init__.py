"""Scene graph: data model, host graph protocol, and in-memory scene."""

from scenequery.graph.local import LocalScene
from scenequery.graph.models import DEFAULT_TAG, Entity, Node
from scenequery.graph.protocol import SceneGraph

__all__ = [
    # Models
    "Entity",
    "Node",
    "DEFAULT_TAG",
    # Protocol
    "SceneGraph",
    # Implementations
    "LocalScene",
]
