"""Default graph-backed provider.

Implements the scene, relation and node capability groups on top of any
``SceneGraph``. The alternate root is read from the graph on every call and
passed explicitly as the lookup scope.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable
from typing import Any

from scenequery.config import QuerySettings
from scenequery.core.errors import InvalidArgumentError, LookupMissWarning
from scenequery.core.whitelist import TypeWhitelist, filter_entities
from scenequery.graph.models import Node
from scenequery.graph.protocol import SceneGraph


class GraphProvider:
    """Provider delegating every lookup to a host graph.

    Args:
        graph: Host graph to read from.
        settings: Controls lookup-miss warnings. Defaults to ``QuerySettings()``.
    """

    def __init__(self, graph: SceneGraph, settings: QuerySettings | None = None):
        if graph is None:
            raise InvalidArgumentError("graph is required")
        self._graph = graph
        self._settings = settings or QuerySettings()

    @property
    def graph(self) -> SceneGraph:
        return self._graph

    def _collect(self, nodes: Iterable[Node], whitelist: TypeWhitelist) -> list[Any]:
        entities: list[Any] = []
        for node in nodes:
            entities.extend(self._graph.entities_of(node))
        return filter_entities(entities, whitelist)

    def _miss(self, message: str) -> None:
        if self._settings.warn_on_lookup_miss:
            warnings.warn(message, LookupMissWarning, stacklevel=3)

    def _where(self, scope: Node | None) -> str:
        return "the scene" if scope is None else f"alternate root {scope.name!r}"

    # SceneLookup

    def find_by_name(self, name: str, whitelist: TypeWhitelist) -> list[Any]:
        """Entities on the node named ``name``; warns and returns [] on a miss."""
        if name is None:
            raise InvalidArgumentError("name is required")
        scope = self._graph.current_alternate_root()
        node = self._graph.find_node_by_name(name, scope)
        if node is None:
            self._miss(f"Failed finding a node in {self._where(scope)} with name {name!r}")
            return []
        return self._collect((node,), whitelist)

    def find_by_tag(self, tag: str, whitelist: TypeWhitelist) -> list[Any]:
        """Entities on every node tagged ``tag``; warns and returns [] on a miss."""
        if tag is None:
            raise InvalidArgumentError("tag is required")
        scope = self._graph.current_alternate_root()
        nodes = self._graph.find_nodes_by_tag(tag, scope)
        if not nodes:
            self._miss(f"Failed finding a node in {self._where(scope)} with tag {tag!r}")
            return []
        return self._collect(nodes, whitelist)

    def find_by_type(self, include_inactive: bool, whitelist: TypeWhitelist) -> list[Any]:
        """Entities of whitelisted types anywhere in the scene (or scope)."""
        scope = self._graph.current_alternate_root()
        return self._collect(self._graph.enumerate_all_nodes(include_inactive, scope), whitelist)

    # RelationLookup

    def find_on_children(
        self, origin: Node, include_inactive: bool, whitelist: TypeWhitelist
    ) -> list[Any]:
        """Entities on origin and its descendants, origin first."""
        if origin is None:
            raise InvalidArgumentError("origin is required")
        nodes: list[Node] = []
        if include_inactive or origin.active_in_hierarchy:
            nodes.append(origin)
            nodes.extend(self._graph.descendants_of(origin, include_inactive))
        return self._collect(nodes, whitelist)

    def find_on_parent(
        self, origin: Node, include_inactive: bool, whitelist: TypeWhitelist
    ) -> list[Any]:
        """Entities on origin and its ancestors, nearest first."""
        if origin is None:
            raise InvalidArgumentError("origin is required")
        nodes = [origin, *self._graph.ancestors_of(origin)]
        if not include_inactive:
            nodes = [n for n in nodes if n.active_in_hierarchy]
        return self._collect(nodes, whitelist)

    # NodeLookup

    def find_on_node(self, origin: Node, whitelist: TypeWhitelist) -> list[Any]:
        """Entities attached directly to origin."""
        if origin is None:
            raise InvalidArgumentError("origin is required")
        return self._collect((origin,), whitelist)
