"""Host graph protocol: the read-only lookups the query engine consumes.

The engine never creates, deletes or mutates nodes. Every scene-wide lookup
takes an explicit ``scope``: when it is a node, the search is confined to
that node's subtree (the alternate root of an editing context); when it is
None, the whole scene is searched.

Usage:
    scene = LocalScene()
    provider = GraphProvider(scene)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from scenequery.graph.models import Entity, Node


@runtime_checkable
class SceneGraph(Protocol):
    """Abstract host graph interface. Implementations own the nodes."""

    def find_node_by_name(self, name: str, scope: Node | None = None) -> Node | None:
        """Find the first node whose name equals ``name`` exactly."""
        ...

    def find_nodes_by_tag(self, tag: str, scope: Node | None = None) -> Sequence[Node]:
        """Find all nodes carrying ``tag``."""
        ...

    def enumerate_all_nodes(
        self, include_inactive: bool, scope: Node | None = None
    ) -> Sequence[Node]:
        """Every node in the scene (or scope), depth-first pre-order."""
        ...

    def ancestors_of(self, node: Node) -> Sequence[Node]:
        """Ancestors of ``node``, nearest first, excluding the node itself."""
        ...

    def descendants_of(self, node: Node, include_inactive: bool) -> Sequence[Node]:
        """Descendants of ``node`` in pre-order, excluding the node itself."""
        ...

    def entities_of(self, node: Node) -> Sequence[Entity]:
        """Entities attached to ``node``, in attachment order."""
        ...

    def current_alternate_root(self) -> Node | None:
        """Root of the active editing context, or None outside of one."""
        ...
