"""Local in-memory scene implementation.

Simple list-of-roots scene suitable for single-process use and testing.

Usage:
    scene = LocalScene()
    root = scene.add_root(Node("Level"))
    root.add_child(Node("Player", tag="Player")).attach(Health(100))

    with scene.isolate(prefab_root):
        ...  # scene-wide lookups only see prefab_root's subtree
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from scenequery.config import QuerySettings
from scenequery.graph.models import Entity, Node


class LocalScene:
    """In-memory scene made of ordered root nodes.

    Name and tag lookups over the whole scene only see nodes that are active
    in hierarchy. Inside an alternate root they see every node of that
    subtree, active or not.

    Args:
        settings: Source of the default tag for ``create_node``.
    """

    def __init__(self, settings: QuerySettings | None = None):
        self._settings = settings or QuerySettings()
        self._roots: list[Node] = []
        self._alternate_roots: list[Node] = []

    @property
    def roots(self) -> tuple[Node, ...]:
        return tuple(self._roots)

    def add_root(self, node: Node) -> Node:
        """Add node as a scene root, detaching it from any parent."""
        parent = node.parent
        if parent is not None:
            parent.remove_child(node)
        if node not in self._roots:
            self._roots.append(node)
        return node

    def remove_root(self, node: Node) -> bool:
        """Remove a root with its subtree. Returns True if it was a root."""
        if node in self._roots:
            self._roots.remove(node)
            return True
        return False

    def create_node(
        self,
        name: str,
        *entities: Entity,
        tag: str | None = None,
        active: bool = True,
        parent: Node | None = None,
    ) -> Node:
        """Create a node with entities, under ``parent`` or as a new root."""
        node = Node(name, tag=tag if tag is not None else self._settings.default_tag, active=active)
        for entity in entities:
            node.attach(entity)
        if parent is None:
            self._roots.append(node)
        else:
            parent.add_child(node)
        return node

    @contextmanager
    def isolate(self, node: Node) -> Iterator[Node]:
        """Make ``node`` the alternate root for the duration of the block.

        Contexts nest; the innermost one wins.
        """
        self._alternate_roots.append(node)
        try:
            yield node
        finally:
            self._alternate_roots.pop()

    def current_alternate_root(self) -> Node | None:
        return self._alternate_roots[-1] if self._alternate_roots else None

    def _iter_nodes(self, include_inactive: bool, scope: Node | None) -> Iterator[Node]:
        starts = [scope] if scope is not None else self._roots
        for start in starts:
            if include_inactive:
                yield from start.iter_subtree()
            elif start.active_in_hierarchy:
                yield from _iter_active(start)

    def find_node_by_name(self, name: str, scope: Node | None = None) -> Node | None:
        for node in self._iter_nodes(include_inactive=scope is not None, scope=scope):
            if node.name == name:
                return node
        return None

    def find_nodes_by_tag(self, tag: str, scope: Node | None = None) -> list[Node]:
        return [
            node
            for node in self._iter_nodes(include_inactive=scope is not None, scope=scope)
            if node.tag == tag
        ]

    def enumerate_all_nodes(self, include_inactive: bool, scope: Node | None = None) -> list[Node]:
        return list(self._iter_nodes(include_inactive, scope))

    def ancestors_of(self, node: Node) -> list[Node]:
        result = []
        parent = node.parent
        while parent is not None:
            result.append(parent)
            parent = parent.parent
        return result

    def descendants_of(self, node: Node, include_inactive: bool) -> list[Node]:
        result: list[Node] = []
        for child in node.children:
            if include_inactive:
                result.extend(child.iter_subtree())
            elif child.active:
                result.extend(_iter_active(child))
        return result

    def entities_of(self, node: Node) -> list[Entity]:
        return list(node.entities)


def _iter_active(node: Node) -> Iterator[Node]:
    """Pre-order walk that prunes inactive subtrees. Assumes ``node`` is active."""
    yield node
    for child in node.children:
        if child.active:
            yield from _iter_active(child)
