"""Scene data model: nodes and the entities attached to them.

Nodes own their children and their entities. Back-references (entity to
node, node to parent) are weak so that the host graph stays the only owner.

Usage:
    class Health(Entity):
        def __init__(self, points: int):
            super().__init__()
            self.points = points

    player = Node("Player", tag="Player")
    player.attach(Health(100))
    root.add_child(player)
"""

from __future__ import annotations

import weakref
from collections.abc import Iterator

DEFAULT_TAG = "Untagged"


class Entity:
    """Typed value attached to a node.

    Subclass to define entity types; whitelists match on the subclass.
    """

    __slots__ = ("_node", "__weakref__")

    def __init__(self) -> None:
        self._node: weakref.ReferenceType[Node] | None = None

    @property
    def node(self) -> Node | None:
        """Owning node, or None if detached or the node is gone."""
        # Dataclass subclasses may skip Entity.__init__.
        ref = getattr(self, "_node", None)
        return ref() if ref is not None else None

    def __repr__(self) -> str:
        owner = self.node
        where = owner.name if owner is not None else "detached"
        return f"{type(self).__name__}(node={where!r})"


class Node:
    """Hierarchical scene element with name, tag, active flag and entities."""

    __slots__ = ("name", "tag", "active", "_parent", "_children", "_entities", "__weakref__")

    def __init__(self, name: str, tag: str = DEFAULT_TAG, active: bool = True):
        self.name = name
        self.tag = tag
        self.active = active
        self._parent: weakref.ReferenceType[Node] | None = None
        self._children: list[Node] = []
        self._entities: list[Entity] = []

    @property
    def parent(self) -> Node | None:
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    @property
    def active_in_hierarchy(self) -> bool:
        """True if this node and every ancestor is active."""
        node: Node | None = self
        while node is not None:
            if not node.active:
                return False
            node = node.parent
        return True

    def add_child(self, child: Node) -> Node:
        """Append child, detaching it from its previous parent.

        Raises:
            ValueError: If child is this node or one of its ancestors.
        """
        ancestor: Node | None = self
        while ancestor is not None:
            if ancestor is child:
                raise ValueError(f"Cannot parent {child.name!r} under its own descendant")
            ancestor = ancestor.parent
        previous = child.parent
        if previous is not None:
            previous._children.remove(child)
        child._parent = weakref.ref(self)
        self._children.append(child)
        return child

    def remove_child(self, child: Node) -> None:
        """Detach child. Does nothing if it is not a child of this node."""
        if child in self._children:
            self._children.remove(child)
            child._parent = None

    def attach(self, entity: Entity) -> Entity:
        """Attach entity, moving it off any previous node."""
        previous = entity.node
        if previous is not None:
            previous._drop(entity)
        object.__setattr__(entity, "_node", weakref.ref(self))
        self._entities.append(entity)
        return entity

    def detach(self, entity: Entity) -> bool:
        """Detach entity. Returns True if it was attached here."""
        if self._drop(entity):
            object.__setattr__(entity, "_node", None)
            return True
        return False

    def _drop(self, entity: Entity) -> bool:
        # Identity, not equality: dataclass entities may compare equal.
        for i, attached in enumerate(self._entities):
            if attached is entity:
                del self._entities[i]
                return True
        return False

    def iter_subtree(self) -> Iterator[Node]:
        """Yield this node and all descendants in depth-first pre-order."""
        yield self
        for child in self._children:
            yield from child.iter_subtree()

    def __repr__(self) -> str:
        return f"Node({self.name!r}, tag={self.tag!r}, active={self.active})"
