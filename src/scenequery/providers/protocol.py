"""Strategy provider protocols: independently overridable capability groups.

A provider is any object implementing one or more of these groups. Installing
it on a query overrides only the groups it implements; the rest keep using
whatever was active before (the graph-backed default, or an earlier
override).

Usage:
    class FakeNames:
        def find_by_name(self, name, whitelist): ...
        def find_by_tag(self, tag, whitelist): ...
        def find_by_type(self, include_inactive, whitelist): ...

    query.use(FakeNames())  # replaces SceneLookup, keeps relation lookups
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from scenequery.core.whitelist import TypeWhitelist
    from scenequery.graph.models import Node


@runtime_checkable
class SceneLookup(Protocol):
    """Scene-wide lookups by node name, node tag, or entity type."""

    def find_by_name(self, name: str, whitelist: TypeWhitelist) -> list[Any]: ...

    def find_by_tag(self, tag: str, whitelist: TypeWhitelist) -> list[Any]: ...

    def find_by_type(self, include_inactive: bool, whitelist: TypeWhitelist) -> list[Any]: ...


@runtime_checkable
class RelationLookup(Protocol):
    """Lookups walking down to descendants or up to ancestors of a node."""

    def find_on_children(
        self, origin: Node, include_inactive: bool, whitelist: TypeWhitelist
    ) -> list[Any]: ...

    def find_on_parent(
        self, origin: Node, include_inactive: bool, whitelist: TypeWhitelist
    ) -> list[Any]: ...


@runtime_checkable
class NodeLookup(Protocol):
    """Lookup of the entities attached directly to one node."""

    def find_on_node(self, origin: Node, whitelist: TypeWhitelist) -> list[Any]: ...


@runtime_checkable
class SelectionLookup(Protocol):
    """Lookup over the host's current node selection. Has no default."""

    def find_on_selection(self, include_inactive: bool, whitelist: TypeWhitelist) -> list[Any]: ...


class Capability(Enum):
    """Capability groups a query holds one active provider for."""

    SCENE = auto()
    RELATION = auto()
    NODE = auto()
    SELECTION = auto()

    def protocol(self) -> type:
        """Get the protocol a provider must satisfy for this group."""
        protocols = {
            Capability.SCENE: SceneLookup,
            Capability.RELATION: RelationLookup,
            Capability.NODE: NodeLookup,
            Capability.SELECTION: SelectionLookup,
        }
        return protocols[self]


def capability_groups(provider: Any) -> frozenset[Capability]:
    """Get the capability groups a provider implements.

    Args:
        provider: Candidate provider object.

    Returns:
        Groups whose protocol the provider satisfies (possibly empty).
    """
    return frozenset(c for c in Capability if isinstance(provider, c.protocol()))
