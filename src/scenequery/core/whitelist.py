"""Type whitelists: OR-semantics filtering of entities by runtime type.

Usage:
    whitelist = TypeWhitelist((Health, Armor))
    whitelist.matches(entity)  # instance of Health OR Armor

    filter_entities(entities, whitelist)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from scenequery.graph.models import Entity


@dataclass(frozen=True, slots=True)
class TypeWhitelist:
    """Ordered set of entity types an entity may be an instance of.

    Matching is a disjunction: an entity passes if it is an instance of at
    least one entry.
    """

    types: tuple[type, ...] = ()

    def __init__(self, types: Iterable[type] = ()):
        unique = tuple(dict.fromkeys(types))
        for t in unique:
            if not isinstance(t, type):
                raise TypeError(f"Whitelist entries must be types, got {t!r}")
        object.__setattr__(self, "types", unique)

    def __iter__(self) -> Iterator[type]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def __contains__(self, item: type) -> bool:
        return item in self.types

    def is_empty(self) -> bool:
        """Check if the whitelist has no entries."""
        return not self.types

    def matches(self, entity: Any) -> bool:
        """Check if entity is an instance of any whitelisted type."""
        return bool(self.types) and isinstance(entity, self.types)


ALL_ENTITIES = TypeWhitelist((Entity,))
"""Whitelist matching every entity; used when a builder gets no types."""


def as_whitelist(types: Iterable[type] | TypeWhitelist | None) -> TypeWhitelist | None:
    """Normalize a whitelist argument, passing ``None`` through."""
    if types is None or isinstance(types, TypeWhitelist):
        return types
    return TypeWhitelist(types)


def filter_entities(entities: Iterable[Any], whitelist: TypeWhitelist) -> list[Any]:
    """Keep entities matching the whitelist, preserving order.

    Args:
        entities: Candidate entities in traversal order.
        whitelist: Types an entity may be an instance of.

    Returns:
        New list of the matching entities.
    """
    return [e for e in entities if whitelist.matches(e)]


def filter_instances(entities: Iterable[Any], entity_type: type) -> list[Any]:
    """Keep entities that are instances of ``entity_type``, preserving order."""
    return [e for e in entities if isinstance(e, entity_type)]
