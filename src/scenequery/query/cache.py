"""Result cache state for queries.

A query's cache is in one of three effective states:

- STALE: never computed, or invalidated by ``dirty``/``add_step``/``clear``.
- FRESH: computed and reusable.
- ALWAYS: auto refresh is on; every read recomputes.

A fresh cache also remembers the type it was narrowed to by a typed read,
because a cache narrowed to ``T`` cannot answer reads for anything wider.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CacheState(Enum):
    """Effective freshness of a query's cached results."""

    STALE = auto()
    FRESH = auto()
    ALWAYS = auto()


@dataclass(slots=True)
class ResultCache:
    """Cached entities plus the bookkeeping deciding when to reuse them."""

    entities: list[object]
    fresh: bool = False
    narrowed_to: type | None = None

    def state(self, auto_refresh: bool) -> CacheState:
        """Get the effective state given the query's auto refresh flag."""
        if auto_refresh:
            return CacheState.ALWAYS
        return CacheState.FRESH if self.fresh else CacheState.STALE

    def can_serve(self, auto_refresh: bool, entity_type: type | None = None) -> bool:
        """Check if the cache can answer a read without recomputing.

        Args:
            auto_refresh: The query's auto refresh flag.
            entity_type: Type of a typed read, or None for an untyped read.

        Returns:
            True only if the cache is FRESH and covers every entity the read
            could return.
        """
        if self.state(auto_refresh) is not CacheState.FRESH:
            return False
        if self.narrowed_to is None:
            return True
        return entity_type is not None and issubclass(entity_type, self.narrowed_to)

    def store(self, entities: list[object], narrowed_to: type | None = None) -> None:
        """Replace the cached entities and mark the cache fresh."""
        self.entities = entities
        self.narrowed_to = narrowed_to
        self.fresh = True

    def invalidate(self) -> None:
        """Force the next read to recompute."""
        self.fresh = False

    def snapshot(self) -> list[object]:
        """Copy of the cached entities; callers may mutate it freely."""
        return list(self.entities)
