"""Query: ordered lookup steps with a cached, refreshable result.

Usage:
    scene = LocalScene()
    query = Query(scene).on_tag("Player", Health).on_name("HUD", UIText)

    query.values()              # [Health, UIText]
    query.value()               # UIText (last match wins)
    query.typed_values(Health)  # [Health]

    # Values are cached until the query is dirtied or auto refresh is on
    query.dirty().values()
"""

from __future__ import annotations

from typing import Any, TypeVar

from scenequery.config import QuerySettings
from scenequery.core.errors import InvalidArgumentError
from scenequery.core.whitelist import ALL_ENTITIES, TypeWhitelist, filter_instances
from scenequery.graph.models import Entity, Node
from scenequery.graph.protocol import SceneGraph
from scenequery.providers.default import GraphProvider
from scenequery.providers.protocol import Capability, capability_groups
from scenequery.query.cache import CacheState, ResultCache
from scenequery.query.steps import (
    ByName,
    ByTag,
    ByType,
    CustomStep,
    FromSelection,
    OnChildren,
    OnNode,
    OnParent,
    QueryStep,
)

EntityT = TypeVar("EntityT")


def _whitelist(types: tuple[type, ...]) -> TypeWhitelist:
    return TypeWhitelist(types) if types else ALL_ENTITIES


class Query:
    """Builder and cache for an ordered list of lookup steps.

    Steps run in insertion order and their results are concatenated without
    deduplication. Results are recomputed when auto refresh is on or the
    cache is stale, and reused otherwise.

    Args:
        graph: Host graph backing the default provider.
        auto_refresh: Recompute on every read. None takes the default from
            ``settings``.
        settings: Query defaults. Defaults to ``QuerySettings()``.
    """

    def __init__(
        self,
        graph: SceneGraph,
        *,
        auto_refresh: bool | None = None,
        settings: QuerySettings | None = None,
    ):
        self._settings = settings or QuerySettings()
        self._default = GraphProvider(graph, self._settings)
        self._overrides: dict[Capability, Any] = {}
        self._steps: list[QueryStep] = []
        self._cache = ResultCache(entities=[])
        self.auto_refresh = self._settings.auto_refresh if auto_refresh is None else auto_refresh

    @property
    def steps(self) -> tuple[QueryStep, ...]:
        return tuple(self._steps)

    @property
    def cache_state(self) -> CacheState:
        return self._cache.state(self.auto_refresh)

    @property
    def is_fresh(self) -> bool:
        return self.cache_state is CacheState.FRESH

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        kinds = ", ".join(step.kind.name for step in self._steps)
        return f"Query([{kinds}], auto_refresh={self.auto_refresh})"

    def provider_for(self, capability: Capability) -> Any:
        """Get the provider new steps of a capability group bind to.

        Returns:
            The installed override, else the graph-backed default, else None
            for groups without a default.
        """
        if capability in self._overrides:
            return self._overrides[capability]
        if capability is Capability.SELECTION:
            return None
        return self._default

    # Reading

    def _recompute(self, narrow_to: type | None) -> list[Any]:
        entities: list[Any] = []
        for step in self._steps:
            entities.extend(step.execute(narrow_to))
        self._cache.store(entities, narrowed_to=narrow_to)
        return self._cache.snapshot()

    def values(self) -> list[Any]:
        """Get the entities matched by all steps, in step order.

        Returns:
            New list; mutating it does not affect the query.
        """
        if self._cache.can_serve(self.auto_refresh):
            return self._cache.snapshot()
        return self._recompute(None)

    def value(self) -> Any | None:
        """Get the last entity of ``values()``, or None if there are none."""
        values = self.values()
        return values[-1] if values else None

    def typed_values(self, entity_type: type[EntityT]) -> list[EntityT]:
        """Get the entities of ``values()`` that are instances of a type.

        A stale or auto-refreshing query recomputes with the type applied in
        every step and caches that narrowed result. A fresh query filters its
        cached result instead.

        Args:
            entity_type: Type every returned entity is an instance of.

        Returns:
            New list, in step order.
        """
        if entity_type is None:
            raise InvalidArgumentError("entity_type is required")
        if self._cache.can_serve(self.auto_refresh, entity_type):
            return filter_instances(self._cache.entities, entity_type)
        return self._recompute(entity_type)

    def typed_value(self, entity_type: type[EntityT]) -> EntityT | None:
        """Get the last entity of ``typed_values(entity_type)``, or None."""
        values = self.typed_values(entity_type)
        return values[-1] if values else None

    # Cache control

    def dirty(self) -> Query:
        """Force the next read to recompute."""
        self._cache.invalidate()
        return self

    def clear(self) -> Query:
        """Remove all steps. Installed providers are kept."""
        self._steps.clear()
        return self.dirty()

    def reset(self) -> Query:
        """Remove all steps and installed providers."""
        self._overrides.clear()
        return self.clear()

    # Building

    def add_step(self, step: QueryStep) -> Query:
        """Append a step and mark the query stale.

        Raises:
            InvalidArgumentError: If step is None or not a QueryStep.
        """
        if step is None:
            raise InvalidArgumentError("step is required")
        if not isinstance(step, QueryStep):
            raise InvalidArgumentError(f"Expected a QueryStep, got {type(step).__name__}")
        self._steps.append(step)
        return self.dirty()

    def use(self, *providers: Any) -> Query:
        """Install providers for steps added from now on.

        Each provider overrides only the capability groups it implements.
        Steps already added keep the provider they were built with. A
        QueryStep passed here is appended as a step.

        Raises:
            InvalidArgumentError: If a provider is None or implements no
                capability group.
        """
        for provider in providers:
            if provider is None:
                raise InvalidArgumentError("provider is required")
            if isinstance(provider, QueryStep):
                self.add_step(provider)
                continue
            groups = capability_groups(provider)
            if not groups:
                raise InvalidArgumentError(
                    f"{type(provider).__name__} implements no lookup capability"
                )
            for group in groups:
                self._overrides[group] = provider
        return self

    def on_name(self, name: str, *types: type) -> Query:
        """Add a step for entities on the node named ``name``."""
        provider = self.provider_for(Capability.SCENE)
        return self.add_step(ByName(provider.find_by_name, name, _whitelist(types)))

    def on_tag(self, tag: str, *types: type) -> Query:
        """Add a step for entities on every node tagged ``tag``."""
        provider = self.provider_for(Capability.SCENE)
        return self.add_step(ByTag(provider.find_by_tag, tag, _whitelist(types)))

    def on_type(self, *types: type, include_inactive: bool = False) -> Query:
        """Add a step for entities of ``types`` anywhere in the scene."""
        provider = self.provider_for(Capability.SCENE)
        return self.add_step(ByType(provider.find_by_type, include_inactive, _whitelist(types)))

    def on_children(
        self, origin: Node | Entity, *types: type, include_inactive: bool = False
    ) -> Query:
        """Add a step for entities on ``origin`` and its descendants."""
        provider = self.provider_for(Capability.RELATION)
        return self.add_step(
            OnChildren(provider.find_on_children, origin, include_inactive, _whitelist(types))
        )

    def on_parent(
        self, origin: Node | Entity, *types: type, include_inactive: bool = False
    ) -> Query:
        """Add a step for entities on ``origin`` and its ancestors."""
        provider = self.provider_for(Capability.RELATION)
        return self.add_step(
            OnParent(provider.find_on_parent, origin, include_inactive, _whitelist(types))
        )

    def on_node(self, origin: Node | Entity, *types: type) -> Query:
        """Add a step for entities attached directly to ``origin``."""
        provider = self.provider_for(Capability.NODE)
        return self.add_step(OnNode(provider.find_on_node, origin, _whitelist(types)))

    def on_selection(self, *types: type, include_inactive: bool = False) -> Query:
        """Add a step for entities on the host's selected nodes.

        Raises:
            InvalidArgumentError: If no SelectionLookup provider is installed.
        """
        provider = self.provider_for(Capability.SELECTION)
        if provider is None:
            raise InvalidArgumentError("on_selection requires a SelectionLookup provider")
        return self.add_step(
            FromSelection(provider.find_on_selection, include_inactive, _whitelist(types))
        )

    def on_custom(self, method: Any, *types: type) -> Query:
        """Add a step whose entities come from a zero-argument function."""
        return self.add_step(CustomStep(method, _whitelist(types)))
