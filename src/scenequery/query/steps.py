"""Query steps: one configured lookup each, bound to a provider method.

Steps are immutable. Required arguments are validated at construction, so a
misconfigured query fails while it is being built rather than when values
are read. No graph access happens until ``execute``.

Usage:
    step = ByTag(provider.find_by_tag, "Player", TypeWhitelist((Health,)))
    step.execute()              # [Health, ...]
    step.execute(narrow_to=X)   # only instances of X
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, ClassVar

from scenequery.core.errors import InvalidArgumentError, PreconditionViolationError
from scenequery.core.whitelist import (
    ALL_ENTITIES,
    TypeWhitelist,
    as_whitelist,
    filter_entities,
    filter_instances,
)
from scenequery.graph.models import Entity, Node


class StepKind(Enum):
    """Lookup performed by a step."""

    BY_NAME = auto()
    BY_TAG = auto()
    BY_TYPE = auto()
    ON_CHILDREN = auto()
    ON_PARENT = auto()
    ON_NODE = auto()
    FROM_SELECTION = auto()
    CUSTOM = auto()


def _require(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} is required")


def _check_method(step: QueryStep) -> None:
    method = getattr(step, "method", None)
    _require(method, "method")
    if not callable(method):
        raise InvalidArgumentError(f"method must be callable, got {method!r}")


def _check_whitelist(step: QueryStep) -> TypeWhitelist:
    whitelist = as_whitelist(getattr(step, "whitelist", None))
    _require(whitelist, "whitelist")
    object.__setattr__(step, "whitelist", whitelist)
    return whitelist  # type: ignore[return-value]


def resolve_origin(origin: Node | Entity | None) -> Node:
    """Resolve a step origin to a node.

    Args:
        origin: A node, or an entity standing for the node it is attached to.

    Returns:
        The origin node.

    Raises:
        InvalidArgumentError: If origin is None, a detached entity, or neither
            a node nor an entity.
    """
    _require(origin, "origin")
    if isinstance(origin, Node):
        return origin
    if isinstance(origin, Entity):
        node = origin.node
        if node is None:
            raise InvalidArgumentError(f"origin entity {origin!r} is not attached to a node")
        return node
    raise InvalidArgumentError(f"origin must be a Node or an attached Entity, got {origin!r}")


@dataclass(frozen=True, slots=True)
class QueryStep:
    """Base class for query steps."""

    kind: ClassVar[StepKind]

    def _run(self) -> Sequence[Any]:
        raise NotImplementedError

    def execute(self, narrow_to: type | None = None) -> list[Any]:
        """Run the lookup.

        Args:
            narrow_to: Optional extra type every result must be an instance of.

        Returns:
            New list of matching entities in lookup order.
        """
        entities = list(self._run())
        if narrow_to is not None:
            entities = filter_instances(entities, narrow_to)
        return entities


@dataclass(frozen=True, slots=True)
class ByName(QueryStep):
    """Entities on the node with an exact (case-sensitive) name."""

    kind: ClassVar[StepKind] = StepKind.BY_NAME

    method: Callable[[str, TypeWhitelist], Sequence[Any]]
    name: str
    whitelist: TypeWhitelist = ALL_ENTITIES

    def __post_init__(self) -> None:
        _check_method(self)
        _require(self.name, "name")
        _check_whitelist(self)

    def _run(self) -> Sequence[Any]:
        return self.method(self.name, self.whitelist)


@dataclass(frozen=True, slots=True)
class ByTag(QueryStep):
    """Entities on every node carrying a tag."""

    kind: ClassVar[StepKind] = StepKind.BY_TAG

    method: Callable[[str, TypeWhitelist], Sequence[Any]]
    tag: str
    whitelist: TypeWhitelist = ALL_ENTITIES

    def __post_init__(self) -> None:
        _check_method(self)
        _require(self.tag, "tag")
        _check_whitelist(self)

    def _run(self) -> Sequence[Any]:
        return self.method(self.tag, self.whitelist)


@dataclass(frozen=True, slots=True)
class ByType(QueryStep):
    """Entities of whitelisted types anywhere in the scene.

    The whitelist must not be empty.
    """

    kind: ClassVar[StepKind] = StepKind.BY_TYPE

    method: Callable[[bool, TypeWhitelist], Sequence[Any]]
    include_inactive: bool = False
    whitelist: TypeWhitelist = ALL_ENTITIES

    def __post_init__(self) -> None:
        _check_method(self)
        whitelist = _check_whitelist(self)
        if whitelist.is_empty():
            raise PreconditionViolationError("ByType requires at least one entity type")

    def _run(self) -> Sequence[Any]:
        return self.method(self.include_inactive, self.whitelist)


@dataclass(frozen=True, slots=True)
class OnChildren(QueryStep):
    """Entities on the origin node and all of its descendants."""

    kind: ClassVar[StepKind] = StepKind.ON_CHILDREN

    method: Callable[[Node, bool, TypeWhitelist], Sequence[Any]]
    origin: Node
    include_inactive: bool = False
    whitelist: TypeWhitelist = ALL_ENTITIES

    def __post_init__(self) -> None:
        _check_method(self)
        object.__setattr__(self, "origin", resolve_origin(self.origin))
        _check_whitelist(self)

    def _run(self) -> Sequence[Any]:
        return self.method(self.origin, self.include_inactive, self.whitelist)


@dataclass(frozen=True, slots=True)
class OnParent(QueryStep):
    """Entities on the origin node and all of its ancestors."""

    kind: ClassVar[StepKind] = StepKind.ON_PARENT

    method: Callable[[Node, bool, TypeWhitelist], Sequence[Any]]
    origin: Node
    include_inactive: bool = False
    whitelist: TypeWhitelist = ALL_ENTITIES

    def __post_init__(self) -> None:
        _check_method(self)
        object.__setattr__(self, "origin", resolve_origin(self.origin))
        _check_whitelist(self)

    def _run(self) -> Sequence[Any]:
        return self.method(self.origin, self.include_inactive, self.whitelist)


@dataclass(frozen=True, slots=True)
class OnNode(QueryStep):
    """Entities attached directly to the origin node."""

    kind: ClassVar[StepKind] = StepKind.ON_NODE

    method: Callable[[Node, TypeWhitelist], Sequence[Any]]
    origin: Node
    whitelist: TypeWhitelist = ALL_ENTITIES

    def __post_init__(self) -> None:
        _check_method(self)
        object.__setattr__(self, "origin", resolve_origin(self.origin))
        _check_whitelist(self)

    def _run(self) -> Sequence[Any]:
        return self.method(self.origin, self.whitelist)


@dataclass(frozen=True, slots=True)
class FromSelection(QueryStep):
    """Entities on the host's selected nodes and their descendants."""

    kind: ClassVar[StepKind] = StepKind.FROM_SELECTION

    method: Callable[[bool, TypeWhitelist], Sequence[Any]]
    include_inactive: bool = False
    whitelist: TypeWhitelist = ALL_ENTITIES

    def __post_init__(self) -> None:
        _check_method(self)
        _check_whitelist(self)

    def _run(self) -> Sequence[Any]:
        return self.method(self.include_inactive, self.whitelist)


@dataclass(frozen=True, slots=True)
class CustomStep(QueryStep):
    """Entities produced by a caller-supplied function, then whitelisted."""

    kind: ClassVar[StepKind] = StepKind.CUSTOM

    method: Callable[[], Iterable[Any]]
    whitelist: TypeWhitelist = ALL_ENTITIES

    def __post_init__(self) -> None:
        _check_method(self)
        _check_whitelist(self)

    def _run(self) -> Sequence[Any]:
        return filter_entities(self.method(), self.whitelist)
