"""Query functionality: steps, result cache, and the query builder."""

from scenequery.query.cache import CacheState, ResultCache
from scenequery.query.query import Query
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
    StepKind,
    resolve_origin,
)

__all__ = [
    # Builder
    "Query",
    # Steps
    "QueryStep",
    "StepKind",
    "ByName",
    "ByTag",
    "ByType",
    "OnChildren",
    "OnParent",
    "OnNode",
    "FromSelection",
    "CustomStep",
    "resolve_origin",
    # Cache
    "CacheState",
    "ResultCache",
]
