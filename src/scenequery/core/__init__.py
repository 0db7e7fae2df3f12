"""Core functionalities: errors and stateless type filtering.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state
    mutation. For stateful services, see query/ and graph/.
"""

from scenequery.core.errors import (
    InvalidArgumentError,
    LookupMissWarning,
    PreconditionViolationError,
)
from scenequery.core.whitelist import (
    ALL_ENTITIES,
    TypeWhitelist,
    as_whitelist,
    filter_entities,
    filter_instances,
)

__all__ = [
    # Errors
    "InvalidArgumentError",
    "PreconditionViolationError",
    "LookupMissWarning",
    # Whitelist
    "TypeWhitelist",
    "ALL_ENTITIES",
    "as_whitelist",
    "filter_entities",
    "filter_instances",
]
