"""Error and diagnostic types raised while building or running queries.

Construction problems fail immediately with an exception. Lookup misses are
not errors: they are reported through ``warnings`` and the step contributes
nothing.
"""


class InvalidArgumentError(ValueError):
    """Raised when a required step or provider argument is missing."""

    pass


class PreconditionViolationError(ValueError):
    """Raised when a type-constrained step is given an empty whitelist."""

    pass


class LookupMissWarning(UserWarning):
    """Emitted when a name or tag lookup matches no node."""

    pass
