"""
Error types for predicate sets and filters.

All of these signal contract violations by the caller. They derive from
ValueError so callers validating input can catch them the usual way.
"""

from typing import Any, Tuple


class FilterError(Exception):
    """Base class for errors raised by predicate_filters."""


class DomainMismatchError(FilterError, ValueError):
    """Operands live on different carriers, or a map leaves its target carrier."""


class EnumerationLimitError(FilterError, ValueError):
    """A carrier is too large to enumerate its powerset."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Carrier of {size} elements exceeds enumeration limit of {limit} "
            f"(2^{size} subsets)"
        )


class FilterLawViolation(FilterError, ValueError):
    """
    A membership predicate does not satisfy a filter law.

    Attributes:
        law: Name of the violated law ("universal", "upward", "intersection", "ultra")
        sets: Sets witnessing the violation
    """

    def __init__(self, law: str, sets: Tuple[Any, ...] = (), message: str = ""):
        self.law = law
        self.sets = tuple(sets)
        detail = message or f"violates the {law} law"
        if self.sets:
            detail += " (witness: " + ", ".join(repr(s) for s in self.sets) + ")"
        super().__init__(detail)


class NonConstructiveError(FilterError, NotImplementedError):
    """
    Requested object exists only by a non-constructive argument.

    Raised when an ultrafilter extension is asked for without a supplied
    capability; no algorithm is provided for it.
    """
