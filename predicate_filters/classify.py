"""
Classification Module

Predicates that classify filters: proper (neBot), degenerate, and ultra.

Ultrafilters are exposed as a capability: an Ultrafilter value can only be
obtained from a filter already verified to have the ultra property. No
algorithm extends an arbitrary filter to an ultrafilter; that existence
result rests on a maximal-chain argument, so an extension must be supplied
by the caller as an UltrafilterExtension.
"""

import logging
from typing import Any, Optional, Protocol, runtime_checkable
from dataclasses import dataclass, field

from .exceptions import FilterLawViolation, NonConstructiveError
from .filters import Filter, bot
from .sets import PredicateSet, complement, empty, powerset

logger = logging.getLogger(__name__)


def ne_bot(F: Filter) -> bool:
    """True when the empty set is not a member."""
    return not F.contains(empty(F.domain))


def is_degenerate(F: Filter) -> bool:
    """True when F is bot, i.e. the whole carrier is its only member."""
    return F == bot(F.domain)


def undecided_set(F: Filter, limit: Optional[int] = None) -> Optional[PredicateSet]:
    """
    Find a set that F decides neither way.

    Returns:
        The empty set if F contains it, else the first S such that neither S
        nor its complement is a member, else None
    """
    if not ne_bot(F):
        return empty(F.domain)
    for S in powerset(F.domain, limit):
        if not (F.contains(S) or F.contains(complement(S))):
            return S
    return None


def is_ultra(F: Filter, limit: Optional[int] = None) -> bool:
    """
    Check the ultrafilter property by walking every subset.

    F is an ultrafilter iff ne_bot(F) and for every set S, F contains S or
    its complement.
    """
    return undecided_set(F, limit) is None


# Only Ultrafilter.verify may build the tag; see Ultrafilter.__post_init__.
_VERIFIED = object()


@dataclass(frozen=True)
class Ultrafilter:
    """
    A filter verified to decide every set.

    Build with Ultrafilter.verify; the wrapped filter is unchanged.
    """
    filter: Filter
    _token: Any = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self._token is not _VERIFIED:
            raise TypeError("Ultrafilters are built with Ultrafilter.verify")

    @classmethod
    def verify(cls, F: Filter, limit: Optional[int] = None) -> 'Ultrafilter':
        """
        Tag a filter as an ultrafilter after checking the property.

        Raises:
            FilterLawViolation: If F is not an ultrafilter
        """
        S = undecided_set(F, limit)
        if S is not None:
            if S.is_empty() and F.contains(S):
                raise FilterLawViolation("ultra", (S,), "contains the empty set")
            logger.debug(f"{F!r} decides neither {S!r} nor its complement")
            raise FilterLawViolation("ultra", (S,), "decides neither a set nor its complement")
        return cls(filter=F, _token=_VERIFIED)

    def decides(self, S: PredicateSet) -> bool:
        """True if S is a member, False if its complement is."""
        return self.filter.contains(S)

    def contains(self, S: PredicateSet) -> bool:
        return self.filter.contains(S)

    def __repr__(self) -> str:
        return f"Ultrafilter({self.filter.description} on {self.filter.domain.name})"


@runtime_checkable
class UltrafilterExtension(Protocol):
    """
    Capability producing an ultrafilter that refines a given filter.

    Implementations are assumed, not derived: an extension exists for every
    proper filter, but no constructive witness is provided here.
    """

    def extend(self, F: Filter) -> Ultrafilter:
        ...


def ultrafilter_extension(F: Filter,
                          extension: Optional[UltrafilterExtension] = None) -> Ultrafilter:
    """
    Obtain an ultrafilter accepting every member of F from a supplied capability.

    Assumes an extension exists; no constructive witness provided.

    Args:
        F: Proper filter to extend
        extension: Caller-supplied UltrafilterExtension

    Returns:
        Ultrafilter U with F <= U

    Raises:
        NonConstructiveError: If no extension capability is supplied
        FilterLawViolation: If the supplied result is not an ultrafilter
            or does not refine F
    """
    if extension is None:
        raise NonConstructiveError(
            "Ultrafilter extension assumes an extension exists; "
            "no constructive witness is provided"
        )
    result = extension.extend(F)
    U = Ultrafilter.verify(result.filter if isinstance(result, Ultrafilter) else result)
    if not F <= U.filter:
        raise FilterLawViolation("ultra", (F.kernel, U.filter.kernel), "extension does not refine the filter")
    return U
