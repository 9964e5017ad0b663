"""
Closure Module

Filters built from families: the infimum of a collection of filters and the
smallest filter containing a family of sets.

The smallest filter containing a family is classically the infimum of all
filters that contain it. That definition quantifies over every filter, so
generated_from uses the equivalent finite-intersection form instead:

    t is accepted  ⟺  some finite s₁, …, sₙ from the family has s₁ ∩ … ∩ sₙ ⊆ t

with the empty subfamily standing for the whole carrier. Membership comes
with a witness subfamily.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union
from dataclasses import dataclass, field

from .domain import Domain
from .exceptions import DomainMismatchError
from .filters import Filter, _build, principal
from .sets import (
    PredicateSet,
    intersection_over_family,
    powerset,
    preimage,
    subset,
    union_over_family,
)

logger = logging.getLogger(__name__)

Family = Union[Iterable[PredicateSet], Callable[[PredicateSet], bool]]


def _common_domain(filters: Tuple[Filter, ...], domain: Optional[Domain]) -> Domain:
    if not filters:
        if domain is None:
            raise ValueError("An empty collection of filters needs an explicit domain")
        return domain
    found = domain if domain is not None else filters[0].domain
    for F in filters:
        if F.domain != found:
            raise DomainMismatchError(f"Filters over {found} and {F.domain} cannot be combined")
    return found


# ═══════════════════════════════════════════════════════════════════════════
# INFIMUM / SUPREMUM
# ═══════════════════════════════════════════════════════════════════════════

def infimum(filters: Iterable[Filter], domain: Optional[Domain] = None) -> Filter:
    """
    Largest filter below every filter of a collection.

    Accepts t iff every filter of the collection accepts t. Each law holds
    pointwise because it holds in every conjunct. The empty collection gives
    the filter accepting every set.

    Args:
        filters: Collection of filters on one carrier
        domain: Carrier, required when the collection is empty

    Returns:
        Filter with kernel equal to the union of the kernels
    """
    members = tuple(filters)
    carrier = _common_domain(members, domain)
    kernel = union_over_family(carrier, (F.kernel for F in members))
    names = ", ".join(F.description for F in members)
    return _build(
        carrier,
        lambda t: all(F.contains(t) for F in members),
        kernel,
        f"inf [{names}]",
    )


def supremum(filters: Iterable[Filter], domain: Optional[Domain] = None) -> Filter:
    """
    Smallest filter accepting every member of every filter of a collection.

    Each filter is generated by its kernel, so the result is generated by the
    kernels. The empty collection gives bot.
    """
    members = tuple(filters)
    carrier = _common_domain(members, domain)
    return generated_from(carrier, [F.kernel for F in members])


# ═══════════════════════════════════════════════════════════════════════════
# GENERATED FILTER
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, eq=False, repr=False)
class GeneratedFilter(Filter):
    """
    Smallest filter containing a family of sets.

    Attributes:
        base: The generating family, duplicates removed
    """
    base: Tuple[PredicateSet, ...] = field(default=(), repr=False)

    def witness(self, t: PredicateSet) -> Optional[Tuple[PredicateSet, ...]]:
        """
        Find a finite subfamily of the base whose intersection lies inside t.

        The whole base is tried first; if it fails no subfamily can succeed,
        since dropping sets only enlarges the intersection. Otherwise sets are
        dropped one at a time while the intersection still fits, leaving a
        witness from which no set can be removed.

        Returns:
            Tuple of base sets (empty when t is the whole carrier), or None
        """
        if not subset(intersection_over_family(self.domain, self.base), t):
            return None
        chosen: List[PredicateSet] = list(self.base)
        i = 0
        while i < len(chosen):
            rest = chosen[:i] + chosen[i + 1:]
            if subset(intersection_over_family(self.domain, rest), t):
                chosen = rest
            else:
                i += 1
        return tuple(chosen)


def _materialize(domain: Domain, family: Family, limit: Optional[int]) -> Tuple[PredicateSet, ...]:
    if callable(family):
        return tuple(s for s in powerset(domain, limit) if family(s))
    seen = []
    for s in family:
        if s.domain != domain:
            raise DomainMismatchError(f"Family set {s!r} is not over {domain}")
        if s not in seen:
            seen.append(s)
    return tuple(seen)


def generated_from(domain: Domain, family: Family, limit: Optional[int] = None) -> GeneratedFilter:
    """
    Smallest filter accepting every set of a family.

    Args:
        domain: Carrier of the family
        family: Iterable of sets, or a predicate over sets selecting them
                (then the powerset is enumerated)
        limit: Maximum carrier size when enumerating a predicate family

    Returns:
        GeneratedFilter whose membership is decided by a finite witness
    """
    base = _materialize(domain, family, limit)
    kernel = intersection_over_family(domain, base)
    logger.debug(f"Generating filter on {domain} from {len(base)} base sets")

    def rule(t: PredicateSet) -> bool:
        return generated.witness(t) is not None

    generated = _build(
        domain,
        rule,
        PredicateSet.from_mask(domain, kernel.mask),
        f"generated by {list(base)!r}",
        cls=GeneratedFilter,
        base=base,
    )
    return generated


def comap(f: Callable[[Any], Any], G: Filter, source: Domain) -> GeneratedFilter:
    """
    Pull a filter back along f: generated by the preimages of G's members.

    Every member of G contains G's kernel, so the preimage of the kernel
    generates the same filter.
    """
    return generated_from(source, [preimage(f, G.kernel, source)])


def all_filters(domain: Domain, limit: Optional[int] = None) -> Iterator[Filter]:
    """
    Every filter on a carrier.

    On a finite carrier each filter is principal on its kernel, so there is
    exactly one filter per subset.
    """
    for s in powerset(domain, limit):
        yield principal(s)


def smallest_filter_containing(domain: Domain, family: Family, limit: Optional[int] = None) -> Filter:
    """
    Infimum of all filters accepting every set of a family.

    Walks every filter on the carrier, so it is bounded by the enumeration
    limit; generated_from gives the same filter without the search.
    """
    base = _materialize(domain, family, limit)
    candidates = [F for F in all_filters(domain, limit) if all(F.contains(s) for s in base)]
    return infimum(candidates, domain)
