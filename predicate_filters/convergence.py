"""
Convergence Module

The tendsto relation between filters, and the point-limit and "eventually"
notions built on it.

tendsto(f, F, G) holds when every set whose preimage F accepts is accepted
by G, i.e. the pushforward of F along f lies below G in the filter order.
Limits are the special case G = nhds(x), the principal filter of {x}.
"""

import logging
from typing import Any, Callable, Optional

from .domain import Domain
from .filters import Filter, check_maps_into, principal
from .sets import PredicateSet, powerset, preimage, singleton

logger = logging.getLogger(__name__)


def identity(x: Any) -> Any:
    return x


def tendsto(f: Callable[[Any], Any], F: Filter, G: Filter, limit: Optional[int] = None) -> bool:
    """
    Decide whether f sends F into G.

    For every set t on G's carrier: F accepts preimage(f, t) ⟹ G accepts t.

    Args:
        f: Function from F's carrier to G's carrier
        F: Source filter
        G: Target filter
        limit: Maximum size of G's carrier for enumeration

    Returns:
        True if the implication holds for every t

    Raises:
        DomainMismatchError: If f sends an element of F's carrier outside G's
    """
    check_maps_into(f, F.domain, G.domain)
    for t in powerset(G.domain, limit):
        if F.contains(preimage(f, t, F.domain)) and not G.contains(t):
            logger.debug(f"tendsto fails: {F!r} accepts preimage of {t!r}, {G!r} does not")
            return False
    return True


def nhds(domain: Domain, x: Any) -> Filter:
    """Neighbourhood filter of a point: the principal filter of {x}."""
    return principal(singleton(domain, x))


def tends_to(F: Filter, x: Any, limit: Optional[int] = None) -> bool:
    """F tends to x: tendsto(identity, F, nhds(x))."""
    return tendsto(identity, F, nhds(F.domain, x), limit)


def eventually(p: Callable[[Any], bool], F: Filter) -> bool:
    """p holds eventually along F: the set {x | p(x)} is a member."""
    return F.contains(PredicateSet(F.domain, p))


def frequently(p: Callable[[Any], bool], F: Filter) -> bool:
    """p holds frequently along F: not p does not hold eventually."""
    return not eventually(lambda x: not p(x), F)
