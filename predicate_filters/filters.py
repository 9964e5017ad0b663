"""
Filter Module

Immutable filters over a finite carrier and the combinators that build them.

A filter is a family of sets containing the whole carrier, closed upward
under superset and closed under pairwise intersection. Filters are never
instantiated directly: they come from a law-preserving combinator
(principal, bot, pushforward, and those in closure) or from
Filter.from_predicate, which validates the laws first.

On a finite carrier every filter is principal on the intersection of its
members. That set is the filter's kernel; equality, hashing and the filter
order are decided on kernels, while `contains` always runs the combinator's
own membership rule.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional
from dataclasses import dataclass, field

from .domain import Domain
from .exceptions import DomainMismatchError, FilterLawViolation
from .laws import check_filter_laws, kernel_bits, membership_table
from .sets import PredicateSet, image, preimage, subset, universal

logger = logging.getLogger(__name__)

# Only combinators may build filters; see Filter.__post_init__.
_COMBINATOR = object()


@dataclass(frozen=True, eq=False)
class Filter:
    """
    A filter on a finite carrier.

    Attributes:
        domain: Carrier of the member sets
        rule: Membership predicate over sets, as defined by the combinator
        kernel: Intersection of all members
        description: Human-readable construction
    """
    domain: Domain
    rule: Callable[[PredicateSet], bool] = field(repr=False)
    kernel: PredicateSet
    description: str = "filter"
    _cache: Dict[bytes, bool] = field(default_factory=dict, repr=False)
    _token: Any = field(default=None, repr=False)

    def __post_init__(self):
        if self._token is not _COMBINATOR:
            raise TypeError(
                "Filters are built by combinators (principal, bot, infimum, ...) "
                "or validated with Filter.from_predicate"
            )

    @classmethod
    def from_predicate(cls,
                       domain: Domain,
                       accepts: Callable[[PredicateSet], bool],
                       description: Optional[str] = None,
                       limit: Optional[int] = None) -> 'Filter':
        """
        Build a filter from an arbitrary predicate over sets.

        The predicate is evaluated on every subset of the carrier and the
        three filter laws are checked before anything is returned.

        Args:
            domain: Carrier of the member sets
            accepts: Candidate membership predicate
            description: Display name
            limit: Maximum carrier size for enumeration

        Returns:
            Filter whose membership agrees with `accepts`

        Raises:
            FilterLawViolation: If a law fails (first violation reported)
            EnumerationLimitError: If the carrier is too large to check
        """
        table = membership_table(domain, accepts, limit)
        violations = check_filter_laws(domain, table)
        if violations:
            first = violations[0]
            raise FilterLawViolation(first.law, tuple(first.sets))

        masks = domain.powerset_masks(len(domain))
        kernel = PredicateSet.from_mask(domain, masks[kernel_bits(table)])
        return _build(domain, accepts, kernel, description or "filter from predicate")

    def contains(self, t: PredicateSet) -> bool:
        """Set-in-filter membership."""
        if t.domain is not self.domain and t.domain != self.domain:
            raise DomainMismatchError(f"Set over {t.domain} tested against filter over {self.domain}")
        key = t.key
        cached = self._cache.get(key)
        if cached is None:
            cached = bool(self.rule(t))
            self._cache[key] = cached
        return cached

    def __contains__(self, t: PredicateSet) -> bool:
        return self.contains(t)

    def members(self, limit: Optional[int] = None) -> Iterator[PredicateSet]:
        """Every accepted subset of the carrier."""
        for row in self.domain.powerset_masks(limit):
            s = PredicateSet.from_mask(self.domain, row)
            if self.contains(s):
                yield s

    def map(self, f: Callable[[Any], Any], target: Domain) -> 'Filter':
        """Pushforward of this filter along f."""
        return pushforward(f, self, target)

    def _check_same_domain(self, other: 'Filter') -> None:
        if self.domain != other.domain:
            raise DomainMismatchError(f"Filters over {self.domain} and {other.domain} are not comparable")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.domain == other.domain and self.kernel == other.kernel

    def __hash__(self) -> int:
        return hash((self.domain, self.kernel))

    def __le__(self, other: 'Filter') -> bool:
        """Every set accepted by self is accepted by other."""
        self._check_same_domain(other)
        return subset(other.kernel, self.kernel)

    def __lt__(self, other: 'Filter') -> bool:
        return self <= other and self != other

    def __ge__(self, other: 'Filter') -> bool:
        return other <= self

    def __gt__(self, other: 'Filter') -> bool:
        return other < self

    def __repr__(self) -> str:
        return f"Filter({self.description} on {self.domain.name})"


def check_maps_into(f: Callable[[Any], Any], source: Domain, target: Domain) -> None:
    """Raise DomainMismatchError if f sends a source element outside target."""
    for x in source:
        if f(x) not in target:
            raise DomainMismatchError(f"{f!r} maps {x!r} outside {target}")


def _build(domain: Domain,
           rule: Callable[[PredicateSet], bool],
           kernel: PredicateSet,
           description: str,
           cls: type = Filter,
           **extra) -> Filter:
    logger.debug(f"Built {description} on {domain} with kernel {kernel}")
    return cls(domain=domain, rule=rule, kernel=kernel, description=description,
               _token=_COMBINATOR, **extra)


# ═══════════════════════════════════════════════════════════════════════════
# BASIC COMBINATORS
# ═══════════════════════════════════════════════════════════════════════════

def principal(s: PredicateSet) -> Filter:
    """The filter of all supersets of s."""
    return _build(s.domain, lambda t: subset(s, t), s, f"principal {s!r}")


def bot(domain: Domain) -> Filter:
    """The degenerate filter: the whole carrier is its only member."""
    return _build(domain, lambda t: t.is_universal(), universal(domain), "bot")


def pushforward(f: Callable[[Any], Any], F: Filter, target: Domain) -> Filter:
    """
    Transport a filter along f: accepts t iff F accepts preimage(f, t).

    Args:
        f: Function from F's carrier into target
        F: Filter on the source carrier
        target: Carrier of the result

    Raises:
        DomainMismatchError: If f sends a source element outside target
    """
    source = F.domain
    check_maps_into(f, source, target)

    name = getattr(f, "__name__", "f")
    return _build(
        target,
        lambda t: F.contains(preimage(f, t, source)),
        image(f, F.kernel, target),
        f"map {name} ({F.description})",
    )
