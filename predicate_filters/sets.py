"""
Predicate Set Module

Sets represented as total membership tests bound to a finite carrier.

Membership (`member`) evaluates the predicate for any value. Subset tests and
equality are extensional over the carrier and are computed on boolean masks.
"""

from typing import Any, Callable, Iterable, Iterator, Optional, Tuple
from dataclasses import dataclass
from functools import cached_property, reduce
import numpy as np

from .constants import REPR_ELEMENT_LIMIT
from .domain import Domain
from .exceptions import DomainMismatchError


@dataclass(frozen=True, eq=False)
class PredicateSet:
    """
    A subset of a carrier given by its membership predicate.

    Attributes:
        domain: Carrier over which extensional questions are decided
        predicate: Total membership test
        label: Optional display name
    """
    domain: Domain
    predicate: Callable[[Any], bool]
    label: Optional[str] = None

    @classmethod
    def from_mask(cls, domain: Domain, mask: np.ndarray, label: Optional[str] = None) -> 'PredicateSet':
        """Build the set whose carrier members are the True positions of a mask."""
        chosen = frozenset(domain.select(mask))
        return cls(domain, chosen.__contains__, label)

    def member(self, x: Any) -> bool:
        """Element-in-set membership."""
        return bool(self.predicate(x))

    def __contains__(self, x: Any) -> bool:
        return self.member(x)

    @cached_property
    def mask(self) -> np.ndarray:
        """Membership of every carrier element, in carrier order."""
        m = self.domain.mask(self.predicate)
        m.setflags(write=False)
        return m

    @cached_property
    def key(self) -> bytes:
        """Packed mask; equal sets on one carrier share a key."""
        return np.packbits(self.mask).tobytes()

    def elements(self) -> Tuple[Any, ...]:
        """Carrier elements in the set."""
        return self.domain.select(self.mask)

    def __len__(self) -> int:
        return int(np.count_nonzero(self.mask))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements())

    def is_empty(self) -> bool:
        return not self.mask.any()

    def is_universal(self) -> bool:
        return bool(self.mask.all())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PredicateSet):
            return NotImplemented
        return self.domain == other.domain and bool(np.array_equal(self.mask, other.mask))

    def __hash__(self) -> int:
        return hash((self.domain, self.key))

    def __or__(self, other: 'PredicateSet') -> 'PredicateSet':
        return union(self, other)

    def __and__(self, other: 'PredicateSet') -> 'PredicateSet':
        return intersection(self, other)

    def __sub__(self, other: 'PredicateSet') -> 'PredicateSet':
        return difference(self, other)

    def __invert__(self) -> 'PredicateSet':
        return complement(self)

    def __le__(self, other: 'PredicateSet') -> bool:
        return subset(self, other)

    def __lt__(self, other: 'PredicateSet') -> bool:
        return subset(self, other) and self != other

    def __repr__(self) -> str:
        if self.label is not None:
            return self.label
        shown = self.elements()
        body = ", ".join(repr(x) for x in shown[:REPR_ELEMENT_LIMIT])
        if len(shown) > REPR_ELEMENT_LIMIT:
            body += f", ... (+{len(shown) - REPR_ELEMENT_LIMIT})"
        return "{" + body + "}"


def _same_domain(*sets: PredicateSet) -> Domain:
    domain = sets[0].domain
    for s in sets[1:]:
        if s.domain is not domain and s.domain != domain:
            raise DomainMismatchError(f"Sets over {domain} and {s.domain} cannot be combined")
    return domain


# ═══════════════════════════════════════════════════════════════════════════
# CONSTANTS
# ═══════════════════════════════════════════════════════════════════════════

def empty(domain: Domain) -> PredicateSet:
    return PredicateSet(domain, lambda x: False, "∅")


def universal(domain: Domain) -> PredicateSet:
    return PredicateSet(domain, lambda x: True, domain.name)


def singleton(domain: Domain, x: Any) -> PredicateSet:
    return PredicateSet(domain, lambda y: y == x)


def from_elements(domain: Domain, elements: Iterable[Any]) -> PredicateSet:
    """Finite set listed by its elements."""
    chosen = frozenset(elements)
    return PredicateSet(domain, chosen.__contains__)


def powerset(domain: Domain, limit: Optional[int] = None) -> Iterator[PredicateSet]:
    """Every subset of the carrier, from the empty set to the whole carrier."""
    for row in domain.powerset_masks(limit):
        yield PredicateSet.from_mask(domain, row)


# ═══════════════════════════════════════════════════════════════════════════
# ALGEBRA
# ═══════════════════════════════════════════════════════════════════════════

def member(x: Any, s: PredicateSet) -> bool:
    return s.member(x)


def union(s: PredicateSet, t: PredicateSet) -> PredicateSet:
    domain = _same_domain(s, t)
    return PredicateSet(domain, lambda x: s.member(x) or t.member(x))


def intersection(s: PredicateSet, t: PredicateSet) -> PredicateSet:
    domain = _same_domain(s, t)
    return PredicateSet(domain, lambda x: s.member(x) and t.member(x))


def complement(s: PredicateSet) -> PredicateSet:
    return PredicateSet(s.domain, lambda x: not s.member(x))


def difference(s: PredicateSet, t: PredicateSet) -> PredicateSet:
    domain = _same_domain(s, t)
    return PredicateSet(domain, lambda x: s.member(x) and not t.member(x))


def insert(x: Any, s: PredicateSet) -> PredicateSet:
    """The set s with one more element."""
    return PredicateSet(s.domain, lambda y: y == x or s.member(y))


def subset(s: PredicateSet, t: PredicateSet) -> bool:
    """∀x in the carrier, member(x, s) ⟹ member(x, t)."""
    _same_domain(s, t)
    return not bool(np.any(s.mask & ~t.mask))


def union_over_family(domain: Domain, family: Iterable[PredicateSet]) -> PredicateSet:
    """Union of a family of sets; the empty family gives the empty set."""
    members = tuple(family)
    if members:
        _same_domain(*members)
    return reduce(union, members, empty(domain))


def intersection_over_family(domain: Domain, family: Iterable[PredicateSet]) -> PredicateSet:
    """Intersection of a family of sets; the empty family gives the whole carrier."""
    members = tuple(family)
    if members:
        _same_domain(*members)
    return reduce(intersection, members, universal(domain))


# ═══════════════════════════════════════════════════════════════════════════
# FUNCTIONS BETWEEN CARRIERS
# ═══════════════════════════════════════════════════════════════════════════

def preimage(f: Callable[[Any], Any], t: PredicateSet, source: Domain) -> PredicateSet:
    """
    Preimage of t under f as a set on the source carrier.

    preimage(f, t)(x) = member(f(x), t)
    """
    return PredicateSet(source, lambda x: t.member(f(x)))


def image(f: Callable[[Any], Any], s: PredicateSet, target: Domain) -> PredicateSet:
    """
    Image of s under f as a set on the target carrier.

    image(f, s)(y) = ∃x in s, f(x) = y
    """
    values = frozenset(f(x) for x in s.elements())
    return PredicateSet(target, values.__contains__)
