"""
Predicate Filters - Sets as Predicates and Filters over Finite Carriers

Sets are total membership tests; filters are families of sets closed under
supersets and finite intersections, built only through law-preserving
combinators. The convergence relation tendsto generalizes limits without
sequences.
"""

__version__ = "0.1.0"

from .domain import Domain
from .sets import (
    PredicateSet,
    complement,
    difference,
    empty,
    from_elements,
    image,
    insert,
    intersection,
    intersection_over_family,
    member,
    powerset,
    preimage,
    singleton,
    subset,
    union,
    union_over_family,
    universal,
)
from .filters import Filter, bot, principal, pushforward
from .closure import (
    GeneratedFilter,
    all_filters,
    comap,
    generated_from,
    infimum,
    smallest_filter_containing,
    supremum,
)
from .classify import (
    Ultrafilter,
    UltrafilterExtension,
    is_degenerate,
    is_ultra,
    ne_bot,
    ultrafilter_extension,
    undecided_set,
)
from .convergence import eventually, frequently, identity, nhds, tends_to, tendsto
from .exceptions import (
    DomainMismatchError,
    EnumerationLimitError,
    FilterError,
    FilterLawViolation,
    NonConstructiveError,
)

__all__ = [
    "Domain",
    "PredicateSet",
    "member",
    "union",
    "intersection",
    "complement",
    "difference",
    "subset",
    "insert",
    "singleton",
    "from_elements",
    "empty",
    "universal",
    "powerset",
    "union_over_family",
    "intersection_over_family",
    "preimage",
    "image",
    "Filter",
    "principal",
    "bot",
    "pushforward",
    "infimum",
    "supremum",
    "generated_from",
    "GeneratedFilter",
    "smallest_filter_containing",
    "comap",
    "all_filters",
    "ne_bot",
    "is_degenerate",
    "is_ultra",
    "undecided_set",
    "Ultrafilter",
    "UltrafilterExtension",
    "ultrafilter_extension",
    "tendsto",
    "tends_to",
    "nhds",
    "identity",
    "eventually",
    "frequently",
    "FilterError",
    "DomainMismatchError",
    "EnumerationLimitError",
    "FilterLawViolation",
    "NonConstructiveError",
]
