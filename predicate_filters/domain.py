"""
Domain Module

Finite carriers over which predicate sets and filters are decided.

A predicate set is a total membership test, but questions that quantify over
elements ("is s a subset of t?") or over sets ("is every superset accepted?")
are only decidable over an explicit, finite carrier. A Domain fixes the
element order so that sets become boolean masks (numpy arrays) and the
powerset becomes a bit-indexed table.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple
from dataclasses import dataclass, field
from functools import cached_property
import numpy as np

from .constants import MAX_ENUMERATION_ELEMENTS, DEFAULT_DOMAIN_NAME
from .exceptions import EnumerationLimitError


@dataclass(frozen=True)
class Domain:
    """
    Ordered, duplicate-free finite carrier.

    Attributes:
        elements: Carrier elements (hashable, in mask order)
        name: Display name; not part of equality
    """
    elements: Tuple[Any, ...]
    name: str = field(default=DEFAULT_DOMAIN_NAME, compare=False)

    def __post_init__(self):
        try:
            distinct = len(set(self.elements))
        except TypeError as e:
            raise ValueError(f"Domain {self.name} has unhashable elements: {e}") from e
        if distinct != len(self.elements):
            raise ValueError(f"Domain {self.name} has duplicate elements")

    @classmethod
    def of(cls, elements: Iterable[Any], name: str = DEFAULT_DOMAIN_NAME) -> 'Domain':
        """Build a carrier from any iterable of hashable elements."""
        return cls(elements=tuple(elements), name=name)

    @cached_property
    def _positions(self) -> Dict[Any, int]:
        return {x: i for i, x in enumerate(self.elements)}

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)

    def __contains__(self, x: Any) -> bool:
        try:
            return x in self._positions
        except TypeError:
            # unhashable values are never carrier elements
            return False

    def mask(self, predicate: Callable[[Any], bool]) -> np.ndarray:
        """Evaluate a membership predicate on every element."""
        return np.fromiter(
            (bool(predicate(x)) for x in self.elements),
            dtype=bool,
            count=len(self.elements),
        )

    def select(self, mask: np.ndarray) -> Tuple[Any, ...]:
        """Elements chosen by a boolean mask."""
        return tuple(x for x, keep in zip(self.elements, mask) if keep)

    def check_enumerable(self, limit: Optional[int] = None) -> None:
        """Raise EnumerationLimitError if the powerset is too large to walk."""
        limit = MAX_ENUMERATION_ELEMENTS if limit is None else limit
        if len(self.elements) > limit:
            raise EnumerationLimitError(len(self.elements), limit)

    def powerset_masks(self, limit: Optional[int] = None) -> np.ndarray:
        """
        Boolean table of every subset of the carrier.

        Row i contains element j iff bit j of i is set, so row 0 is the empty
        set and the last row is the whole carrier.

        Args:
            limit: Maximum carrier size (defaults to MAX_ENUMERATION_ELEMENTS)

        Returns:
            Array of shape (2**n, n)
        """
        self.check_enumerable(limit)
        n = len(self.elements)
        rows = np.arange(1 << n, dtype=np.int64)
        return ((rows[:, None] >> np.arange(n, dtype=np.int64)) & 1).astype(bool)

    def __repr__(self) -> str:
        return f"Domain({self.name}, n={len(self.elements)})"
