"""
Filter Laws Module

Checks whether a membership predicate over sets is a filter on a carrier:

1. the universal set is a member
2. members are closed upward under superset
3. members are closed under pairwise intersection

The predicate is evaluated once per subset of the carrier; the closure laws
are then checked on the resulting membership table with numpy. Subsets are
addressed by bit index (see Domain.powerset_masks).
"""

import logging
from typing import Callable, List, Optional
from dataclasses import dataclass, field
import numpy as np

from .domain import Domain
from .sets import PredicateSet

logger = logging.getLogger(__name__)


@dataclass
class LawViolation:
    """One failed filter law with the sets that witness it."""
    law: str
    sets: List[PredicateSet] = field(default_factory=list)


def membership_table(domain: Domain,
                     accepts: Callable[[PredicateSet], bool],
                     limit: Optional[int] = None) -> np.ndarray:
    """
    Evaluate a predicate over sets on the whole powerset.

    Returns:
        Boolean array of length 2**n indexed by subset bits
    """
    masks = domain.powerset_masks(limit)
    return np.fromiter(
        (bool(accepts(PredicateSet.from_mask(domain, row))) for row in masks),
        dtype=bool,
        count=masks.shape[0],
    )


def kernel_bits(table: np.ndarray) -> int:
    """Bit index of the intersection of all members (all bits when there are none)."""
    rows = np.nonzero(table)[0]
    if rows.size == 0:
        return table.size - 1
    return int(np.bitwise_and.reduce(rows))


def check_filter_laws(domain: Domain,
                      table: np.ndarray) -> List[LawViolation]:
    """
    Check the three filter laws against a membership table.

    Upward closure only needs single-element extensions: if every member
    stays a member after adding any one element, every superset is a member.
    Given upward closure, pairwise intersection closure holds iff the
    intersection of all members is itself a member.

    Args:
        domain: Carrier the table was computed on
        table: Output of membership_table

    Returns:
        List of violations (empty when the predicate is a filter)
    """
    masks = domain.powerset_masks(len(domain))
    to_set = lambda bits: PredicateSet.from_mask(domain, masks[bits])
    violations: List[LawViolation] = []
    full = table.size - 1

    if not table[full]:
        violations.append(LawViolation("universal", [to_set(full)]))

    rows = np.arange(table.size, dtype=np.int64)
    for j in range(len(domain)):
        grown = rows | (1 << j)
        broken = np.nonzero(table & ~table[grown])[0]
        if broken.size:
            i = int(broken[0])
            violations.append(LawViolation("upward", [to_set(i), to_set(int(grown[i]))]))
            break

    members = np.nonzero(table)[0]
    if members.size:
        acc = int(members[0])
        for m in members[1:]:
            meet = acc & int(m)
            if not table[meet]:
                violations.append(LawViolation("intersection", [to_set(acc), to_set(int(m))]))
                break
            acc = meet

    for v in violations:
        logger.debug(f"Filter law '{v.law}' fails on {domain}: {v.sets}")
    return violations
