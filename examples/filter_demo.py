"""
Example: Filters and Limits on a Small Carrier

This example builds filters with each combinator and asks which sets they
accept, whether they are ultrafilters, and where they converge.
"""

import logging

from predicate_filters import (
    Domain,
    PredicateSet,
    from_elements,
    generated_from,
    infimum,
    is_ultra,
    nhds,
    principal,
    pushforward,
    tends_to,
    tendsto,
)


def main():
    logging.basicConfig(level=logging.INFO)

    print("=" * 60)
    print("Predicate Filters Demo")
    print("=" * 60)
    print()

    # Example 1: principal and infimum
    print("Example 1: Principal filters and their infimum")
    print("-" * 60)

    naturals = Domain.of(range(6), name="N")
    F1 = principal(from_elements(naturals, [1]))
    F2 = principal(from_elements(naturals, [2]))
    inf = infimum([F1, F2])

    for elements in ([1, 2], [1], [1, 2, 3]):
        t = from_elements(naturals, elements)
        print(f"   {inf!r} accepts {t!r}: {inf.contains(t)}")

    print("\n" + "=" * 60)
    print()

    # Example 2: generated filter with witnesses
    print("Example 2: Filter generated by a family")
    print("-" * 60)

    low = PredicateSet(naturals, lambda x: x < 4, "x < 4")
    odd = PredicateSet(naturals, lambda x: x % 2 == 1, "odd")
    G = generated_from(naturals, [low, odd])
    target = from_elements(naturals, [1, 3, 5])
    print(f"   kernel: {G.kernel!r}")
    print(f"   accepts {target!r} via witness {G.witness(target)!r}")

    print("\n" + "=" * 60)
    print()

    # Example 3: pushforward and convergence
    print("Example 3: Pushforward and tendsto")
    print("-" * 60)

    doubled = Domain.of(range(12), name="M")
    double = lambda x: 2 * x
    mapped = pushforward(double, F1, doubled)
    print(f"   map(2x) of {F1!r} accepts {{2, 4, 6}}: "
          f"{mapped.contains(from_elements(doubled, [2, 4, 6]))}")
    print(f"   tendsto(2x, F1, nhds(2)): {tendsto(double, F1, nhds(doubled, 2))}")
    print(f"   F1 tends to 1: {tends_to(F1, 1)}")
    print(f"   F1 is an ultrafilter: {is_ultra(F1)}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
