"""
Tests for infimum, supremum and generated filters
"""

import pytest

from predicate_filters.closure import (
    GeneratedFilter,
    all_filters,
    comap,
    generated_from,
    infimum,
    smallest_filter_containing,
    supremum,
)
from predicate_filters.domain import Domain
from predicate_filters.exceptions import DomainMismatchError
from predicate_filters.filters import bot, principal
from predicate_filters.laws import check_filter_laws, membership_table
from predicate_filters.sets import (
    empty,
    from_elements,
    intersection_over_family,
    powerset,
    preimage,
    subset,
    universal,
)


@pytest.fixture
def ints():
    return Domain.of(range(1, 5), name="I")


class TestInfimum:
    def test_infimum_example(self, ints):
        F1 = principal(from_elements(ints, [1]))
        F2 = principal(from_elements(ints, [2]))
        inf = infimum([F1, F2])
        assert inf.contains(from_elements(ints, [1, 2]))
        assert not inf.contains(from_elements(ints, [1]))

    def test_infimum_is_conjunction(self, ints):
        filters = [principal(from_elements(ints, xs)) for xs in ([1], [2, 3], [1, 4])]
        inf = infimum(filters)
        for t in powerset(ints):
            assert inf.contains(t) == all(F.contains(t) for F in filters)
        assert inf.kernel == from_elements(ints, [1, 2, 3, 4])

    def test_infimum_is_lower_bound(self, ints):
        filters = [principal(from_elements(ints, xs)) for xs in ([1], [3])]
        inf = infimum(filters)
        for F in filters:
            assert inf <= F

    def test_infimum_satisfies_laws(self, ints):
        inf = infimum([principal(from_elements(ints, [2])), bot(ints)])
        assert check_filter_laws(ints, membership_table(ints, inf.contains)) == []

    def test_empty_infimum(self, ints):
        top = infimum([], domain=ints)
        assert top.contains(empty(ints))
        assert top == principal(empty(ints))

    def test_empty_infimum_needs_domain(self):
        with pytest.raises(ValueError):
            infimum([])

    def test_mixed_domains(self, ints):
        with pytest.raises(DomainMismatchError):
            infimum([bot(ints), bot(Domain.of("ab"))])


class TestGeneratedFrom:
    def test_single_set_is_principal(self, ints):
        sets = list(powerset(ints))
        for s in sets:
            G = generated_from(ints, [s])
            assert G == principal(s)
            for t in sets:
                assert G.contains(t) == principal(s).contains(t)

    def test_empty_family_is_bot(self, ints):
        G = generated_from(ints, [])
        assert G == bot(ints)
        assert G.witness(universal(ints)) == ()
        assert G.witness(from_elements(ints, [1, 2])) is None

    def test_finite_intersection_membership(self, ints):
        a = from_elements(ints, [1, 2, 3])
        b = from_elements(ints, [2, 3, 4])
        G = generated_from(ints, [a, b])
        assert isinstance(G, GeneratedFilter)
        assert G.contains(from_elements(ints, [2, 3]))
        assert G.contains(a)
        assert not G.contains(from_elements(ints, [2]))

    def test_witness_is_minimal(self, ints):
        a = from_elements(ints, [1, 2, 3])
        b = from_elements(ints, [2, 3, 4])
        c = from_elements(ints, [1, 2, 3, 4])
        G = generated_from(ints, [a, b, c])
        assert G.witness(a) == (a,)
        w = G.witness(from_elements(ints, [2, 3]))
        assert set(w) == {a, b}
        assert subset(intersection_over_family(ints, w), from_elements(ints, [2, 3]))

    def test_duplicates_removed(self, ints):
        a = from_elements(ints, [1, 2])
        G = generated_from(ints, [a, from_elements(ints, [2, 1])])
        assert G.base == (a,)

    def test_predicate_family(self, ints):
        # every set containing both 1 and 2, given as a predicate over sets
        G = generated_from(ints, lambda s: 1 in s and 2 in s)
        assert G == principal(from_elements(ints, [1, 2]))
        assert G.contains(from_elements(ints, [1, 2, 4]))
        assert not G.contains(from_elements(ints, [1, 3]))

    def test_matches_quantified_definition(self):
        d = Domain.of("abc")
        sets = list(powerset(d))
        families = [[], [sets[1]], [sets[3], sets[6]], [sets[1], sets[2]], [sets[5], sets[6], sets[7]]]
        for family in families:
            G = generated_from(d, family)
            H = smallest_filter_containing(d, family)
            assert G == H
            for t in sets:
                assert G.contains(t) == H.contains(t)

    def test_smallest_among_containing_filters(self):
        d = Domain.of("abc")
        family = [from_elements(d, "ab"), from_elements(d, "bc")]
        G = generated_from(d, family)
        for F in all_filters(d):
            if all(F.contains(s) for s in family):
                assert G <= F
        for s in family:
            assert G.contains(s)

    def test_generated_satisfies_laws(self, ints):
        G = generated_from(ints, [from_elements(ints, [1, 2]), from_elements(ints, [2, 4])])
        assert check_filter_laws(ints, membership_table(ints, G.contains)) == []

    def test_foreign_family_rejected(self, ints):
        with pytest.raises(DomainMismatchError):
            generated_from(ints, [universal(Domain.of("ab"))])


class TestSupremum:
    def test_supremum_is_upper_bound(self, ints):
        filters = [principal(from_elements(ints, xs)) for xs in ([1, 2], [2, 3])]
        sup = supremum(filters)
        assert sup == principal(from_elements(ints, [2]))
        for F in filters:
            assert F <= sup

    def test_empty_supremum(self, ints):
        assert supremum([], domain=ints) == bot(ints)


class TestComap:
    def test_comap_of_principal(self):
        source = Domain.of(range(6))
        target = Domain.of(range(3))
        f = lambda x: x % 3
        G = principal(from_elements(target, [1]))
        C = comap(f, G, source)
        assert C == principal(from_elements(source, [1, 4]))
        for t in powerset(target):
            if G.contains(t):
                assert C.contains(preimage(f, t, source))


class TestAllFilters:
    def test_one_filter_per_subset(self):
        d = Domain.of("ab")
        filters = list(all_filters(d))
        assert len(filters) == 4
        assert len(set(filters)) == 4
        assert bot(d) in filters


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
