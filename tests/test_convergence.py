"""
Tests for tendsto, limits and eventually/frequently
"""

import pytest

from predicate_filters.closure import all_filters, infimum
from predicate_filters.convergence import (
    eventually,
    frequently,
    identity,
    nhds,
    tends_to,
    tendsto,
)
from predicate_filters.domain import Domain
from predicate_filters.exceptions import DomainMismatchError
from predicate_filters.filters import bot, principal, pushforward
from predicate_filters.sets import from_elements, singleton


@pytest.fixture
def abc():
    return Domain.of("abc", name="ABC")


class TestTendsto:
    def test_reflexive(self, abc):
        for F in all_filters(abc):
            assert tendsto(identity, F, F)

    def test_matches_pushforward_order(self):
        source = Domain.of(range(4))
        target = Domain.of(range(2))
        f = lambda x: x % 2
        for F in all_filters(source):
            for G in all_filters(target):
                assert tendsto(f, F, G) == (pushforward(f, F, target) <= G)

    def test_composition(self):
        a = Domain.of(range(4))
        b = Domain.of(range(2))
        c = Domain.of("xy")
        f = lambda x: x // 2
        g = lambda y: "xy"[y]
        F = principal(from_elements(a, [0, 1]))
        G = pushforward(f, F, b)
        H = pushforward(g, G, c)
        assert tendsto(f, F, G)
        assert tendsto(g, G, H)
        assert tendsto(lambda x: g(f(x)), F, H)

    def test_fails_when_target_accepts_less(self, abc):
        F = principal(singleton(abc, "a"))
        assert not tendsto(identity, F, bot(abc))
        assert tendsto(identity, bot(abc), F)

    def test_function_leaving_target_rejected(self):
        source = Domain.of(range(3))
        target = Domain.of("ab")
        F = principal(from_elements(source, [0]))
        with pytest.raises(DomainMismatchError):
            tendsto(lambda x: 99, F, bot(target))
        with pytest.raises(DomainMismatchError):
            pushforward(lambda x: 99, F, target)


class TestLimits:
    def test_nhds_is_principal_singleton(self, abc):
        assert nhds(abc, "a") == principal(singleton(abc, "a"))

    def test_nhds_tends_to_its_point(self, abc):
        assert tends_to(nhds(abc, "b"), "b")
        assert not tends_to(nhds(abc, "b"), "a")

    def test_tends_to_points_of_kernel(self, abc):
        F = infimum([nhds(abc, "a"), nhds(abc, "c")])
        assert tends_to(F, "a")
        assert tends_to(F, "c")
        assert not tends_to(F, "b")


class TestEventually:
    def test_eventually(self):
        d = Domain.of(range(10))
        F = principal(from_elements(d, [6, 7, 8]))
        assert eventually(lambda x: x > 5, F)
        assert not eventually(lambda x: x > 6, F)

    def test_frequently(self):
        d = Domain.of(range(10))
        F = principal(from_elements(d, [6, 7, 8]))
        assert frequently(lambda x: x == 7, F)
        assert not frequently(lambda x: x < 5, F)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
