"""
Tests for Ordering construction paths and poset queries

Checks:
1. from_comparator builds a linear order and rejects inconsistent comparators
2. from_hasse closes covers; cyclic covers warn or raise
3. from_relation_set validates the axioms and recovers covers
4. minimal / maximal elements, linearity
5. The plain constructor rejects relations that are not partial orders
"""

import warnings

import pytest

from discrete_toolkit.algorithms import validate
from discrete_toolkit.exceptions import (
    InvalidComparatorError,
    NotAnOrderingError,
    NotASubsetError,
    OrderingWarning,
)
from discrete_toolkit.relational import Ordering


DIVISORS_OF_SIX = {1, 2, 3, 6}
DIVIDES = {(a, b) for a in DIVISORS_OF_SIX for b in DIVISORS_OF_SIX if b % a == 0}


class TestFromComparator:
    """Tests for Ordering.from_comparator"""

    def test_numeric_chain(self) -> None:
        order = Ordering.from_comparator({3, 1, 2}, lambda a, b: a - b)
        assert order.covering_relation == {(1, 2), (2, 3)}
        assert order.relation_set == {(1, 1), (2, 2), (3, 3), (1, 2), (2, 3), (1, 3)}
        assert order.is_linear()

    def test_result_is_partial_order(self) -> None:
        order = Ordering.from_comparator(["b", "c", "a"], lambda a, b: (a > b) - (a < b))
        assert validate.ordering(order.domain, order.relation_set)
        assert order.less_or_equal("a", "c")
        assert not order.less_or_equal("c", "a")

    def test_inconsistent_comparator_rejected(self) -> None:
        with pytest.raises(InvalidComparatorError):
            Ordering.from_comparator({1, 2, 3}, lambda a, b: 1)

    def test_single_element(self) -> None:
        order = Ordering.from_comparator({7}, lambda a, b: 1)
        assert order.relation_set == {(7, 7)}
        assert order.covering_relation == frozenset()

    def test_comparator_not_compared(self) -> None:
        a = Ordering.from_comparator({1, 2}, lambda x, y: x - y)
        b = Ordering.from_comparator({1, 2}, lambda x, y: (x > y) - (x < y))
        assert a == b


class TestFromHasse:
    """Tests for Ordering.from_hasse"""

    def test_diamond(self) -> None:
        order = Ordering.from_hasse({"0": {"a", "b"}, "a": {"1"}, "b": {"1"}})
        assert order.domain == {"0", "a", "b", "1"}
        assert order.less_or_equal("0", "1")
        assert not order.less_or_equal("a", "b")
        assert not order.is_linear()
        assert validate.ordering(order.domain, order.relation_set)

    def test_successor_only_elements_in_domain(self) -> None:
        order = Ordering.from_hasse({1: {2}})
        assert order.domain == {1, 2}

    def test_cycle_warns(self) -> None:
        with pytest.warns(OrderingWarning):
            order = Ordering.from_hasse({1: {2}, 2: {1}})
        assert not validate.antisymmetry(order.relation_set)

    def test_cycle_strict_raises(self) -> None:
        with pytest.raises(NotAnOrderingError):
            Ordering.from_hasse({1: {2}, 2: {1}}, strict=True)

    def test_acyclic_does_not_warn(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Ordering.from_hasse({1: {2}, 2: {3}})


class TestFromRelationSet:
    """Tests for Ordering.from_relation_set"""

    def test_divisibility(self) -> None:
        order = Ordering.from_relation_set(DIVISORS_OF_SIX, DIVIDES)
        assert order.covering_relation == {(1, 2), (1, 3), (2, 6), (3, 6)}
        assert order.relation_set == DIVIDES

    def test_not_reflexive_rejected(self) -> None:
        with pytest.raises(NotAnOrderingError, match="reflexivity"):
            Ordering.from_relation_set({1, 2}, {(1, 2)})

    def test_symmetric_rejected(self) -> None:
        with pytest.raises(NotAnOrderingError, match="antisymmetry"):
            Ordering.from_relation_set({1, 2}, {(1, 1), (2, 2), (1, 2), (2, 1)})

    def test_pairs_outside_domain_rejected(self) -> None:
        with pytest.raises(NotASubsetError):
            Ordering({1}, set(), {(1, 2)})


class TestConstructor:
    """The plain Ordering constructor enforces the order axioms"""

    def test_symmetric_pair_rejected(self) -> None:
        with pytest.raises(NotAnOrderingError):
            Ordering({1, 2}, set(), {(1, 2), (2, 1)})

    def test_missing_reflexive_pair_rejected(self) -> None:
        with pytest.raises(NotAnOrderingError):
            Ordering({1, 2}, {(1, 2)}, {(1, 1), (1, 2)})

    def test_covers_must_generate_relation_set(self) -> None:
        """A valid order paired with covers that generate a different one"""
        with pytest.raises(NotAnOrderingError):
            Ordering({1, 2}, set(), {(1, 1), (2, 2), (1, 2)})

    def test_valid_order_accepted(self) -> None:
        order = Ordering({1, 2}, {(1, 2)}, {(1, 1), (2, 2), (1, 2)})
        assert order == Ordering.from_comparator({1, 2}, lambda a, b: a - b)

    def test_cyclic_hasse_still_builds_with_warning(self) -> None:
        with pytest.warns(OrderingWarning):
            order = Ordering.from_hasse({"x": {"y"}, "y": {"x"}})
        assert order.relation_set == {("x", "x"), ("x", "y"), ("y", "x"), ("y", "y")}


class TestQueries:
    """Tests for extremal elements and formatting"""

    def test_extremal_elements(self) -> None:
        order = Ordering.from_relation_set(DIVISORS_OF_SIX, DIVIDES)
        assert order.minimal_elements() == {1}
        assert order.maximal_elements() == {6}

    def test_antichain_extremal(self) -> None:
        order = Ordering.from_hasse({1: set(), 2: set()})
        assert order.minimal_elements() == {1, 2}
        assert order.maximal_elements() == {1, 2}
        assert not order.is_linear()

    def test_codomain_is_domain(self) -> None:
        order = Ordering.from_comparator({1, 2}, lambda a, b: a - b)
        assert order.codomain == order.domain

    def test_str(self) -> None:
        order = Ordering.from_comparator({1, 2}, lambda a, b: a - b)
        assert str(order) == (
            "Ordering(covering relation = {(1, 2)}, "
            "relation set = {(1, 1), (1, 2), (2, 2)})"
        )
