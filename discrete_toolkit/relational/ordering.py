"""Partial orders (posets) and their Hasse diagrams.

Mathematical definition:
    An ordering on D is a relation ≤ ⊆ D × D that is
        - reflexive:      x ≤ x
        - antisymmetric:  x ≤ y ∧ y ≤ x ⟹ x = y
        - transitive:     x ≤ y ∧ y ≤ z ⟹ x ≤ z

    The covering relation (Hasse diagram) holds the pairs x ⋖ y with x < y
    and nothing strictly between. The order is the reflexive-transitive
    closure of its covering relation.

Construction paths:
    1. from_hasse: covering relation → closure. The closure is well-defined
       for any input, but a cycle in the covers yields a relation that is not
       antisymmetric. By default this only warns (OrderingWarning); pass
       strict=True to reject it.
    2. from_comparator: sort D, reject inconsistent comparators, take adjacent
       pairs as covers. Always produces a linear order.
    3. from_relation_set: validate all three axioms, derive the covers by
       transitive reduction.
"""

import warnings
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Callable, FrozenSet, Iterable, Mapping, Optional, TypeVar

from discrete_toolkit.algebra.sets import Pair, as_pairs, canonical_order
from discrete_toolkit.algorithms import closure, validate
from discrete_toolkit.exceptions import (
    InvalidComparatorError,
    NotAnOrderingError,
    NotASubsetError,
    OrderingWarning,
)
from discrete_toolkit.relational.base import Relational
from discrete_toolkit.relational.relation import Relation


A = TypeVar("A")

Comparator = Callable[[Any, Any], int]


@dataclass(frozen=True)
class Ordering(Relational[A, A]):
    """Partial order on a finite set.

    Attributes:
        domain: Set D (also the codomain)
        covering_relation: Hasse diagram pairs
        relation_set: Full order ≤ ⊆ D × D
        comparator: Comparator the order was built from, if any (not compared)

    The plain constructor checks that the pairs lie in D × D, that
    relation_set is a partial order, and that it is the reflexive-transitive
    closure of covering_relation. Only from_hasse (non-strict, cyclic covers)
    can produce an instance that breaks the order axioms, and it warns.
    """

    domain: FrozenSet[A]
    covering_relation: FrozenSet[Pair]
    relation_set: FrozenSet[Pair]
    comparator: Optional[Comparator] = field(
        default=None, compare=False, hash=False, repr=False
    )

    def __post_init__(self):
        self._normalize()

        if not validate.ordering(self.domain, self.relation_set):
            raise NotAnOrderingError(
                "Relation set is not reflexive, antisymmetric and transitive over "
                "the domain"
            )
        generated = closure.reflexive_transitive_closure(
            self.domain, self.covering_relation
        )
        if generated != self.relation_set:
            raise NotAnOrderingError(
                "Relation set is not the reflexive-transitive closure of the "
                "covering relation"
            )

    def _normalize(self) -> None:
        object.__setattr__(self, "domain", frozenset(self.domain))
        object.__setattr__(self, "covering_relation", as_pairs(self.covering_relation))
        object.__setattr__(self, "relation_set", as_pairs(self.relation_set))

        for p in self.covering_relation | self.relation_set:
            if p.a not in self.domain or p.b not in self.domain:
                raise NotASubsetError(f"Pair {p} is not contained in domain × domain")

    @classmethod
    def _unchecked(cls, domain, covering_relation, relation_set) -> "Ordering":
        # Skips the order axioms; containment is still enforced.
        ordering = cls.__new__(cls)
        object.__setattr__(ordering, "domain", domain)
        object.__setattr__(ordering, "covering_relation", covering_relation)
        object.__setattr__(ordering, "relation_set", relation_set)
        object.__setattr__(ordering, "comparator", None)
        ordering._normalize()
        return ordering

    @property
    def codomain(self) -> FrozenSet[A]:
        return self.domain

    @classmethod
    def from_hasse(
        cls, covers: Mapping[A, Iterable[A]], strict: bool = False
    ) -> "Ordering[A]":
        """Build the order generated by a covering relation.

        Parameters:
            covers: Element → its direct successors
            strict: Raise instead of warn when the result is not antisymmetric

        Returns:
            Ordering with relation_set = reflexive closure of the transitive
            closure of the covers over D = keys ∪ successors

        Raises:
            NotAnOrderingError: If strict and the covers contain a cycle

        Note:
            Acyclicity of the covers is not a precondition of the closure, so
            without strict=True a cyclic input still produces an Ordering
            instance whose relation_set violates antisymmetry. A warning is
            emitted in that case.
        """
        covering = frozenset(
            Pair(x, y) for x, successors in covers.items() for y in successors
        )
        domain = frozenset(covers.keys()) | frozenset(p.b for p in covering)
        relation_set = closure.reflexive_transitive_closure(domain, covering)

        if not validate.antisymmetry(relation_set):
            message = (
                "Covering relation contains a cycle; the generated relation is "
                "not antisymmetric"
            )
            if strict:
                raise NotAnOrderingError(message)
            warnings.warn(message, OrderingWarning)
            return cls._unchecked(domain, covering, relation_set)

        return cls(domain, covering, relation_set)

    @classmethod
    def from_comparator(
        cls, domain: Iterable[A], comparator: Comparator
    ) -> "Ordering[A]":
        """Build a linear order from a total-order comparator.

        Algorithm:
            1. Sort D (canonical order first, so ties are deterministic)
            2. Scan adjacent pairs; any compare(x_i, x_{i+1}) > 0 means the
               comparator is inconsistent with a linear order
            3. Covers = {(x_i, x_{i+1})}, order = reflexive-transitive closure

        Raises:
            InvalidComparatorError: If the scan finds an inversion
        """
        elements = sorted(canonical_order(domain), key=cmp_to_key(comparator))

        if not validate.comparator(elements, comparator):
            raise InvalidComparatorError(
                "Comparator must be consistent with a linear ordering"
            )

        covering = frozenset(Pair(x, y) for x, y in zip(elements, elements[1:]))
        relation_set = closure.reflexive_transitive_closure(elements, covering)

        return cls(frozenset(elements), covering, relation_set, comparator)

    @classmethod
    def from_relation_set(
        cls, domain: Iterable[A], relation_set: Iterable[Any]
    ) -> "Ordering[A]":
        """Adopt an existing relation after checking the partial-order axioms.

        Raises:
            NotAnOrderingError: If R is not reflexive, antisymmetric and
                transitive over D
        """
        domain = frozenset(domain)
        pairs = as_pairs(relation_set)

        if not validate.ordering(domain, pairs):
            failed = [
                axiom.value
                for axiom, ok in validate.audit(domain, pairs).items()
                if not ok and axiom != validate.Axiom.SYMMETRY
            ]
            raise NotAnOrderingError(
                "Relation is not a partial order over its domain "
                f"(fails: {', '.join(failed)})"
            )

        return cls(domain, closure.transitive_reduction(domain, pairs), pairs)

    def to_relation(self) -> Relation[A, A]:
        return Relation(self.domain, self.domain, self.relation_set)

    def less_or_equal(self, a: A, b: A) -> bool:
        return self.relates(a, b)

    def minimal_elements(self) -> FrozenSet[A]:
        """Elements with no strict predecessor."""
        return frozenset(
            x for x in self.domain
            if not any(p.b == x and p.a != x for p in self.relation_set)
        )

    def maximal_elements(self) -> FrozenSet[A]:
        """Elements with no strict successor."""
        return frozenset(
            x for x in self.domain
            if not any(p.a == x and p.b != x for p in self.relation_set)
        )

    def is_linear(self) -> bool:
        """True if every two elements are comparable (a chain)."""
        elements = canonical_order(self.domain)
        return all(
            self.relates(x, y) or self.relates(y, x)
            for i, x in enumerate(elements)
            for y in elements[i + 1:]
        )

    def __str__(self) -> str:
        covers = ", ".join(str(p) for p in canonical_order(self.covering_relation))
        return (
            f"Ordering(covering relation = {{{covers}}}, "
            f"relation set = {self._pairs_str()})"
        )
