"""Relational capability shared by Relation, Mapping and Ordering.

A relational structure is a triple (D, C, R) with R ⊆ D × C:
    - domain D
    - codomain C
    - relation_set R, a frozenset of Pairs

The family is closed: exactly Relation, Mapping and Ordering realize it.
Code that dispatches on the concrete kind should annotate with RelationalKind
(a Union of the three) so type checkers can verify exhaustiveness.
"""

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Generic, List, TypeVar

from discrete_toolkit.algebra.sets import Pair, canonical_key
from discrete_toolkit.algorithms.closure import adjacency_matrix_of
from discrete_toolkit.matrix.matrix import Matrix


A = TypeVar("A")
B = TypeVar("B")

_PERMITTED = {
    ("discrete_toolkit.relational.relation", "Relation"),
    ("discrete_toolkit.relational.mapping", "Mapping"),
    ("discrete_toolkit.relational.ordering", "Ordering"),
}


class Relational(ABC, Generic[A, B]):
    """Abstract base for relational structures (D, C, R).

    Invariant maintained by every realization:
        ∀(a, b) ∈ R. a ∈ D ∧ b ∈ C
    """

    domain: FrozenSet[A]
    codomain: FrozenSet[B]
    relation_set: FrozenSet[Pair]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if (cls.__module__, cls.__name__) not in _PERMITTED:
            raise TypeError(
                f"{cls.__name__} cannot extend Relational; the realizations are "
                "Relation, Mapping and Ordering"
            )

    @abstractmethod
    def to_relation(self) -> "Relational[A, B]":
        """View this structure as a general Relation over the same (D, C, R)."""

    def relates(self, a: Any, b: Any) -> bool:
        """O(1) membership test (a, b) ∈ R."""
        return Pair(a, b) in self.relation_set

    def size(self) -> int:
        """|R|."""
        return len(self.relation_set)

    def sorted_pairs(self) -> List[Pair]:
        """R in canonical order (by first, then second component)."""
        return sorted(
            self.relation_set, key=lambda p: (canonical_key(p.a), canonical_key(p.b))
        )

    def adjacency_matrix(self) -> Matrix:
        return adjacency_matrix_of(self)

    def inverse(self):
        """R⁻¹ = {(b, a) : (a, b) ∈ R} as a Relation from C to D."""
        from discrete_toolkit.relational.relation import Relation

        return Relation(
            self.codomain,
            self.domain,
            frozenset(Pair(b, a) for a, b in self.relation_set),
        )

    def _pairs_str(self) -> str:
        return "{" + ", ".join(str(p) for p in self.sorted_pairs()) + "}"
