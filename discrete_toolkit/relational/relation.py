"""General binary relations R ⊆ D × C."""

from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Iterable, Tuple, TypeVar

from discrete_toolkit.algebra.sets import Pair, as_pairs, canonical_order, product
from discrete_toolkit.algorithms import closure
from discrete_toolkit.exceptions import NotASquareMatrixError, NotASubsetError
from discrete_toolkit.relational.base import Relational


A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Relation(Relational[A, B]):
    """Binary relation with explicit domain and codomain.

    Attributes:
        domain: Set D
        codomain: Set C
        relation_set: Pairs (a, b) ⊆ D × C

    Invariants maintained:
        - Every pair has a ∈ D and b ∈ C (checked at construction)

    Construction:
        Relation(D, C, R)                     explicit, R validated against D × C
        Relation.from_predicate(D, C, p)      R = {(a, b) ∈ D × C : p(a, b)}
        Relation.from_pairs(R)                D, C inferred as projections of R
    """

    domain: FrozenSet[A]
    codomain: FrozenSet[B]
    relation_set: FrozenSet[Pair]

    def __post_init__(self):
        object.__setattr__(self, "domain", frozenset(self.domain))
        object.__setattr__(self, "codomain", frozenset(self.codomain))
        object.__setattr__(self, "relation_set", as_pairs(self.relation_set))

        stray = [
            p
            for p in self.relation_set
            if p.a not in self.domain or p.b not in self.codomain
        ]
        if stray:
            raise NotASubsetError(
                f"Relation set is not a subset of domain × codomain: "
                f"{', '.join(str(p) for p in canonical_order(stray))}"
            )

    @classmethod
    def from_predicate(
        cls,
        domain: Iterable[A],
        codomain: Iterable[B],
        predicate: Callable[[A, B], bool],
    ) -> "Relation[A, B]":
        """Relation defined by a necessary and sufficient condition.

        Complexity:
            O(|D|·|C|) predicate evaluations
        """
        domain = frozenset(domain)
        codomain = frozenset(codomain)
        pairs = frozenset(p for p in product(domain, codomain) if predicate(p.a, p.b))
        return cls(domain, codomain, pairs)

    @classmethod
    def from_pairs(cls, relation_set: Iterable[Tuple[A, B]]) -> "Relation[A, B]":
        """Relation whose domain and codomain are the smallest sets containing R."""
        pairs = as_pairs(relation_set)
        return cls(
            frozenset(p.a for p in pairs), frozenset(p.b for p in pairs), pairs
        )

    def to_relation(self) -> "Relation[A, B]":
        return self

    def predicate(self) -> Callable[[Any, Any], bool]:
        """Membership predicate (a, b) ↦ (a, b) ∈ R."""
        return self.relates

    def _require_homogeneous(self) -> None:
        if self.domain != self.codomain:
            raise NotASquareMatrixError(
                "Closure requires a relation on a single set (domain == codomain)"
            )

    def reflexive_closure(self) -> "Relation[A, A]":
        self._require_homogeneous()
        return Relation(
            self.domain,
            self.codomain,
            closure.reflexive_closure(self.domain, self.relation_set),
        )

    def transitive_closure(self) -> "Relation[A, A]":
        self._require_homogeneous()
        return Relation(
            self.domain,
            self.codomain,
            closure.transitive_closure(self.domain, self.relation_set),
        )

    def reflexive_transitive_closure(self) -> "Relation[A, A]":
        self._require_homogeneous()
        return Relation(
            self.domain,
            self.codomain,
            closure.reflexive_transitive_closure(self.domain, self.relation_set),
        )

    def __str__(self) -> str:
        return f"Relation = {self._pairs_str()}"
