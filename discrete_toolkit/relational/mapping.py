"""Mappings: total, single-valued relations f: D → C.

Mathematical definition:
    A relation f ⊆ D × C is a mapping iff for every x ∈ D there is exactly
    one y ∈ C with (x, y) ∈ f. We write f(x) = y.

Composition:
    For f: A → B and g: B' → C with B ⊆ B', the composite g ∘ f: A → C is
    x ↦ g(f(x)). Only inclusion B ⊆ B' is required, not equality, so a
    mapping may be composed with one defined on a strictly larger set.
    Composition is associative: h ∘ (g ∘ f) = (h ∘ g) ∘ f.
"""

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from typing import Any, Callable, FrozenSet, Iterable, Optional, TypeVar

from discrete_toolkit.algebra.sets import (
    Pair,
    canonical_order,
    canonical_str,
    is_subset,
)
from discrete_toolkit.algorithms import validate
from discrete_toolkit.exceptions import (
    InvalidCodomainError,
    NotAMappingError,
    NotASubsetError,
)
from discrete_toolkit.relational.base import Relational
from discrete_toolkit.relational.relation import Relation


A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True, init=False)
class Mapping(Relational[A, B]):
    """Total function from a finite domain.

    Attributes:
        domain: Set D
        codomain: Set C ⊇ f(D)
        relation_set: Graph of f, {(x, f(x)) : x ∈ D}
        function: Callable consistent with relation_set (not compared)

    Construction:
        Mapping(D, f)                 codomain inferred as the image f(D),
                                      so the mapping is surjective
        Mapping(D, f, codomain=C)     fails if f(D) ⊄ C
        Mapping.from_relation(R)      fails unless R is total and single-valued
        Mapping.from_dict(table)      D = keys, codomain = values (or given)
    """

    domain: FrozenSet[A]
    codomain: FrozenSet[B]
    relation_set: FrozenSet[Pair]
    function: Callable[[A], B] = field(compare=False, hash=False, repr=False)

    def __init__(
        self,
        domain: Iterable[A],
        function: Callable[[A], B],
        codomain: Optional[Iterable[B]] = None,
    ):
        domain = frozenset(domain)
        graph = frozenset(Pair(x, function(x)) for x in domain)

        if codomain is None:
            codomain = frozenset(p.b for p in graph)
        else:
            codomain = frozenset(codomain)
            outside = [p for p in graph if p.b not in codomain]
            if outside:
                raise InvalidCodomainError(
                    "Invalid codomain for specified domain and function: "
                    + ", ".join(
                        f"f({p.a}) = {p.b}" for p in canonical_order(outside)
                    )
                    + " not in codomain"
                )

        object.__setattr__(self, "domain", domain)
        object.__setattr__(self, "codomain", codomain)
        object.__setattr__(self, "relation_set", graph)
        object.__setattr__(self, "function", function)

    @classmethod
    def from_relation(cls, relation: Relation[A, B]) -> "Mapping[A, B]":
        """Reinterpret a relation as a mapping.

        Raises:
            NotAMappingError: If some domain element has zero or several images

        Complexity:
            O(|R|) using a grouped count
        """
        if not validate.functionality(relation.domain, relation.relation_set):
            raise NotAMappingError("Specified relation is not a mapping")

        table = {p.a: p.b for p in relation.relation_set}
        return cls(relation.domain, table.__getitem__, codomain=relation.codomain)

    @classmethod
    def from_dict(
        cls, table: MappingABC, codomain: Optional[Iterable[B]] = None
    ) -> "Mapping[A, B]":
        table = dict(table)
        return cls(table.keys(), table.__getitem__, codomain=codomain)

    def to_relation(self) -> Relation[A, B]:
        return Relation(self.domain, self.codomain, self.relation_set)

    def maps(self, x: Any, y: Any) -> bool:
        """True if f(x) = y."""
        return self.relates(x, y)

    def image_of(self, x: A) -> B:
        """f(x).

        Raises:
            NotASubsetError: If x ∉ D
        """
        if x not in self.domain:
            raise NotASubsetError(f"{x} is not in the domain of the mapping")
        return self.function(x)

    def image_of_set(self, subset: Iterable[A]) -> FrozenSet[B]:
        """f(S) = {f(x) : x ∈ S}.

        Raises:
            NotASubsetError: If S ⊄ D
        """
        subset = frozenset(subset)
        if not is_subset(subset, self.domain):
            raise NotASubsetError(
                "Cannot take image of a set that is not a subset of the domain"
            )
        return frozenset(self.function(x) for x in subset)

    def compose(self, after: "Mapping[B, C]") -> "Mapping[A, C]":
        """Composite after ∘ self: D → after.codomain.

        Raises:
            InvalidCodomainError: If self.codomain ⊄ after.domain
        """
        if not is_subset(self.codomain, after.domain):
            raise InvalidCodomainError(
                "Codomain of first mapping must be a subset of the domain of the "
                "second mapping"
            )

        f, g = self.function, after.function
        return Mapping(self.domain, lambda x: g(f(x)), codomain=after.codomain)

    def image(self) -> FrozenSet[B]:
        return frozenset(p.b for p in self.relation_set)

    def is_injective(self) -> bool:
        return len(self.image()) == len(self.domain)

    def is_surjective(self) -> bool:
        return self.image() == self.codomain

    def is_bijective(self) -> bool:
        return self.is_injective() and self.is_surjective()

    def __str__(self) -> str:
        domain = ", ".join(map(canonical_str, canonical_order(self.domain)))
        codomain = ", ".join(map(canonical_str, canonical_order(self.codomain)))
        return (
            f"Mapping(domain = {{{domain}}}, codomain = {{{codomain}}}, "
            f"relation set = {self._pairs_str()})"
        )
