"""Axiom validators for relations, mappings and orderings.

Every predicate here works on plain (domain, relation_set) data, so callers
can audit any relation for order axioms whether or not it was built through a
validating constructor.

Axioms for a relation R on D:
    - Reflexive:      ∀x ∈ D. (x, x) ∈ R
    - Symmetric:      (a, b) ∈ R ⟹ (b, a) ∈ R
    - Antisymmetric:  (a, b) ∈ R ∧ (b, a) ∈ R ⟹ a = b
    - Transitive:     (a, b) ∈ R ∧ (b, c) ∈ R ⟹ (a, c) ∈ R
    - Partial order:  reflexive ∧ antisymmetric ∧ transitive
"""

from collections import Counter, defaultdict
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Sequence, Tuple

from discrete_toolkit.algebra.sets import as_pairs


class Axiom(Enum):
    """Properties a homogeneous relation may satisfy."""

    REFLEXIVITY = "reflexivity"
    SYMMETRY = "symmetry"
    ANTISYMMETRY = "antisymmetry"
    TRANSITIVITY = "transitivity"


def reflexivity(domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]) -> bool:
    pairs = as_pairs(relation_set)
    return all((x, x) in pairs for x in domain)


def symmetry(relation_set: Iterable[Tuple[Any, Any]]) -> bool:
    pairs = as_pairs(relation_set)
    return all((b, a) in pairs for a, b in pairs)


def antisymmetry(relation_set: Iterable[Tuple[Any, Any]]) -> bool:
    pairs = as_pairs(relation_set)
    return not any(a != b and (b, a) in pairs for a, b in pairs)


def transitivity(relation_set: Iterable[Tuple[Any, Any]]) -> bool:
    """Check transitivity by following each pair's successors.

    Complexity:
        O(Σ_b indeg(b)·outdeg(b)) ≤ O(|R|·|D|)
    """
    pairs = as_pairs(relation_set)
    successors = defaultdict(set)
    for a, b in pairs:
        successors[a].add(b)

    return all((a, c) in pairs for a, b in pairs for c in successors[b])


def ordering(domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]) -> bool:
    """True if R is a partial order over D."""
    pairs = as_pairs(relation_set)
    return reflexivity(domain, pairs) and antisymmetry(pairs) and transitivity(pairs)


def functionality(domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]) -> bool:
    """True if every x ∈ D is the first component of exactly one pair.

    Uses a grouped count over R instead of rescanning R per element.
    """
    counts = Counter(a for a, _ in as_pairs(relation_set))
    return all(counts[x] == 1 for x in domain)


def codomain_contains(
    domain: Iterable[Any], codomain: Iterable[Any], function: Callable[[Any], Any]
) -> bool:
    """True if f(x) ∈ C for every x ∈ D."""
    codomain = frozenset(codomain)
    return all(function(x) in codomain for x in domain)


def comparator(
    sorted_elements: Sequence[Any], compare: Callable[[Any, Any], int]
) -> bool:
    """True if no adjacent pair of a sorted sequence is an inversion under compare.

    A consistent comparator never reports an inversion after sorting; an
    inconsistent one (e.g. non-transitive) can.
    """
    return all(
        compare(sorted_elements[i], sorted_elements[i + 1]) <= 0
        for i in range(len(sorted_elements) - 1)
    )


def no_duplicates(elements: Sequence[Any]) -> bool:
    return len(set(elements)) == len(elements)


def check(
    axiom: Axiom, domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]
) -> bool:
    """Evaluate a single axiom on (domain, relation_set)."""
    if axiom == Axiom.REFLEXIVITY:
        return reflexivity(domain, relation_set)
    elif axiom == Axiom.SYMMETRY:
        return symmetry(relation_set)
    elif axiom == Axiom.ANTISYMMETRY:
        return antisymmetry(relation_set)
    elif axiom == Axiom.TRANSITIVITY:
        return transitivity(relation_set)
    else:
        raise ValueError(f"Unknown axiom: {axiom}")


def audit(
    domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]
) -> Dict[Axiom, bool]:
    """Evaluate every axiom at once.

    Returns:
        Mapping from each Axiom to whether R satisfies it over D
    """
    domain = frozenset(domain)
    pairs = as_pairs(relation_set)
    return {axiom: check(axiom, domain, pairs) for axiom in Axiom}
