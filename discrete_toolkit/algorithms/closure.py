"""Closures of relations and relation-set ↔ adjacency-matrix conversion.

This module is the bridge between the two representations of a relation:

1. **Relation set**: a frozenset of Pairs (a, b) with a ∈ D, b ∈ C
2. **Adjacency matrix**: |D| × |C| Matrix over {0, 1}

Both directions index elements through canonical_order(), so converting a
relation to a matrix and back is the identity for every finite relation.

Closures:
    - Reflexive closure:  R ∪ {(x, x) : x ∈ D}
    - Transitive closure: R⁺, computed as set → matrix → Floyd-Warshall → set
    - Reflexive-transitive closure: (R⁺) ∪ Δ_D, the partial order generated
      by a covering relation when R is acyclic

Cost model:
    The transitive closure is the only place O(n³) work is done. The working
    matrix has |D|² cells, so large domains pay quadratic memory as well.
"""

from typing import Any, FrozenSet, Iterable, List, Tuple
import numpy as np

from discrete_toolkit.algebra.sets import (
    Pair,
    as_pairs,
    canonical_order,
    canonical_str,
    identity_pairs,
)
from discrete_toolkit.exceptions import InconsistentMatrixShapeError, NotASubsetError
from discrete_toolkit.matrix.matrix import Matrix
from discrete_toolkit.matrix.operations import floyd_warshall


def reflexive_closure(
    domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]
) -> FrozenSet[Pair]:
    """Smallest reflexive superset of R over D.

    Complexity:
        O(|D| + |R|)
    """
    return as_pairs(relation_set) | identity_pairs(domain)


def _labels(elements: List[Any]) -> List[str]:
    return [canonical_str(x) for x in elements]


def adjacency_matrix(
    domain: Iterable[Any],
    codomain: Iterable[Any],
    relation_set: Iterable[Tuple[Any, Any]],
) -> Matrix:
    """Construct the adjacency matrix of a relation.

    Matrix definition:
        A[i, j] = 1 if (D[i], C[j]) ∈ R, else 0
    where D = canonical_order(domain), C = canonical_order(codomain).

    Parameters:
        domain: Domain D (rows)
        codomain: Codomain C (columns)
        relation_set: Pairs (a, b) with a ∈ D and b ∈ C

    Returns:
        |D| × |C| Matrix, row labels canonical_str(D[i]), column labels
        canonical_str(C[j])

    Raises:
        NotASubsetError: If a pair has an endpoint outside D or C

    Information lost:
        - Element identity beyond the label string; recover elements by
          indexing the same canonical lists (relation_set_from_matrix)
    """
    rows = canonical_order(domain)
    columns = canonical_order(codomain)
    row_index = {x: i for i, x in enumerate(rows)}
    column_index = {y: j for j, y in enumerate(columns)}

    A = np.zeros((len(rows), len(columns)), dtype=int)
    for a, b in relation_set:
        if a not in row_index or b not in column_index:
            raise NotASubsetError(
                f"Pair ({a}, {b}) is not contained in domain × codomain"
            )
        A[row_index[a], column_index[b]] = 1

    return Matrix(A, _labels(rows), _labels(columns))


def adjacency_matrix_of(relational) -> Matrix:
    """Adjacency matrix of any Relation, Mapping or Ordering."""
    return adjacency_matrix(
        relational.domain, relational.codomain, relational.relation_set
    )


def relation_set_from_matrix(
    domain: Iterable[Any], codomain: Iterable[Any], matrix: Matrix
) -> FrozenSet[Pair]:
    """Inverse of adjacency_matrix: entry (i, j) = 1 yields (D[i], C[j]).

    Raises:
        InconsistentMatrixShapeError: If matrix is not |D| × |C|
    """
    rows = canonical_order(domain)
    columns = canonical_order(codomain)

    if matrix.shape != (len(rows), len(columns)):
        raise InconsistentMatrixShapeError(
            f"Expected a {len(rows)} × {len(columns)} matrix for this domain and "
            f"codomain, got {matrix.rows} × {matrix.columns}"
        )

    return frozenset(
        Pair(rows[i], columns[j]) for i, j in zip(*np.nonzero(matrix.entries == 1))
    )


def transitive_closure(
    domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]
) -> FrozenSet[Pair]:
    """Smallest transitive superset R⁺ of a relation R on D.

    Pipeline:
        R → adjacency matrix (D × D) → floyd_warshall → R⁺

    No reflexive pairs are added unless R has a cycle through the element.

    Example:
        D = {a, b, c, d}, R = {(a,b), (b,c), (c,d)}
        R⁺ = R ∪ {(a,c), (b,d), (a,d)}

    Complexity:
        Time: O(|D|³), Space: O(|D|²)
    """
    domain = frozenset(domain)
    adj = adjacency_matrix(domain, domain, relation_set)
    return relation_set_from_matrix(domain, domain, floyd_warshall(adj))


def reflexive_transitive_closure(
    domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]
) -> FrozenSet[Pair]:
    """R* = (R⁺) ∪ Δ_D."""
    domain = frozenset(domain)
    return reflexive_closure(domain, transitive_closure(domain, relation_set))


def transitive_reduction(
    domain: Iterable[Any], relation_set: Iterable[Tuple[Any, Any]]
) -> FrozenSet[Pair]:
    """Covering pairs of an acyclic relation.

    For the strict part S = R \\ Δ_D with closure S⁺, a pair (a, b) ∈ S⁺ is
    kept iff no c satisfies (a, c) ∈ S⁺ and (c, b) ∈ S⁺. Applied to a partial
    order this yields its Hasse diagram.

    Assumes S is acyclic; on a cyclic relation the reduction is not unique and
    the result is not meaningful.
    """
    domain = frozenset(domain)
    strict = frozenset(p for p in as_pairs(relation_set) if p.a != p.b)
    closed = floyd_warshall(adjacency_matrix(domain, domain, strict))

    reach = closed.entries.astype(bool)
    two_step = (closed.entries @ closed.entries) > 0
    covering = Matrix((reach & ~two_step).astype(int))

    return relation_set_from_matrix(domain, domain, covering)
