"""Boolean matrix algorithms: Floyd-Warshall transitive closure.

Mathematical framework:
    An adjacency matrix A over {0, 1} describes a relation R on an m-element
    set: A[i, j] = 1 iff (x_i, x_j) ∈ R. Boolean matrix closure replaces
    (min, +) from shortest paths with (OR, AND):

        C_k[i, j] = C_{k-1}[i, j] OR (C_{k-1}[i, k] AND C_{k-1}[k, j])

    After pass k, C[i, j] = 1 iff there is a path i → j whose intermediate
    vertices all lie in {0, ..., k}. After the last pass C is the adjacency
    matrix of the transitive closure R⁺.

    This is Warshall's algorithm; it is the same dynamic program as
    Floyd-Warshall all-pairs shortest paths over the boolean semiring.
"""

import warnings
import numpy as np

from discrete_toolkit.exceptions import MatrixWarning, NotASquareMatrixError
from discrete_toolkit.matrix.matrix import Matrix, is_rectangular


__all__ = ["floyd_warshall", "is_square", "is_rectangular"]


def is_square(matrix: Matrix) -> bool:
    return matrix.rows == matrix.columns


def floyd_warshall(adj: Matrix) -> Matrix:
    """Boolean transitive closure of a square adjacency matrix.

    Algorithm:
        C ← copy of adj (clamped to {0, 1})
        for k in 0..m-1:            # k must be outermost
            for i, j in 0..m-1:
                if C[i, k] and C[k, j]: C[i, j] ← 1

    The (i, j) sweep for a fixed k is done as one numpy outer product. Within
    a single k pass no cell that is read (row k, column k) changes value, so
    the vectorized update equals the scalar triple loop cell for cell.

    Reflexive pairs are only present in the output if a cycle passes through
    the vertex (or the input already had them).

    Args:
        adj: Square adjacency matrix

    Returns:
        New Matrix holding the closure, with the labels of adj

    Raises:
        NotASquareMatrixError: If adj.rows != adj.columns

    Complexity:
        Time: O(m³)
        Space: O(m²) for the working copy
    """
    if not is_square(adj):
        raise NotASquareMatrixError(
            f"Adjacency matrix must be a square matrix, got {adj.rows} × {adj.columns}"
        )

    if not adj.is_boolean():
        warnings.warn(
            "Adjacency matrix has entries outside {0, 1}; non-zero entries are "
            "treated as 1",
            MatrixWarning,
        )

    m = adj.rows
    C = adj.entries != 0  # boolean working copy

    for k in range(m):
        C |= np.outer(C[:, k], C[k, :])

    return Matrix(C.astype(int), adj.row_labels, adj.column_labels)
