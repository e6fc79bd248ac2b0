"""Deterministic graph generators: complete graphs, paths, cycles, stars.

All generators return UGraph values. Expected statistics for each family:

    Graph    |V|   |E|          Degree sequence
    K_n      n     n(n-1)/2     (n-1, ..., n-1)
    P_n      n     n-1          (2, ..., 2, 1, 1)
    C_n      n     n            (2, ..., 2)
    S_n      n     n-1          (n-1, 1, ..., 1)
"""

from typing import Iterable, Sequence

from discrete_toolkit.algebra.sets import choose, canonical_order, is_subset
from discrete_toolkit.algorithms.validate import no_duplicates
from discrete_toolkit.graph.graph import NodeID, UEdge, UGraph


def complete(vertices: Iterable[NodeID]) -> UGraph[NodeID]:
    """Complete graph K_n: every pair of distinct vertices is adjacent.

    Edges are the 2-subsets of V, taken from choose(V, 2).

    Raises:
        ValueError: If |V| < 2
    """
    vertices = frozenset(vertices)
    if len(vertices) < 2:
        raise ValueError(
            "Set of vertices must have at least 2 elements for a complete graph"
        )

    edges = frozenset(UEdge(*canonical_order(pair)) for pair in choose(vertices, 2))
    return UGraph(vertices, edges)


def star(vertices: Iterable[NodeID], centre: NodeID) -> UGraph[NodeID]:
    """Star graph: centre adjacent to every other vertex, no other edges.

    Raises:
        ValueError: If centre is not in V
    """
    vertices = frozenset(vertices)
    if centre not in vertices:
        raise ValueError("Centre vertex must be contained in the set of vertices")

    edges = frozenset(UEdge(centre, v) for v in vertices if v != centre)
    return UGraph(vertices, edges)


def path(vertices: Sequence[NodeID]) -> UGraph[NodeID]:
    """Path graph v_0 - v_1 - ... - v_{n-1}.

    Raises:
        ValueError: If the list has duplicates or fewer than 2 elements
    """
    vertices = list(vertices)
    if not no_duplicates(vertices):
        raise ValueError("List of vertices must not contain duplicate elements")
    if len(vertices) < 2:
        raise ValueError("List of vertices in a path must contain at least 2 elements")

    edges = frozenset(UEdge(u, v) for u, v in zip(vertices, vertices[1:]))
    return UGraph(frozenset(vertices), edges)


def cycle(vertices: Sequence[NodeID]) -> UGraph[NodeID]:
    """Cycle graph: a path closed by the edge {v_{n-1}, v_0}.

    Raises:
        ValueError: If the list has duplicates or fewer than 3 elements
    """
    vertices = list(vertices)
    if not no_duplicates(vertices):
        raise ValueError("List of vertices must not contain duplicate elements")
    if len(vertices) < 3:
        raise ValueError("List of vertices in a cycle must contain at least 3 elements")

    n = len(vertices)
    edges = frozenset(UEdge(vertices[i], vertices[(i + 1) % n]) for i in range(n))
    return UGraph(frozenset(vertices), edges)


def induced_subgraph(graph: UGraph[NodeID], vertices: Iterable[NodeID]) -> UGraph[NodeID]:
    """Subgraph G[S] keeping exactly the edges with both endpoints in S.

    Raises:
        ValueError: If S is not a subset of the graph's vertices
    """
    vertices = frozenset(vertices)
    if not is_subset(vertices, graph.vertices):
        raise ValueError(
            "Set of vertices of the induced subgraph must be a subset of the set "
            "of vertices of the graph"
        )

    edges = frozenset(e for e in graph.edges if e.u in vertices and e.v in vertices)
    return UGraph(vertices, edges)
