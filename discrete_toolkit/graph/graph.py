"""Simple undirected graphs G = (V, E) as immutable values.

A simple undirected graph has:
    - E ⊆ (V choose 2): every edge is an unordered pair {u, v}
    - No self-loops: u ≠ v for every edge
    - No multi-edges: E is a set

Design principle: the graph is a thin container over set operations. Adding
or removing an edge returns a new graph; nothing is mutated in place.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Generic, Hashable, Iterable, List, Set, TypeVar

from discrete_toolkit.algebra.sets import canonical_key, canonical_order, canonical_str
from discrete_toolkit.exceptions import InvalidEdgeError


NodeID = TypeVar("NodeID", bound=Hashable)


@dataclass(frozen=True)
class UEdge(Generic[NodeID]):
    """Undirected edge {u, v} with u ≠ v.

    Attributes:
        u: Endpoint with the smaller canonical key
        v: Endpoint with the larger canonical key

    Endpoints are stored in canonical order, so UEdge(a, b) == UEdge(b, a)
    and both hash identically. This relies on str() of the vertex type being
    stable and deterministic.

    Raises:
        InvalidEdgeError: If u == v (self-loop)
    """

    u: NodeID
    v: NodeID

    def __post_init__(self):
        if self.u == self.v:
            raise InvalidEdgeError(
                f"Self-loops not allowed for simple graphs: {self.u} → {self.v}"
            )
        if canonical_key(self.u) > canonical_key(self.v):
            u, v = self.v, self.u
            object.__setattr__(self, "u", u)
            object.__setattr__(self, "v", v)

    def endpoints(self) -> FrozenSet[NodeID]:
        return frozenset((self.u, self.v))

    def other(self, endpoint: NodeID) -> NodeID:
        """Endpoint opposite to the given one."""
        return self.v if endpoint == self.u else self.u

    def __str__(self) -> str:
        return f"{{{canonical_str(self.u)}, {canonical_str(self.v)}}}"


@dataclass(frozen=True)
class UGraph(Generic[NodeID]):
    """Simple undirected graph.

    Attributes:
        vertices: Vertex set V
        edges: Edge set E of UEdges

    Invariants maintained:
        - All edge endpoints exist in vertices
        - No self-loops (enforced by UEdge)
    """

    vertices: FrozenSet[NodeID]
    edges: FrozenSet[UEdge[NodeID]]

    def __post_init__(self):
        object.__setattr__(self, "vertices", frozenset(self.vertices))
        object.__setattr__(self, "edges", frozenset(self.edges))
        self.validate()

    def validate(self) -> None:
        """Check graph invariants.

        Raises:
            InvalidEdgeError: If an edge endpoint is not a vertex
        """
        for edge in self.edges:
            if edge.u not in self.vertices:
                raise InvalidEdgeError(f"Edge endpoint {edge.u} not in vertex set")
            if edge.v not in self.vertices:
                raise InvalidEdgeError(f"Edge endpoint {edge.v} not in vertex set")

    @classmethod
    def from_edges(cls, edges: Iterable[UEdge[NodeID]]) -> "UGraph[NodeID]":
        """Graph whose vertices are exactly the edge endpoints."""
        edges = frozenset(edges)
        return cls(frozenset(x for e in edges for x in (e.u, e.v)), edges)

    def _require_vertex(self, vertex: NodeID) -> None:
        if vertex not in self.vertices:
            raise ValueError(f"Vertex {vertex} must be contained in the set of vertices")

    def has_edge(self, u: NodeID, v: NodeID) -> bool:
        if u == v:
            return False
        return UEdge(u, v) in self.edges

    def degree(self, vertex: NodeID) -> int:
        """Number of edges incident to vertex."""
        self._require_vertex(vertex)
        return sum(1 for e in self.edges if vertex in (e.u, e.v))

    def neighbours(self, vertex: NodeID) -> FrozenSet[NodeID]:
        self._require_vertex(vertex)
        return frozenset(e.other(vertex) for e in self.edges if vertex in (e.u, e.v))

    def vertices_count(self) -> int:
        """|V|."""
        return len(self.vertices)

    def edges_count(self) -> int:
        """|E|."""
        return len(self.edges)

    def incidences_count(self) -> int:
        """Σ deg(v) = 2|E| (handshake lemma)."""
        return 2 * len(self.edges)

    def degree_sequence(self) -> List[int]:
        """Vertex degrees in non-increasing order."""
        return sorted((self.degree(v) for v in self.vertices), reverse=True)

    def add_edge(self, edge: UEdge[NodeID]) -> "UGraph[NodeID]":
        """New graph with the edge added; both endpoints must already be vertices."""
        if edge.u not in self.vertices or edge.v not in self.vertices:
            raise ValueError(
                "Edge must be between vertices contained in the set of vertices"
            )
        return UGraph(self.vertices, self.edges | {edge})

    def remove_edge(self, edge: UEdge[NodeID]) -> "UGraph[NodeID]":
        if edge not in self.edges:
            raise ValueError("Edge to remove must be contained in the set of edges")
        return UGraph(self.vertices, self.edges - {edge})

    def is_connected(self) -> bool:
        """Check connectivity by breadth-first search from an arbitrary vertex.

        Returns:
            True if every vertex is reachable (vacuously True for V = ∅)
        """
        if not self.vertices:
            return True

        start = canonical_order(self.vertices)[0]
        visited: Set[NodeID] = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbour in self.neighbours(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)

        return len(visited) == len(self.vertices)

    def __str__(self) -> str:
        vertices = ", ".join(map(canonical_str, canonical_order(self.vertices)))
        edges = ", ".join(
            str(e)
            for e in sorted(
                self.edges, key=lambda e: (canonical_key(e.u), canonical_key(e.v))
            )
        )
        return f"(Vertices = {{{vertices}}}\nEdges = {{{edges}}})"


def connected_components(graph: UGraph) -> List[FrozenSet[Any]]:
    """Find connected components using Union-Find.

    Parameters:
        graph: Input graph

    Returns:
        Components as vertex sets, ordered by their canonically smallest vertex
    """
    parent = {vertex: vertex for vertex in graph.vertices}

    def find(x):
        if parent[x] != x:
            parent[x] = find(parent[x])  # Path compression
        return parent[x]

    def union(x, y):
        px, py = find(x), find(y)
        if px != py:
            parent[px] = py

    for edge in graph.edges:
        union(edge.u, edge.v)

    components: Dict[Any, Set[Any]] = {}
    for vertex in graph.vertices:
        components.setdefault(find(vertex), set()).add(vertex)

    return sorted(
        (frozenset(c) for c in components.values()),
        key=lambda c: canonical_key(canonical_order(c)[0]),
    )
