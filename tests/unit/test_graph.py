"""
Tests for simple undirected graphs and generators

Checks:
1. UEdge canonicalization and self-loop rejection
2. UGraph invariants, degrees, edge updates
3. Generators: complete, path, cycle, star, induced subgraph
4. Connectivity and connected components
"""

import pytest

from discrete_toolkit.exceptions import InvalidEdgeError
from discrete_toolkit.graph import generators
from discrete_toolkit.graph.graph import UEdge, UGraph, connected_components


class TestUEdge:
    """Tests for UEdge"""

    def test_unordered(self) -> None:
        assert UEdge(1, 2) == UEdge(2, 1)
        assert hash(UEdge(1, 2)) == hash(UEdge(2, 1))

    def test_canonical_endpoints(self) -> None:
        """Endpoints sort by string projection, so 10 precedes 9"""
        edge = UEdge(9, 10)
        assert (edge.u, edge.v) == (10, 9)
        assert str(edge) == "{10, 9}"

    def test_self_loop_rejected(self) -> None:
        with pytest.raises(InvalidEdgeError):
            UEdge(1, 1)

    def test_other(self) -> None:
        assert UEdge("a", "b").other("a") == "b"
        assert UEdge("a", "b").other("b") == "a"


class TestUGraph:
    """Tests for UGraph"""

    def test_endpoint_outside_vertices_rejected(self) -> None:
        with pytest.raises(InvalidEdgeError):
            UGraph({1}, {UEdge(1, 2)})

    def test_from_edges(self) -> None:
        g = UGraph.from_edges([UEdge(1, 2), UEdge(2, 3)])
        assert g.vertices == {1, 2, 3}
        assert g.edges_count() == 2

    def test_counts(self) -> None:
        g = generators.path([1, 2, 3])
        assert g.vertices_count() == 3
        assert g.edges_count() == 2
        assert g.incidences_count() == 4

    def test_degree_and_neighbours(self) -> None:
        g = generators.path([1, 2, 3])
        assert g.degree(2) == 2
        assert g.neighbours(2) == {1, 3}
        with pytest.raises(ValueError):
            g.degree(4)

    def test_has_edge(self) -> None:
        g = generators.path([1, 2, 3])
        assert g.has_edge(2, 1)
        assert not g.has_edge(1, 3)
        assert not g.has_edge(1, 1)

    def test_add_and_remove_edge(self) -> None:
        g = generators.path([1, 2, 3])
        h = g.add_edge(UEdge(3, 1))
        assert h.edges_count() == 3
        assert g.edges_count() == 2
        assert h.remove_edge(UEdge(1, 3)) == g

    def test_add_edge_outside_vertices_rejected(self) -> None:
        g = generators.path([1, 2])
        with pytest.raises(ValueError):
            g.add_edge(UEdge(1, 3))

    def test_remove_missing_edge_rejected(self) -> None:
        g = generators.path([1, 2, 3])
        with pytest.raises(ValueError):
            g.remove_edge(UEdge(1, 3))

    def test_str(self) -> None:
        g = generators.path([2, 1])
        assert str(g) == "(Vertices = {1, 2}\nEdges = {{1, 2}})"


class TestGenerators:
    """Tests for graph generators"""

    def test_complete(self) -> None:
        g = generators.complete({1, 2, 3, 4})
        assert g.edges_count() == 6
        assert g.degree_sequence() == [3, 3, 3, 3]

    def test_complete_too_small(self) -> None:
        with pytest.raises(ValueError):
            generators.complete({1})

    def test_path(self) -> None:
        g = generators.path([1, 2, 3, 4, 5])
        assert g.degree_sequence() == [2, 2, 2, 1, 1]

    @pytest.mark.parametrize("vertices", [[1], [1, 2, 1]])
    def test_path_invalid(self, vertices) -> None:
        with pytest.raises(ValueError):
            generators.path(vertices)

    def test_cycle(self) -> None:
        g = generators.cycle(["a", "b", "c", "d"])
        assert g.edges_count() == 4
        assert g.degree_sequence() == [2, 2, 2, 2]
        assert g.has_edge("d", "a")

    def test_cycle_too_short(self) -> None:
        with pytest.raises(ValueError):
            generators.cycle([1, 2])

    def test_star(self) -> None:
        g = generators.star({1, 2, 3, 4}, 1)
        assert g.degree_sequence() == [3, 1, 1, 1]
        with pytest.raises(ValueError):
            generators.star({1, 2}, 5)

    def test_induced_subgraph(self) -> None:
        g = generators.complete({1, 2, 3, 4})
        sub = generators.induced_subgraph(g, {1, 2, 3})
        assert sub == generators.complete({1, 2, 3})
        with pytest.raises(ValueError):
            generators.induced_subgraph(g, {5})


class TestConnectivity:
    """Tests for is_connected and connected_components"""

    def test_connected(self) -> None:
        assert generators.cycle([1, 2, 3]).is_connected()
        assert UGraph(set(), set()).is_connected()

    def test_long_path_connected(self) -> None:
        g = generators.path(list(range(500)))
        assert g.is_connected()
        assert not g.remove_edge(UEdge(249, 250)).is_connected()

    def test_components(self) -> None:
        g = UGraph({1, 2, 3, 4, 5}, {UEdge(1, 2), UEdge(4, 5)})
        assert not g.is_connected()
        assert connected_components(g) == [{1, 2}, {3}, {4, 5}]
