"""Unit tests for the Digraph class.

Tests cover:
- Construction with and without edges
- Edge insertion order and duplicates
- Vertex bounds checking
"""

import pytest

from src.errors import OutOfRangeError
from src.graph.digraph import Digraph

EXPECTED_EDGE_COUNT_THREE = 3


class TestDigraphBasics:
    """Test basic functionality of Digraph."""

    def test_initialization(self):
        """Test that a new graph has vertices but no edges."""
        graph = Digraph(5)

        assert graph.vertex_count == 5
        assert graph.edge_count == 0
        assert graph.adj(0) == ()

    def test_empty_graph(self):
        """Test that a graph with zero vertices is allowed."""
        graph = Digraph(0)

        assert graph.vertex_count == 0

    def test_negative_vertex_count_rejected(self):
        """Test that a negative vertex count raises ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            Digraph(-1)

    def test_add_edge_preserves_insertion_order(self):
        """Test that adjacency lists keep edges in insertion order."""
        graph = Digraph(4)
        graph.add_edge(0, 3)
        graph.add_edge(0, 1)
        graph.add_edge(0, 2)

        assert graph.adj(0) == (3, 1, 2)
        assert graph.edge_count == EXPECTED_EDGE_COUNT_THREE
        assert graph.out_degree(0) == EXPECTED_EDGE_COUNT_THREE

    def test_duplicate_edges_counted(self):
        """Test that parallel edges are kept."""
        graph = Digraph(2)
        graph.add_edge(0, 1)
        graph.add_edge(0, 1)

        assert graph.adj(0) == (1, 1)
        assert graph.edge_count == 2

    def test_edges_are_directed(self):
        """Test that adding v->w does not add w->v."""
        graph = Digraph(2)
        graph.add_edge(0, 1)

        assert graph.adj(1) == ()

    def test_self_loop(self):
        """Test that a vertex may point to itself."""
        graph = Digraph(1)
        graph.add_edge(0, 0)

        assert graph.adj(0) == (0,)

    def test_from_edges(self):
        """Test building a graph from an edge list."""
        graph = Digraph.from_edges(3, [(0, 1), (1, 2), (2, 0)])

        assert graph.adj(0) == (1,)
        assert graph.adj(1) == (2,)
        assert graph.adj(2) == (0,)

    def test_adj_returns_copy(self):
        """Test that callers cannot mutate the adjacency list."""
        graph = Digraph.from_edges(2, [(0, 1)])
        neighbors = graph.adj(0)

        assert isinstance(neighbors, tuple)
        graph.add_edge(0, 0)
        assert neighbors == (1,)

    def test_repr(self):
        """Test the debugging representation."""
        graph = Digraph.from_edges(2, [(0, 1)])

        assert repr(graph) == "Digraph(vertex_count=2, edge_count=1)"


class TestDigraphBounds:
    """Test vertex range checking."""

    @pytest.mark.parametrize(("v", "w"), [(-1, 0), (0, 3), (3, 0), (0, -2)])
    def test_add_edge_out_of_range(self, v, w):
        """Test that edges with invalid endpoints are rejected."""
        graph = Digraph(3)

        with pytest.raises(OutOfRangeError):
            graph.add_edge(v, w)

        assert graph.edge_count == 0

    def test_adj_out_of_range(self):
        """Test that querying a missing vertex raises."""
        graph = Digraph(3)

        with pytest.raises(OutOfRangeError) as exc_info:
            graph.adj(3)

        assert exc_info.value.value == 3
        assert exc_info.value.bound == 3

    def test_out_of_range_is_index_error(self):
        """Test that OutOfRangeError can be caught as IndexError."""
        graph = Digraph(1)

        with pytest.raises(IndexError):
            graph.out_degree(5)
