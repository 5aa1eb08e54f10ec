"""Adjacency-list directed graph over integer vertices.

Vertices are the integers ``0..V-1``. Each vertex keeps an ordered list of
outgoing-edge endpoints in insertion order, which is also the order in which
traversals visit neighbors.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol

import structlog

from src.errors import OutOfRangeError

logger = structlog.get_logger(__name__)


class AdjacencyGraph(Protocol):
    """Structural interface consumed by reachability queries."""

    @property
    def vertex_count(self) -> int: ...

    def adj(self, v: int) -> Sequence[int]: ...


class Digraph:
    """Directed graph with a fixed vertex count.

    Thread-safety:
        This class is NOT thread-safe. Build the graph from a single thread
        and treat it as read-only once it is handed to a reachability query.

    Example:
        >>> g = Digraph(3)
        >>> g.add_edge(0, 1)
        >>> g.add_edge(1, 2)
        >>> list(g.adj(0))
        [1]
    """

    def __init__(self, vertex_count: int):
        """Initialize a graph with no edges.

        Args:
            vertex_count: Number of vertices (must be non-negative)

        Raises:
            ValueError: If vertex_count is negative
        """
        if vertex_count < 0:
            msg = f"Number of vertices must be non-negative, got {vertex_count}"
            raise ValueError(msg)

        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]
        self._edge_count = 0

        logger.debug("digraph_initialized", vertex_count=vertex_count)

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[tuple[int, int]]) -> "Digraph":
        """Build a graph from ``(from, to)`` pairs.

        Args:
            vertex_count: Number of vertices
            edges: Directed edges to add in order

        Returns:
            A new Digraph containing every edge
        """
        graph = cls(vertex_count)
        for v, w in edges:
            graph.add_edge(v, w)
        return graph

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        """Number of edges, counting duplicates."""
        return self._edge_count

    def add_edge(self, v: int, w: int) -> None:
        """Add the directed edge v->w.

        Raises:
            OutOfRangeError: If either endpoint is not a vertex
        """
        self._validate_vertex(v)
        self._validate_vertex(w)
        self._adj[v].append(w)
        self._edge_count += 1

    def adj(self, v: int) -> tuple[int, ...]:
        """Vertices adjacent from v, in insertion order.

        Raises:
            OutOfRangeError: If v is not a vertex
        """
        self._validate_vertex(v)
        return tuple(self._adj[v])

    def out_degree(self, v: int) -> int:
        self._validate_vertex(v)
        return len(self._adj[v])

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < len(self._adj):
            msg = f"Vertex {v} is not between 0 and {len(self._adj) - 1}"
            raise OutOfRangeError(msg, value=v, bound=len(self._adj))

    def __repr__(self) -> str:
        return f"Digraph(vertex_count={self.vertex_count}, edge_count={self.edge_count})"
