"""Single- and multi-source reachability in a directed graph.

The traversal is depth-first and visits neighbors in adjacency order, but it
keeps its frontier on an explicit stack rather than the call stack. A long
chain of vertices therefore costs heap memory instead of hitting Python's
recursion limit.
"""

from collections.abc import Iterable, Iterator

import structlog

from src.errors import OutOfRangeError
from src.graph.digraph import AdjacencyGraph

logger = structlog.get_logger(__name__)


class DirectedReachability:
    """Vertices reachable from a source vertex (or set of sources).

    The marking is computed once in the constructor, in time proportional to
    V + E of the reachable subgraph, and never changes afterwards.

    Example:
        >>> from src.graph.digraph import Digraph
        >>> g = Digraph.from_edges(4, [(0, 1), (1, 2)])
        >>> reach = DirectedReachability(g, 0)
        >>> reach.marked(2), reach.marked(3)
        (True, False)
        >>> reach.count()
        3
    """

    def __init__(self, graph: AdjacencyGraph, sources: int | Iterable[int]):
        """Compute reachability from one or more sources.

        Sources are processed in order; a source already reached from an
        earlier one is skipped. An empty iterable marks nothing.

        Args:
            graph: Graph exposing ``vertex_count`` and ``adj(v)``
            sources: A single source vertex or an iterable of them

        Raises:
            OutOfRangeError: If any source is not a vertex of the graph
        """
        self._vertex_count = graph.vertex_count
        self._marked = [False] * self._vertex_count
        self._count = 0

        source_list = [sources] if isinstance(sources, int) else list(sources)
        # Validate up front so a bad source never leaves a partial marking
        for s in source_list:
            self._validate_vertex(s)

        for s in source_list:
            if not self._marked[s]:
                self._dfs(graph, s)

        logger.debug(
            "reachability_computed",
            vertex_count=self._vertex_count,
            source_count=len(source_list),
            reachable_count=self._count,
        )

    def _dfs(self, graph: AdjacencyGraph, source: int) -> None:
        self._visit(source)
        stack: list[tuple[int, Iterator[int]]] = [(source, iter(graph.adj(source)))]

        while stack:
            _, neighbors = stack[-1]
            for w in neighbors:
                self._validate_vertex(w)
                if not self._marked[w]:
                    self._visit(w)
                    stack.append((w, iter(graph.adj(w))))
                    break
            else:
                stack.pop()

    def _visit(self, v: int) -> None:
        self._marked[v] = True
        self._count += 1

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < self._vertex_count:
            msg = f"Vertex {v} is not between 0 and {self._vertex_count - 1}"
            logger.warning("vertex_out_of_range", vertex=v, vertex_count=self._vertex_count)
            raise OutOfRangeError(msg, value=v, bound=self._vertex_count)

    def marked(self, v: int) -> bool:
        """Is there a directed path from a source to vertex v?

        Raises:
            OutOfRangeError: If v is not a vertex of the graph
        """
        self._validate_vertex(v)
        return self._marked[v]

    def count(self) -> int:
        """Number of vertices reachable from the source(s)."""
        return self._count

    def reachable_vertices(self) -> list[int]:
        """All marked vertices in ascending order."""
        return [v for v, is_marked in enumerate(self._marked) if is_marked]
