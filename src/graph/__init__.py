"""Graph module for directed graphs and reachability queries.

This module provides an adjacency-list digraph and a depth-first
reachability query over it.
"""

from src.graph.digraph import AdjacencyGraph, Digraph
from src.graph.reachability import DirectedReachability

__all__ = ["AdjacencyGraph", "Digraph", "DirectedReachability"]
