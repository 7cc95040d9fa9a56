"""Graph module providing the graph store and its algorithms.

This module contains:
- Graph: A mutable adjacency-list graph, directed or undirected
- PriorityQueue: The max-heap used as the shortest-path frontier
- topological_sort, shortest_path: Algorithms over a Graph
"""

from ._algorithms import is_dag, shortest_path, topological_sort
from ._priority import PriorityQueue, QueueItem
from ._store import Edge, Graph, GraphMode

__all__ = [
    "Edge",
    "Graph",
    "GraphMode",
    "PriorityQueue",
    "QueueItem",
    "is_dag",
    "shortest_path",
    "topological_sort",
]
