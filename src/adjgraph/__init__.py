"""In-memory graphs with topological sort, shortest path and DOT export."""

__all__ = [
    "Dot",
    "Edge",
    "EmptyQueueError",
    "Graph",
    "GraphError",
    "GraphMode",
    "NotADAGError",
    "PriorityQueue",
    "QueueItem",
    "UnknownVertexError",
    "is_dag",
    "render_dot",
    "shortest_path",
    "topological_sort",
    "write_dot",
]

from ._errors import EmptyQueueError, GraphError, NotADAGError, UnknownVertexError
from ._export import Dot, render_dot, write_dot
from ._graph import Edge, Graph, GraphMode, PriorityQueue, QueueItem, is_dag, shortest_path, topological_sort
