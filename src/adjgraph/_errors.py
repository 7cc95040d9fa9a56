"""Exceptions raised by adjgraph."""


class GraphError(Exception):
    """Base class for all adjgraph errors."""


class NotADAGError(GraphError, ValueError):
    """A directed graph that was required to be acyclic contains a cycle.

    Attributes:
        cycle: Vertices along the detected cycle, with the first vertex
            repeated at the end (e.g. ``[1, 2, 1]``).

    """

    def __init__(self, cycle: list[int]) -> None:
        self.cycle = cycle
        path = " -> ".join(str(v) for v in cycle)
        super().__init__(f"Graph is not a DAG: cycle {path}")


class UnknownVertexError(GraphError, LookupError):
    """An operation referenced a vertex that is not in the graph."""

    def __init__(self, vertex: int) -> None:
        self.vertex = vertex
        super().__init__(f"Unknown vertex: {vertex}")


class EmptyQueueError(GraphError, IndexError):
    """Pop from an empty priority queue."""
