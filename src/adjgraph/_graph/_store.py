"""Mutable adjacency-list graph with directed and undirected modes."""

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum, auto
from typing import NamedTuple, Self

from adjgraph._errors import UnknownVertexError

logger = logging.getLogger(__name__)


class GraphMode(StrEnum):
    """How the edges of a graph are interpreted."""

    DIRECTED = auto()  # (u, v) means u -> v
    UNDIRECTED = auto()  # (u, v) stored once under min(u, v)


class Edge(NamedTuple):
    """An edge between two vertex handles.

    In a directed graph the edge points from ``u`` to ``v``. Undirected edges
    are always reported in canonical order (``u <= v``).
    """

    u: int
    v: int


class Graph:
    """An in-memory graph stored as adjacency lists.

    Vertices are non-negative integer handles issued by the graph itself.
    Handles come from a per-graph counter that only moves forward, so a
    removed vertex's handle is never issued again.

    The same class serves both modes; they differ only in how an edge is
    stored:

    - directed: ``v`` is appended to ``u``'s list for an edge ``u -> v``
    - undirected: the edge is stored once, under the smaller handle

    Duplicate edges are kept. Every vertex has an adjacency entry, even when
    it has no edges, and every handle held in an adjacency list is a live
    vertex. A reverse index mirrors the adjacency lists (one entry per
    stored edge), so incoming edges are found without scanning the graph.

    Example:
        >>> g = Graph()
        >>> a, b = g.add_vertex(), g.add_vertex()
        >>> g.add_edge(a, b)
        >>> g.neighbours(a)
        [1]

    """

    def __init__(self, *, directed: bool = True) -> None:
        self._mode = GraphMode.DIRECTED if directed else GraphMode.UNDIRECTED
        self._adjacency: dict[int, list[int]] = {}
        self._reverse: dict[int, list[int]] = {}
        self._next_vertex = 0

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]], *, directed: bool = True) -> Self:
        """Build a graph from ``(u, v)`` pairs, creating endpoints as needed.

        The handle counter is advanced past the largest handle seen, so
        vertices added afterwards never collide with the given ones.

        Args:
            edges: Pairs of vertex handles.
            directed: Whether to build a directed graph.

        Returns:
            A new Graph containing the given edges.

        Raises:
            ValueError: If any handle is negative.

        """
        graph = cls(directed=directed)
        for u, v in edges:
            graph._ensure_vertex(u)
            graph._ensure_vertex(v)
            graph._append_edge(u, v)
        return graph

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, Iterable[int]], *, directed: bool = True) -> Self:
        """Build a graph from a mapping of vertex to adjacent vertices.

        Keys with an empty collection become isolated vertices.

        Example:
            >>> g = Graph.from_mapping({0: [1, 2], 1: [3]})
            >>> sorted(g.vertices())
            [0, 1, 2, 3]
            >>> g.next_vertex
            4

        """
        graph = cls(directed=directed)
        for u, targets in mapping.items():
            graph._ensure_vertex(u)
            for v in targets:
                graph._ensure_vertex(v)
                graph._append_edge(u, v)
        return graph

    @property
    def mode(self) -> GraphMode:
        return self._mode

    @property
    def is_directed(self) -> bool:
        return self._mode is GraphMode.DIRECTED

    @property
    def next_vertex(self) -> int:
        """The handle the next call to ``add_vertex`` will return."""
        return self._next_vertex

    def add_vertex(self) -> int:
        """Allocate a new vertex with no edges and return its handle."""
        vertex = self._next_vertex
        self._adjacency[vertex] = []
        self._reverse[vertex] = []
        self._next_vertex += 1
        return vertex

    def remove_vertex(self, vertex: int) -> None:
        """Remove a vertex and every edge that touches it.

        Removing a vertex that does not exist is a no-op.

        Args:
            vertex: Handle of the vertex to remove.

        """
        if vertex not in self._adjacency:
            return
        outgoing = self._adjacency.pop(vertex)
        incoming = self._reverse.pop(vertex)
        for w in set(outgoing) - {vertex}:
            self._reverse[w] = [u for u in self._reverse[w] if u != vertex]
        for u in set(incoming) - {vertex}:
            self._adjacency[u] = [w for w in self._adjacency[u] if w != vertex]
        dropped = sum(1 for u in incoming if u != vertex)
        logger.debug("Removed vertex %d and %d incoming edge(s)", vertex, dropped)

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge between two existing vertices.

        Duplicate edges are not merged. Use ``from_edges`` or ``from_mapping``
        to create endpoints implicitly.

        Args:
            u: Source vertex (directed) or either endpoint (undirected).
            v: Target vertex (directed) or the other endpoint (undirected).

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.

        """
        for endpoint in (u, v):
            if endpoint not in self._adjacency:
                raise UnknownVertexError(endpoint)
        self._append_edge(u, v)

    def remove_edge(self, u: int, v: int) -> None:
        """Remove one occurrence of the edge ``(u, v)``, if present."""
        u, v = self._canonical(u, v)
        neighbours = self._adjacency.get(u)
        if neighbours is not None and v in neighbours:
            neighbours.remove(v)
            self._reverse[v].remove(u)

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def vertices(self) -> list[int]:
        """Return all live vertices. The order is unspecified."""
        return list(self._adjacency)

    def edges(self) -> list[Edge]:
        """Return all edges, one entry per stored edge. The order is unspecified."""
        return [Edge(u, v) for u, neighbours in self._adjacency.items() for v in neighbours]

    def edge_count(self) -> int:
        return sum(len(neighbours) for neighbours in self._adjacency.values())

    def neighbours(self, vertex: int) -> list[int]:
        """Return the vertices adjacent to ``vertex``.

        For a directed graph these are the targets of outgoing edges, in
        insertion order. For an undirected graph the vertex's own list comes
        first, followed by every vertex that stores an edge to it. Each stored
        edge contributes one entry, so duplicate edges show up as repeats.

        Args:
            vertex: The vertex to query.

        Returns:
            List of adjacent vertices, empty for an unknown vertex.

        """
        own = self._adjacency.get(vertex)
        if own is None:
            return []
        result = list(own)
        if self.is_directed:
            return result
        # A self-loop is already in the vertex's own list
        result.extend(u for u in self._reverse[vertex] if u != vertex)
        return result

    def predecessors(self, vertex: int) -> list[int]:
        """Return every vertex with an edge into ``vertex``.

        Only meaningful for directed graphs; an undirected graph returns an
        empty list. Each vertex is listed once, even with duplicate edges.

        Args:
            vertex: The vertex to query.

        Returns:
            List of vertices ``u`` such that ``u -> vertex`` exists.

        """
        if not self.is_directed:
            return []
        return list(dict.fromkeys(self._reverse.get(vertex, ())))

    def in_degree(self, vertex: int) -> int:
        """Count edges ending at ``vertex`` (its degree, if undirected)."""
        if not self.is_directed:
            return len(self.neighbours(vertex))
        return len(self._reverse.get(vertex, ()))

    def out_degree(self, vertex: int) -> int:
        """Count edges leaving ``vertex`` (its degree, if undirected)."""
        if not self.is_directed:
            return len(self.neighbours(vertex))
        return len(self._adjacency.get(vertex, ()))

    def sources(self) -> list[int]:
        """Return vertices with no incoming edges.

        In an undirected graph this is the set of isolated vertices.
        """
        if not self.is_directed:
            return [v for v in self._adjacency if not self.neighbours(v)]
        return [v for v in self._adjacency if not self._reverse[v]]

    def copy(self) -> Self:
        """Return an independent copy sharing no adjacency lists with this graph."""
        clone = type(self)(directed=self.is_directed)
        clone._adjacency = {u: list(neighbours) for u, neighbours in self._adjacency.items()}
        clone._reverse = {v: list(incoming) for v, incoming in self._reverse.items()}
        clone._next_vertex = self._next_vertex
        return clone

    def _canonical(self, u: int, v: int) -> tuple[int, int]:
        if not self.is_directed and v < u:
            return v, u
        return u, v

    def _append_edge(self, u: int, v: int) -> None:
        u, v = self._canonical(u, v)
        self._adjacency[u].append(v)
        self._reverse[v].append(u)

    def _ensure_vertex(self, vertex: int) -> None:
        if vertex < 0:
            msg = f"Vertex handles must be non-negative, got {vertex}"
            raise ValueError(msg)
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []
            self._reverse[vertex] = []
            self._next_vertex = max(self._next_vertex, vertex + 1)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(mode={self._mode.value}, vertices={len(self)}, edges={self.edge_count()})"
