"""Graph algorithms: topological ordering and unit-weight shortest path."""

import logging
from collections.abc import Iterator
from enum import Enum, auto

from adjgraph._errors import NotADAGError, UnknownVertexError

from ._priority import PriorityQueue, QueueItem
from ._store import Graph

logger = logging.getLogger(__name__)


class _Mark(Enum):
    IN_PROGRESS = auto()
    DONE = auto()


def _successors(graph: Graph, vertex: int, *, deterministic: bool) -> Iterator[int]:
    neighbours = graph.neighbours(vertex)
    if deterministic:
        neighbours.sort()
    return iter(neighbours)


def topological_sort(graph: Graph, *, deterministic: bool = False) -> list[int]:
    """Sort the vertices of a directed graph topologically.

    Every vertex appears before all vertices it has an edge to. The graph is
    only read; the traversal state lives in local marks.

    The search is a depth-first post-order walk with three marks per vertex
    (unvisited, in progress, done). Reaching an in-progress vertex means the
    walk has closed a cycle. An explicit stack replaces recursion so long
    chains do not hit the interpreter's recursion limit.

    Args:
        graph: A directed graph.
        deterministic: Visit start vertices and each vertex's neighbours in
            ascending handle order, so the same graph always gives the same
            result. Otherwise the graph's enumeration order is used and only
            the edge ordering is guaranteed.

    Returns:
        List of vertices in topological order. Empty for an empty graph.

    Raises:
        NotADAGError: If the graph contains a cycle.
        ValueError: If the graph is undirected.

    Example:
        >>> g = Graph.from_mapping({0: [1, 2], 1: [3, 4], 2: [5, 6]})
        >>> topological_sort(g, deterministic=True)
        [0, 2, 6, 5, 1, 4, 3]

    """
    if not graph.is_directed:
        msg = "Topological sort requires a directed graph"
        raise ValueError(msg)

    candidates = graph.vertices()
    if deterministic:
        candidates.sort()
    logger.debug("Topologically sorting %d vertices (deterministic=%s)", len(candidates), deterministic)

    marks: dict[int, _Mark] = {}
    finished: list[int] = []

    for root in candidates:
        if root in marks:
            continue
        marks[root] = _Mark.IN_PROGRESS
        path = [root]
        stack = [_successors(graph, root, deterministic=deterministic)]
        while stack:
            for w in stack[-1]:
                mark = marks.get(w)
                if mark is _Mark.IN_PROGRESS:
                    cycle = [*path[path.index(w) :], w]
                    logger.debug("Cycle detected: %s", cycle)
                    raise NotADAGError(cycle)
                if mark is None:
                    marks[w] = _Mark.IN_PROGRESS
                    path.append(w)
                    stack.append(_successors(graph, w, deterministic=deterministic))
                    break
            else:
                # All neighbours of the top vertex are done
                stack.pop()
                done = path.pop()
                marks[done] = _Mark.DONE
                finished.append(done)

    finished.reverse()
    return finished


def is_dag(graph: Graph) -> bool:
    """Check whether a directed graph has no cycles."""
    try:
        topological_sort(graph)
    except NotADAGError:
        return False
    return True


def shortest_path(graph: Graph, source: int, target: int) -> list[int]:
    """Find a path with the fewest edges from ``source`` to ``target``.

    Dijkstra's algorithm with every edge weighing 1. The frontier is a
    max-priority queue keyed on negated distance, so the nearest vertex
    pops first. Works for both graph modes through ``Graph.neighbours``.

    The number of hops is always minimal. Which of several equally short
    paths is returned depends on neighbour order and on how the queue
    breaks ties, and is not guaranteed.

    Args:
        graph: The graph to search. It is not modified.
        source: Start vertex.
        target: End vertex.

    Returns:
        The path as a list of vertices starting with ``source`` and ending
        with ``target``, or an empty list if ``target`` is unreachable.

    Raises:
        UnknownVertexError: If ``source`` or ``target`` is not in the graph.

    """
    for endpoint in (source, target):
        if endpoint not in graph:
            raise UnknownVertexError(endpoint)

    distance: dict[int, int] = {source: 0}
    previous: dict[int, int] = {source: source}
    queue = PriorityQueue()
    queued: dict[int, QueueItem] = {source: queue.push(source, 0)}

    while queue:
        vertex = queue.pop().vertex
        del queued[vertex]
        if vertex == target:
            return _walk_back(previous, source, target)

        candidate = distance[vertex] + 1
        for w in graph.neighbours(vertex):
            if w in distance and distance[w] <= candidate:
                continue
            distance[w] = candidate
            previous[w] = vertex
            pending = queued.get(w)
            if pending is not None:
                queue.update(pending, -candidate)
            else:
                queued[w] = queue.push(w, -candidate)

    logger.debug("No path from %d to %d", source, target)
    return []


def _walk_back(previous: dict[int, int], source: int, target: int) -> list[int]:
    path = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    return path
