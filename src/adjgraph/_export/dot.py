"""Graphviz DOT rendering for adjgraph graphs.

Output layout:
    digraph {                      (``graph {`` when undirected)
        graph [ k=v ];             global blocks, only when set
        edge [ k=v ];
        node [ k=v ];
        3 [ label=Start ];         attributed vertices, ascending
        0 -> 1;                    every edge, sorted by (u, v)
        1 -> 2 [ color=red ];
    }
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from adjgraph._graph import Edge

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path
    from typing import TextIO

    from adjgraph._graph import Graph

logger = logging.getLogger(__name__)

# Bare identifiers and numerals need no quoting in DOT
_DOT_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)")
# Keywords are reserved in any case and must be quoted to be used as IDs
_DOT_KEYWORDS = frozenset({"node", "edge", "graph", "digraph", "subgraph", "strict"})


def _attr_map() -> defaultdict[object, dict[str, object]]:
    return defaultdict(dict)


@dataclass(slots=True)
class Dot:
    """A graph plus the attributes to render it with.

    The per-element maps create an empty attribute dict on first access, so
    ``dot.vertex_attrs[v]["label"] = "x"`` works for any vertex. Only
    vertices with at least one attribute are listed in the output.

    Attributes:
        graph: The graph to render.
        name: Optional graph name written after the keyword.
        graph_attrs: Attributes of the graph as a whole.
        vertex_global_attrs: Attributes applied to every vertex (``node [...]``).
        edge_global_attrs: Attributes applied to every edge (``edge [...]``).
        vertex_attrs: Attributes per vertex handle.
        edge_attrs: Attributes per edge. Undirected edges are keyed by their
            canonical form; use ``edge()`` to get that for free.

    """

    graph: Graph
    name: str = ""
    graph_attrs: dict[str, object] = field(default_factory=dict)
    vertex_global_attrs: dict[str, object] = field(default_factory=dict)
    edge_global_attrs: dict[str, object] = field(default_factory=dict)
    vertex_attrs: defaultdict[int, dict[str, object]] = field(default_factory=_attr_map)
    edge_attrs: defaultdict[Edge, dict[str, object]] = field(default_factory=_attr_map)

    def vertex(self, vertex: int) -> dict[str, object]:
        """Return the attribute dict of a vertex."""
        return self.vertex_attrs[vertex]

    def edge(self, u: int, v: int) -> dict[str, object]:
        """Return the attribute dict of the edge ``(u, v)``.

        For an undirected graph the endpoints are put in canonical order
        first, so ``edge(2, 1)`` and ``edge(1, 2)`` are the same dict.
        """
        if not self.graph.is_directed and v < u:
            u, v = v, u
        return self.edge_attrs[Edge(u, v)]


def format_value(value: object) -> str:
    """Format an attribute value as DOT text.

    Booleans become ``true``/``false``. Identifiers and numerals are written
    as they are. Anything else, including the DOT keywords, is double-quoted
    with backslashes and quotes escaped.

    Example:
        >>> format_value(False)
        'false'
        >>> format_value("Happy")
        'Happy'
        >>> format_value("two words")
        '"two words"'
        >>> format_value("node")
        '"node"'

    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    text = str(value)
    if _DOT_ID.fullmatch(text) and text.lower() not in _DOT_KEYWORDS:
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _attr_block(attrs: Mapping[str, object]) -> str:
    body = ", ".join(f"{key}={format_value(attrs[key])}" for key in sorted(attrs))
    return f"[ {body} ];"


def render_dot(dot: Dot) -> str:
    """Render a Dot description as DOT text.

    Args:
        dot: The graph and attributes to render.

    Returns:
        The complete DOT document, ending with a newline.

    """
    graph = dot.graph
    keyword, separator = ("digraph", "->") if graph.is_directed else ("graph", "--")
    header = f"{keyword} {format_value(dot.name)} {{" if dot.name else f"{keyword} {{"
    lines = [header]

    for block_name, attrs in (
        ("graph", dot.graph_attrs),
        ("edge", dot.edge_global_attrs),
        ("node", dot.vertex_global_attrs),
    ):
        if attrs:
            lines.append(f"\t{block_name} {_attr_block(attrs)}")

    for vertex in sorted(graph.vertices()):
        attrs = dot.vertex_attrs.get(vertex)
        if attrs:
            lines.append(f"\t{vertex} {_attr_block(attrs)}")

    for edge in sorted(graph.edges()):
        attrs = dot.edge_attrs.get(edge)
        line = f"\t{edge.u} {separator} {edge.v}"
        lines.append(f"{line} {_attr_block(attrs)}" if attrs else f"{line};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(stream: TextIO, dot: Dot) -> int:
    """Write a Dot description to a text stream.

    Returns:
        Number of characters written.

    """
    return stream.write(render_dot(dot))


def export_dot(dot: Dot, output_path: Path) -> None:
    """Write a Dot description to a file."""
    with output_path.open("w", encoding="utf-8") as f:
        write_dot(f, dot)
    logger.debug("Exported DOT graph to %s", output_path)
