"""Rich rendering utilities for CLI results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from adjgraph._graph import Graph


def render_order(order: list[int], console: Console) -> None:
    """Render a topological order on one line."""
    if not order:
        console.print("[dim]Graph is empty[/dim]")
        return
    console.print(" ".join(str(v) for v in order))


def render_path(path: list[int], console: Console) -> None:
    """Render a path as ``a -> b -> c``, or a notice when there is none."""
    if not path:
        console.print("[yellow]No path[/yellow]")
        return
    console.print(" -> ".join(str(v) for v in path))
    console.print(f"[dim]{len(path) - 1} hop(s)[/dim]")


def render_vertex_table(graph: Graph, console: Console) -> None:
    """Render every vertex with its degrees and neighbours.

    Args:
        graph: The graph to describe.
        console: Rich Console to output to.

    """
    if len(graph) == 0:
        console.print("[dim]Graph is empty[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="bold", justify="right")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    table.add_column("Neighbours")

    for vertex in sorted(graph.vertices()):
        table.add_row(
            str(vertex),
            str(graph.in_degree(vertex)),
            str(graph.out_degree(vertex)),
            ", ".join(str(w) for w in graph.neighbours(vertex)),
        )

    console.print(table)
    mode = "directed" if graph.is_directed else "undirected"
    console.print(f"\n[dim]Total: {len(graph)} vertices, {graph.edge_count()} edges ({mode})[/dim]")
