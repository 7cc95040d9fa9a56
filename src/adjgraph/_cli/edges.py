"""Building graphs from command-line edge arguments."""

import typer

from adjgraph._graph import Graph


def parse_edge_spec(spec: str) -> tuple[int, int | None]:
    """Parse ``U:V`` into an edge, or a bare ``N`` into an isolated vertex.

    Args:
        spec: The argument as typed on the command line.

    Returns:
        ``(u, v)`` for an edge, ``(n, None)`` for a lone vertex.

    Raises:
        typer.BadParameter: If the argument is not in either form.

    """
    parts = spec.split(":")
    if len(parts) > 2:  # noqa: PLR2004
        msg = f"Invalid edge '{spec}'. Expected 'U:V' or a single vertex 'N'"
        raise typer.BadParameter(msg)
    try:
        handles = [int(part) for part in parts]
    except ValueError:
        msg = f"Invalid edge '{spec}'. Vertex handles must be integers"
        raise typer.BadParameter(msg) from None
    if any(handle < 0 for handle in handles):
        msg = f"Invalid edge '{spec}'. Vertex handles must be non-negative"
        raise typer.BadParameter(msg)
    if len(handles) == 1:
        return handles[0], None
    return handles[0], handles[1]


def build_graph(specs: list[str], *, directed: bool) -> Graph:
    """Build a graph from edge arguments, creating vertices as they appear."""
    mapping: dict[int, list[int]] = {}
    for spec in specs:
        u, v = parse_edge_spec(spec)
        targets = mapping.setdefault(u, [])
        if v is not None:
            targets.append(v)
    return Graph.from_mapping(mapping, directed=directed)
