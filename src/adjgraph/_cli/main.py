import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adjgraph._errors import GraphError
from adjgraph._export import Dot, export_dot, render_dot
from adjgraph._graph import shortest_path, topological_sort

from .config import ConfigError, get_config
from .edges import build_graph
from .render import render_order, render_path, render_vertex_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgesArgument = Annotated[
    list[str] | None,
    typer.Argument(help="Edges as 'U:V' (or 'N' for an isolated vertex)", show_default=False),
]
DirectedOption = Annotated[
    bool | None,
    typer.Option("--directed/--undirected", help="Treat edges as directed (default from config)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Adjgraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(error: Exception) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(str(error))}[/red]")
    return typer.Exit(code=1)


@app.command()
def toposort(
    edges: EdgesArgument = None,
    *,
    deterministic: Annotated[
        bool | None,
        typer.Option(
            "--deterministic/--any-order",
            help="Break ties by ascending vertex handle (default from config)",
        ),
    ] = None,
) -> None:
    """Print the vertices of a directed graph in topological order."""
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(e) from e
    if deterministic is None:
        deterministic = config.deterministic

    graph = build_graph(edges or [], directed=True)
    logger.debug("Built %r", graph)

    try:
        order = topological_sort(graph, deterministic=deterministic)
    except GraphError as e:
        raise _fail(e) from e

    render_order(order, out_console)


@app.command()
def path(
    source: Annotated[int, typer.Argument(help="Start vertex")],
    target: Annotated[int, typer.Argument(help="End vertex")],
    edges: EdgesArgument = None,
    *,
    directed: DirectedOption = None,
) -> None:
    """Print a path with the fewest edges from SOURCE to TARGET."""
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(e) from e
    if directed is None:
        directed = config.directed

    graph = build_graph(edges or [], directed=directed)
    logger.debug("Built %r", graph)

    try:
        found = shortest_path(graph, source, target)
    except GraphError as e:
        raise _fail(e) from e

    render_path(found, out_console)


@app.command()
def dot(
    edges: EdgesArgument = None,
    *,
    directed: DirectedOption = None,
    name: Annotated[str, typer.Option("--name", help="Graph name")] = "",
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write to this file instead of stdout"),
    ] = None,
) -> None:
    """Write the graph as Graphviz DOT text."""
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(e) from e
    if directed is None:
        directed = config.directed

    graph = build_graph(edges or [], directed=directed)
    description = Dot(
        graph,
        name=name,
        graph_attrs=dict(config.dot.graph),
        vertex_global_attrs=dict(config.dot.node),
        edge_global_attrs=dict(config.dot.edge),
    )

    if output is None:
        typer.echo(render_dot(description), nl=False)
        return

    export_dot(description, output)
    err_console.print(f"[green]✓ Wrote {escape(str(output))}[/green]")


@app.command()
def info(
    edges: EdgesArgument = None,
    *,
    directed: DirectedOption = None,
) -> None:
    """Show every vertex with its degrees and neighbours."""
    try:
        config = get_config()
    except ConfigError as e:
        raise _fail(e) from e
    if directed is None:
        directed = config.directed

    graph = build_graph(edges or [], directed=directed)
    render_vertex_table(graph, out_console)


if __name__ == "__main__":
    app()
