"""Tests for the adjgraph command line."""

import logging
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from adjgraph import Edge
from adjgraph._cli.edges import build_graph, parse_edge_spec
from adjgraph._cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every command from a directory without a pyproject.toml."""
    monkeypatch.chdir(tmp_path)


class TestEdgeArguments:
    def test_edge(self) -> None:
        assert parse_edge_spec("3:4") == (3, 4)

    def test_isolated_vertex(self) -> None:
        assert parse_edge_spec("7") == (7, None)

    @pytest.mark.parametrize("spec", ["a:b", "1:2:3", "", "1:", "-1:2"])
    def test_invalid(self, spec: str) -> None:
        with pytest.raises(typer.BadParameter):
            parse_edge_spec(spec)

    def test_build_graph(self) -> None:
        graph = build_graph(["0:1", "1:2", "5"], directed=True)
        assert sorted(graph.vertices()) == [0, 1, 2, 5]
        assert sorted(graph.edges()) == [Edge(0, 1), Edge(1, 2)]

    def test_build_undirected_graph(self) -> None:
        graph = build_graph(["2:1"], directed=False)
        assert graph.edges() == [Edge(1, 2)]


class TestToposortCommand:
    def test_deterministic_order(self) -> None:
        result = runner.invoke(app, ["toposort", "0:1", "0:2", "1:3", "1:4", "2:5", "2:6"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0 2 6 5 1 4 3"

    def test_cycle_exits_with_error(self) -> None:
        result = runner.invoke(app, ["toposort", "0:1", "1:0"])
        assert result.exit_code == 1
        assert "not a DAG" in result.output

    def test_empty_graph(self) -> None:
        result = runner.invoke(app, ["toposort"])
        assert result.exit_code == 0
        assert "empty" in result.stdout

    def test_config_disables_determinism(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.adjgraph]\ndeterministic = false\n")
        result = runner.invoke(app, ["toposort", "2:1", "1:0"])
        assert result.exit_code == 0
        assert result.stdout.split() == ["2", "1", "0"]

    def test_invalid_config(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.adjgraph]\ndeterministic = 1\n")
        result = runner.invoke(app, ["toposort", "0:1"])
        assert result.exit_code == 1
        assert "deterministic" in result.output

    def test_bad_edge_argument(self) -> None:
        result = runner.invoke(app, ["toposort", "x:y"])
        assert result.exit_code != 0


class TestPathCommand:
    EDGES = ["0:1", "1:2", "1:3", "2:3", "3:4", "3:5", "4:5"]

    def test_path_found(self) -> None:
        result = runner.invoke(app, ["path", "0", "5", *self.EDGES])
        assert result.exit_code == 0
        assert "0 -> 1 -> 3 -> 5" in result.stdout
        assert "3 hop(s)" in result.stdout

    def test_no_path(self) -> None:
        result = runner.invoke(app, ["path", "5", "0", *self.EDGES])
        assert result.exit_code == 0
        assert "No path" in result.stdout

    def test_undirected(self) -> None:
        result = runner.invoke(app, ["path", "5", "0", "--undirected", *self.EDGES])
        assert result.exit_code == 0
        assert "5 -> 3 -> 1 -> 0" in result.stdout

    def test_undirected_from_config(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.adjgraph]\ndirected = false\n")
        result = runner.invoke(app, ["path", "5", "0", *self.EDGES])
        assert "5 -> 3 -> 1 -> 0" in result.stdout

    def test_unknown_vertex(self) -> None:
        result = runner.invoke(app, ["path", "0", "9", *self.EDGES])
        assert result.exit_code == 1
        assert "Unknown vertex: 9" in result.output

    def test_logs_built_graph_lazily(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="adjgraph._cli.main")
        runner.invoke(app, ["path", "0", "5", *self.EDGES])
        records = [r for r in caplog.records if r.name == "adjgraph._cli.main"]
        assert [r.msg for r in records] == ["Built %r"]
        assert records[0].getMessage() == "Built Graph(mode=directed, vertices=6, edges=7)"


class TestDotCommand:
    def test_stdout(self) -> None:
        result = runner.invoke(app, ["dot", "1:0", "0:2"])
        assert result.exit_code == 0
        assert result.stdout == "digraph {\n\t0 -> 2;\n\t1 -> 0;\n}\n"

    def test_undirected_named(self) -> None:
        result = runner.invoke(app, ["dot", "--undirected", "--name", "g", "1:0"])
        assert result.stdout == "graph g {\n\t0 -- 1;\n}\n"

    def test_config_attributes(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.adjgraph.dot.node]\nshape = "box"\n')
        result = runner.invoke(app, ["dot", "0:1"])
        assert result.stdout == "digraph {\n\tnode [ shape=box ];\n\t0 -> 1;\n}\n"

    def test_output_file(self, tmp_path: Path) -> None:
        output = tmp_path / "out.dot"
        result = runner.invoke(app, ["dot", "0:1", "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8") == "digraph {\n\t0 -> 1;\n}\n"


class TestInfoCommand:
    def test_table(self) -> None:
        result = runner.invoke(app, ["info", "0:1", "0:2", "3"])
        assert result.exit_code == 0
        assert "Total: 4 vertices, 2 edges (directed)" in result.stdout

    def test_empty(self) -> None:
        result = runner.invoke(app, ["info"])
        assert "Graph is empty" in result.stdout
