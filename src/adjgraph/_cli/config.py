"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast


class ConfigError(Exception):
    """Error in adjgraph configuration."""


@dataclass(slots=True, frozen=True)
class DotConfig:
    """Global DOT attributes from ``[tool.adjgraph.dot]``."""

    graph: dict[str, object] = field(default_factory=dict)
    node: dict[str, object] = field(default_factory=dict)
    edge: dict[str, object] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class AdjgraphConfig:
    """Configuration loaded from pyproject.toml.

    Command-line options take precedence over these values.
    """

    directed: bool = True
    deterministic: bool = True
    dot: DotConfig = field(default_factory=DotConfig)
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_bool(section: dict[str, object], key: str, *, default: bool) -> bool:
    if key not in section:
        return default
    value = section[key]
    if not isinstance(value, bool):
        msg = f"Invalid [tool.adjgraph].{key}: expected true or false"
        raise ConfigError(msg)
    return value


def _parse_dot(value: object) -> DotConfig:
    if not isinstance(value, dict):
        msg = "Invalid [tool.adjgraph.dot]: expected a table"
        raise ConfigError(msg)
    dot_section = cast("dict[str, object]", value)

    unknown = set(dot_section) - {"graph", "node", "edge"}
    if unknown:
        msg = f"Unknown keys in [tool.adjgraph.dot]: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    tables: dict[str, dict[str, object]] = {}
    for name in ("graph", "node", "edge"):
        attrs = dot_section.get(name, {})
        if not isinstance(attrs, dict):
            msg = f"Invalid [tool.adjgraph.dot].{name}: expected a table of attributes"
            raise ConfigError(msg)
        tables[name] = cast("dict[str, object]", attrs)

    return DotConfig(graph=tables["graph"], node=tables["node"], edge=tables["edge"])


def load_config(pyproject_path: Path) -> AdjgraphConfig:
    """Load and validate [tool.adjgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed AdjgraphConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("adjgraph", {})
    if not section:
        return AdjgraphConfig(project_root=project_root)

    dot = _parse_dot(section["dot"]) if "dot" in section else DotConfig()

    return AdjgraphConfig(
        directed=_parse_bool(section, "directed", default=True),
        deterministic=_parse_bool(section, "deterministic", default=True),
        dot=dot,
        project_root=project_root,
    )


def get_config() -> AdjgraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        AdjgraphConfig (defaults if no pyproject.toml or no [tool.adjgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return AdjgraphConfig()
    return load_config(pyproject_path)
