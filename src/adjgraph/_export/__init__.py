"""Visualization export for adjgraph graphs."""

from .dot import Dot, export_dot, format_value, render_dot, write_dot

__all__ = ["Dot", "export_dot", "format_value", "render_dot", "write_dot"]
