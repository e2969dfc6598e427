"""Diagram model and JSON loader."""

from crowsfoot.parser.diagram import load_diagram, parse_diagram

__all__ = ["load_diagram", "parse_diagram"]
