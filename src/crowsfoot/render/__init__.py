"""SVG rendering for ER diagrams."""

from crowsfoot.render.svg import render_svg

__all__ = ["render_svg"]
