"""crowsfoot: connector routing and crow's-foot notation for ER diagrams."""

__version__ = "0.1.0"
