"""Connector geometry engine."""

from crowsfoot.layout.geometry import (
    ConnectorGeometry,
    compute_connector_geometry,
    compute_diagram_geometry,
)

__all__ = ["ConnectorGeometry", "compute_connector_geometry", "compute_diagram_geometry"]
