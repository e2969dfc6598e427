"""CLI for crowsfoot."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from crowsfoot import __version__
from crowsfoot.layout import compute_connector_geometry, compute_diagram_geometry
from crowsfoot.layout.anchors import parse_anchor
from crowsfoot.layout.constants import HOP_OVER_HEIGHT, PERPENDICULAR_OFFSET
from crowsfoot.layout.notation import cardinality_class
from crowsfoot.parser import load_diagram
from crowsfoot.parser.model import Diagram
from crowsfoot.render import render_svg
from crowsfoot.themes import THEMES


def _load(input_file: Path) -> Diagram:
    try:
        return load_diagram(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log routing decisions.")
def cli(verbose: bool) -> None:
    """crowsfoot: Route ER diagram connectors and draw crow's-foot notation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
@click.option("--perpendicular-offset", type=float, default=PERPENDICULAR_OFFSET,
              help=f"Straight run out of each node (default: {PERPENDICULAR_OFFSET:g})")
@click.option("--hop-height", type=float, default=HOP_OVER_HEIGHT,
              help=f"Height of hop-over arcs (default: {HOP_OVER_HEIGHT:g})")
@click.option("--legend/--no-legend", default=True, help="Draw the notation legend")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: int | None,
    height: int | None,
    perpendicular_offset: float,
    hop_height: float,
    legend: bool,
) -> None:
    """Render a JSON diagram definition to SVG."""
    diagram = _load(input_file)

    svg = render_svg(
        diagram,
        THEMES[theme],
        width=width,
        height=height,
        legend=legend,
        perpendicular_offset=perpendicular_offset,
        hop_height=hop_height,
    )
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(diagram.nodes)} nodes, "
               f"{len(diagram.edges)} connectors -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a JSON diagram definition."""
    diagram = _load(input_file)

    errors = []
    for edge in diagram.edges:
        for role, node_id, anchor in (
            ("source", edge.source, edge.source_anchor),
            ("target", edge.target, edge.target_anchor),
        ):
            if node_id not in diagram.nodes:
                errors.append(f"Edge '{edge.id}' references unknown {role} "
                              f"node '{node_id}'")
            if anchor and parse_anchor(anchor) is None:
                errors.append(f"Edge '{edge.id}' has unknown {role} anchor '{anchor}'")
        if edge.relationship_type and edge.cardinality is None:
            errors.append(f"Edge '{edge.id}' has unrecognized relationship type "
                          f"'{edge.relationship_type}'")

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(diagram.nodes)} nodes, {len(diagram.edges)} connectors")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a JSON diagram definition."""
    diagram = _load(input_file)
    geometries = compute_diagram_geometry(diagram.nodes, diagram.edges)

    click.echo(f"Title: {diagram.title or '(none)'}")
    click.echo(f"Nodes: {len(diagram.nodes)}")
    click.echo(f"Connectors: {len(diagram.edges)}")
    for edge in diagram.edges:
        kind = cardinality_class(edge.cardinality).value if edge.cardinality else "-"
        hops = len(geometries[edge.id].intersections)
        click.echo(f"  {edge.id}: {edge.source} -> {edge.target} "
                   f"[{kind}] {hops} hop(s)")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--edge", "edge_id", default=None,
              help="Only compute this connector (default: all)")
@click.option("--perpendicular-offset", type=float, default=PERPENDICULAR_OFFSET,
              help=f"Straight run out of each node (default: {PERPENDICULAR_OFFSET:g})")
@click.option("--hop-height", type=float, default=HOP_OVER_HEIGHT,
              help=f"Height of hop-over arcs (default: {HOP_OVER_HEIGHT:g})")
def geometry(
    input_file: Path,
    edge_id: str | None,
    perpendicular_offset: float,
    hop_height: float,
) -> None:
    """Print computed connector geometry as JSON."""
    diagram = _load(input_file)

    if edge_id is not None:
        try:
            geom = compute_connector_geometry(
                diagram.nodes, diagram.edges, edge_id,
                perpendicular_offset=perpendicular_offset, hop_height=hop_height,
            )
        except KeyError:
            click.echo(f"Unknown edge '{edge_id}'", err=True)
            raise SystemExit(1)
        result = [geom.to_dict()]
    else:
        geometries = compute_diagram_geometry(
            diagram.nodes, diagram.edges,
            perpendicular_offset=perpendicular_offset, hop_height=hop_height,
        )
        result = [g.to_dict() for g in geometries.values()]

    click.echo(json.dumps(result, indent=2))
