"""Command-line interface for the Group Design basic inputs.

Usage::

    group-design solve <carriageway> [--spacing S] [--girders N] [--overhang O] --changed FIELD
    group-design validate <input_yaml>
    group-design template
"""

from __future__ import annotations

import json
import logging

import click

from groupdesign.geometry import GeometryError, GeometryField, overall_width, solve
from groupdesign.input_parser import InputError, load_sample, parse_input
from groupdesign.settings import configure_logging, load_settings

logger = logging.getLogger(__name__)

_FIELD_CHOICES = [f.value for f in GeometryField]


# ---------------------------------------------------------------------------
# Top-level group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(package_name="group-design")
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages.")
def main(verbose: bool) -> None:
    """Group Design - bridge basic inputs and deck geometry."""
    level = "DEBUG" if verbose else load_settings().log_level
    configure_logging(level)


# ---------------------------------------------------------------------------
# solve
# ---------------------------------------------------------------------------

@main.command("solve")
@click.argument("carriageway", type=float)
@click.option("--spacing", type=float, default=None, help="Girder spacing (m).")
@click.option("--girders", type=int, default=None, help="Number of girders.")
@click.option("--overhang", type=float, default=None, help="Deck overhang (m).")
@click.option(
    "--changed",
    type=click.Choice(_FIELD_CHOICES),
    required=True,
    help="The field that was just edited.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def solve_cmd(carriageway: float, spacing, girders, overhang, changed: str,
              as_json: bool) -> None:
    """Resolve deck geometry for a CARRIAGEWAY width in metres."""
    try:
        result = solve(carriageway, spacing, girders, overhang, changed)
        width = overall_width(carriageway)
    except GeometryError as exc:
        logger.debug("solve rejected: %s", exc.errors)
        if as_json:
            click.echo(json.dumps({"success": False, "errors": exc.errors}, indent=2))
        else:
            for name, message in exc.errors.items():
                click.secho(f"{name}: {message}", fg="red", err=True)
        raise SystemExit(1) from exc

    if as_json:
        click.echo(json.dumps({
            "success": True,
            "data": {
                "girder_spacing": result.girder_spacing,
                "num_girders": result.num_girders,
                "deck_overhang": result.deck_overhang,
                "overall_width": width,
            },
        }, indent=2))
        return

    click.echo(f"Overall width   : {width:.3f} m")
    click.echo(f"Girder spacing  : {result.girder_spacing:.3f} m")
    click.echo(f"No. of girders  : {result.num_girders}")
    click.echo(f"Deck overhang   : {result.deck_overhang:.3f} m")


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
def validate(input_file: str) -> None:
    """Validate INPUT_FILE without running anything."""
    click.echo(f"Validating {input_file} ...")
    try:
        project = parse_input(input_file)
    except InputError as exc:
        click.secho("Validation errors found:", fg="red", err=True)
        for message in exc.messages:
            click.secho(f"  - {message}", fg="red", err=True)
        raise SystemExit(1) from exc

    for warning in project.warnings():
        click.secho(f"Warning: {warning}", fg="yellow")

    click.secho("Input file is valid.", fg="green")
    click.echo(f"  Span              : {project.span} m")
    click.echo(f"  Carriageway width : {project.carriageway_width} m")
    geometry = project.bridge_geometry()
    if geometry is not None:
        click.echo(f"  Overall width     : {geometry.overall_width} m")
        click.echo(
            f"  Girders           : {geometry.num_girders} @ {geometry.girder_spacing} m, "
            f"overhang {geometry.deck_overhang} m"
        )


# ---------------------------------------------------------------------------
# template
# ---------------------------------------------------------------------------

@main.command()
def template() -> None:
    """Print a sample input YAML file to stdout."""
    click.echo(load_sample(), nl=False)


if __name__ == "__main__":
    main()
