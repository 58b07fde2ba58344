"""
Command-line interface for planecut.

Provides commands to cut a mesh by a plane and to inspect a mesh.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from planecut import __version__
from planecut.core.config import PlanecutConfig, apply_overrides, load_config
from planecut.core.exceptions import PlanecutError
from planecut.core.geometry import BoundingBox, GeometryLoader, straddling_triangles
from planecut.core.logging import configure_logging
from planecut.cutting.plane_cutter import PlaneCutter
from planecut.io.plane_descriptor import read_plane

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.option("--json-logs", is_flag=True, default=False, help="Emit logs as JSON lines")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Optional[Path],
    log_level: Optional[str],
    json_logs: bool,
) -> None:
    """planecut - cut triangulated meshes by a plane."""
    try:
        config = load_config(config_path)
    except PlanecutError as e:
        console.print(f"[red]✗[/red] Failed to load configuration: {e}")
        raise SystemExit(1)

    configure_logging(
        level=log_level or config.logging.level,
        json_output=json_logs or config.logging.json_output,
        log_file=config.logging.log_file,
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@main.command("cut")
@click.argument("mesh_path", type=click.Path(path_type=Path))
@click.argument("plane_path", type=click.Path(path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Output mesh file")
@click.option("--tolerance", "-t", type=float, default=None, help="Crossing tolerance near edge endpoints")
@click.pass_context
def cut_command(
    ctx: click.Context,
    mesh_path: Path,
    plane_path: Path,
    output: Optional[Path],
    tolerance: Optional[float],
) -> None:
    """Cut MESH_PATH by the plane in PLANE_PATH and write the result."""
    config: PlanecutConfig = ctx.obj["config"]
    if tolerance is not None:
        try:
            config = apply_overrides(config, cutting={"tolerance": tolerance})
        except PlanecutError as e:
            console.print(f"[red]✗[/red] {e}")
            raise SystemExit(1)
    output_path = output or Path(config.output.path)

    try:
        mesh = GeometryLoader.load(mesh_path)
        console.print(f"File {mesh_path} loaded")

        plane = read_plane(plane_path)
        console.print(f"File {plane_path} loaded")

        result = PlaneCutter.from_settings(config.cutting).cut(mesh, plane)

        table = Table(title="Cut")
        table.add_column("", style="cyan")
        table.add_column("Vertices", justify="right")
        table.add_column("Triangles", justify="right")
        table.add_row("Before", str(result.vertices_before), str(result.triangles_before))
        table.add_row("After", str(result.vertices_after), str(result.triangles_after))
        console.print(table)

        if result.skipped:
            console.print("[yellow]⚠[/yellow] Plane origin is (0, 0, 0); treated as no plane, mesh unchanged")
        else:
            console.print(f"  Splits: {result.splits}, shared crossings: {result.cache_hits}")
            remaining = straddling_triangles(mesh, plane.origin, plane.normal)
            if len(remaining):
                console.print(
                    f"[yellow]⚠[/yellow] {len(remaining)} triangles still straddle the plane "
                    "(crossings too close to a vertex or in-plane edges)"
                )

        GeometryLoader.save(mesh, output_path, precision=config.output.precision)
        console.print(f"[green]✓[/green] File {output_path} written")

    except PlanecutError as e:
        console.print(f"[red]✗[/red] {e}")
        raise SystemExit(1)


@main.command("info")
@click.argument("mesh_path", type=click.Path(path_type=Path))
def info_command(mesh_path: Path) -> None:
    """Show vertex/triangle counts and bounding box of a mesh."""
    try:
        mesh = GeometryLoader.load(mesh_path)

        table = Table(title=f"Mesh: {mesh_path.name}")
        table.add_column("Property", style="cyan")
        table.add_column("Value")
        table.add_row("Vertices", str(mesh.vertex_count))
        table.add_row("Triangles", str(mesh.triangle_count))

        if mesh.vertex_count:
            box = BoundingBox.from_mesh(mesh)
            dims = BoundingBox.get_dimensions(box)
            center = BoundingBox.get_center(box)
            table.add_row("Size", " x ".join(f"{d:.4g}" for d in dims))
            table.add_row("Center", ", ".join(f"{c:.4g}" for c in center))

        console.print(table)

    except PlanecutError as e:
        console.print(f"[red]✗[/red] Failed to load mesh: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
