"""Command-line interface for railnet-pipeline."""

from pathlib import Path
from typing import Optional

import typer
import uvicorn
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from .config import NetworkConfig, load_config
from .errors import RailNetworkError
from .logging_config import setup_logging
from .pipeline import PipelineResult, build_network
from .reader import read_edges, read_stations
from .writer import write_shapefiles

app = typer.Typer(
    name="railnet",
    help="Project rail stations and track edges onto a simplified plane network",
    no_args_is_help=True,
)
console = Console()


@app.command()
def build(
    edges_path: Path = typer.Option(..., "--edges", "-e", exists=True, dir_okay=False, help="Edges JSON export"),
    stations_path: Optional[Path] = typer.Option(None, "--stations", "-s", exists=True, dir_okay=False, help="Stations JSON export"),
    config_file: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, help="NetworkConfig JSON file"),
    grid_size: Optional[int] = typer.Option(None, "--grid-size", min=1, help="Output grid size per axis"),
    simplify: Optional[bool] = typer.Option(None, "--simplify/--no-simplify", help="Merge near-collinear points"),
    strict: bool = typer.Option(False, "--strict/--no-strict", help="Abort on the first invalid record"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the pipeline result as JSON"),
    shapefile_base: Optional[Path] = typer.Option(None, "--shapefile", help="Write <base>_lines/<base>_stations shapefiles"),
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
) -> None:
    """Build a plane network from station and edge exports.

    Examples:

        railnet build -s gares.json -e lignes.json

        railnet build -e lignes.json --grid-size 2000 --no-simplify -o network.json
    """
    setup_logging(log_level.upper())

    try:
        config = load_config(config_file) if config_file else NetworkConfig()
        if grid_size is not None:
            config.projection = config.projection.model_copy(update={"grid_size": grid_size})
        if simplify is not None:
            config.simplify = config.simplify.model_copy(update={"enabled": simplify})
        config.strict = config.strict or strict

        stations = read_stations(stations_path, strict=config.strict) if stations_path else []
        edges = read_edges(edges_path, strict=config.strict)
        result = build_network(stations, edges, config)
    except (RailNetworkError, ValidationError) as exc:
        console.print(f"Error: {exc}", style="bold red")
        raise typer.Exit(code=1)

    display_results(result)

    if output:
        output.write_text(result.model_dump_json(indent=2), encoding="utf-8")
        console.print(f"Result saved to {output}")

    if shapefile_base:
        for path in write_shapefiles(result.network, shapefile_base):
            console.print(f"Shapefile written: {path}.shp")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
    reload: bool = typer.Option(False, "--reload/--no-reload"),
) -> None:
    """Run the HTTP service."""
    setup_logging()
    uvicorn.run("railnet_pipeline.server:app", host=host, port=port, reload=reload)


def display_results(result: PipelineResult) -> None:
    network = result.network
    table = Table(title="Network")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Lines", str(network.line_count()))
    table.add_row("Station points", str(network.point_count()))
    table.add_row("Vertices in", str(result.vertices_in))
    table.add_row("Vertices kept", str(result.vertices_out))
    table.add_row("Rejected records", str(len(result.rejected)))
    console.print(table)

    for rejected in result.rejected:
        console.print(f"  {rejected.kind} {rejected.index} ({rejected.code or '-'}): {rejected.reason}", style="yellow")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
