"""CLI entry point for routespec."""

import logging
from pathlib import Path

import click

from routespec.builder.document import build_swagger
from routespec.builder.operation import build_paths
from routespec.config import Config
from routespec.errors import RouteFileError
from routespec.registry.loader import load_routes
from routespec.writer import write_document


def _load_config(routes_path: Path) -> Config:
    """Load route definitions, turning file errors into CLI errors."""
    try:
        return load_routes(routes_path)
    except RouteFileError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log each translated route.")
def main(verbose: bool):
    """routespec: build Swagger documents from route definitions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("routes_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the Swagger document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "yaml", "json"]), help="Output format (auto picks by file suffix).")
@click.option("--title", default=None, help="Override the document title.")
@click.option("--api-version", default=None, help="Override the document version.")
@click.option("--host", default=None, help="Override the document host.")
def build(routes_path: Path, output: Path, fmt: str, title: str | None, api_version: str | None, host: str | None):
    """Build a Swagger document from a route file."""
    click.echo(f"Reading routes from {routes_path}...")
    config = _load_config(routes_path)

    overrides = {"title": title, "version": api_version, "host": host}
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    route_count = sum(len(ws.routes()) for ws in config.web_services)
    click.echo(f"Found {route_count} routes in {len(config.web_services)} services.")

    swagger = build_swagger(config)
    write_document(swagger, output, fmt)
    click.echo(f"Wrote {len(swagger.paths)} paths to {output}")


@main.command()
@click.argument("routes_path", type=click.Path(exists=True, path_type=Path))
def paths(routes_path: Path):
    """List the normalized paths and methods of a route file."""
    config = _load_config(routes_path)

    result = {}
    for ws in config.web_services:
        build_paths(ws, name_for_type=config.name_for_type, paths=result)

    for path, item in result.items():
        for method in item.operations():
            click.echo(f"{method:<7} {path}")
