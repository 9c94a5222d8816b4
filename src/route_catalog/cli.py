"""CLI entry point for route-catalog."""

import fnmatch
import json
import logging
from pathlib import Path

import click
import uvicorn
from pydantic import ValidationError

from route_catalog.app import create_app
from route_catalog.config import Settings
from route_catalog.exceptions import CatalogError
from route_catalog.parser.base import RouteDescriptor
from route_catalog.parser.openapi import load_routes

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _build_settings(**overrides) -> Settings:
    """Settings from the environment, with CLI options taking precedence."""
    try:
        return Settings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        raise click.BadParameter(f"Invalid configuration: {exc}") from exc


def _filter_routes(routes: list[RouteDescriptor], patterns: tuple[str, ...]) -> list[RouteDescriptor]:
    """Keep routes matching any pattern.

    A pattern is ``METHOD /path``, a bare ``/path`` or a bare ``METHOD``.
    Paths accept shell-style wildcards, e.g. ``/pets/*``.
    """
    if not patterns:
        return routes

    def matches(route: RouteDescriptor, pattern: str) -> bool:
        parts = pattern.split(maxsplit=1)
        if len(parts) == 2:
            method, path = parts
        elif pattern.startswith("/"):
            method, path = None, pattern
        else:
            method, path = pattern, None
        if method and route.method != method.upper():
            return False
        return path is None or fnmatch.fnmatchcase(route.route, path)

    return [r for r in routes if any(matches(r, p) for p in patterns)]


@click.group()
def main():
    """Route Catalog: serve a flattened route list from an OpenAPI document."""
    pass


@main.command()
@click.option("--host", default=None, help="Interface to bind (default: HOST or 0.0.0.0).")
@click.option("--port", default=None, type=click.IntRange(1, 65535), help="Port to listen on (default: PORT or 3000).")
@click.option("--openapi-path", default=None, type=click.Path(path_type=Path), help="OpenAPI document to serve.")
@click.option("--log-level", default=None, type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Logging level.")
def serve(host: str | None, port: int | None, openapi_path: Path | None, log_level: str | None):
    """Run the HTTP server exposing GET /."""
    settings = _build_settings(host=host, port=port, openapi_path=openapi_path, log_level=log_level)
    logging.basicConfig(level=getattr(logging, settings.log_level), format=LOG_FORMAT)

    app = create_app(settings)
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


@main.command()
@click.option("--openapi-path", default=None, type=click.Path(path_type=Path), help="OpenAPI document to read.")
@click.option("--method", "methods", multiple=True, help="Only list routes with this HTTP method (case-insensitive). Repeatable.")
@click.option("--endpoint", "patterns", multiple=True, help="Only list matching routes, e.g. 'GET /pets' or '/pets/*'. Repeatable.")
def routes(openapi_path: Path | None, methods: tuple[str, ...], patterns: tuple[str, ...]):
    """Print the route catalog as JSON."""
    settings = _build_settings(openapi_path=openapi_path)
    try:
        catalog = load_routes(settings.openapi_path)
    except CatalogError as exc:
        raise click.ClickException(exc.message) from exc

    if methods:
        wanted = {m.upper() for m in methods}
        catalog = [r for r in catalog if r.method in wanted]
    catalog = _filter_routes(catalog, patterns)
    click.echo(json.dumps([r.model_dump(by_alias=True) for r in catalog], indent=2))
