"""Per-request route catalog loader."""

import logging
from pathlib import Path

from route_catalog.exceptions import MissingDocument, ParseFailure
from route_catalog.parser.base import RouteDescriptor
from route_catalog.parser.openapi import load_routes

logger = logging.getLogger(__name__)


class RouteCatalog:
    """Builds the route catalog from an OpenAPI document on disk.

    The document is re-read and re-parsed on every call, so edits to the
    file show up on the next request.
    """

    def __init__(self, openapi_path: Path):
        self.openapi_path = openapi_path

    def load(self) -> list[RouteDescriptor]:
        try:
            routes = load_routes(self.openapi_path)
        except MissingDocument:
            logger.warning("OpenAPI document not found at %s", self.openapi_path)
            raise
        except ParseFailure:
            logger.exception("Failed to parse OpenAPI document %s", self.openapi_path)
            raise
        logger.debug("Loaded %d routes from %s", len(routes), self.openapi_path)
        return routes
