"""Route catalog FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.routes import router
from .catalog import RouteCatalog
from .config import Settings, get_settings
from .exceptions import CatalogError

logger = logging.getLogger(__name__)


async def _catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app serving the catalog for ``settings.openapi_path``."""

    settings = settings or get_settings()
    app = FastAPI(title="Route Catalog", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.catalog = RouteCatalog(settings.openapi_path)
    app.add_exception_handler(CatalogError, _catalog_error_handler)
    app.include_router(router)
    logger.info("Route catalog initialised for %s", settings.openapi_path)
    return app
