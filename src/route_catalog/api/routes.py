"""HTTP API for the route catalog."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..catalog import RouteCatalog
from ..parser.base import RouteDescriptor

router = APIRouter()


def get_catalog(request: Request) -> RouteCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise RuntimeError("RouteCatalog is not initialised")
    return catalog


@router.get("/", response_model=list[RouteDescriptor], tags=["catalog"])
def read_routes(catalog: RouteCatalog = Depends(get_catalog)) -> list[RouteDescriptor]:
    return catalog.load()
