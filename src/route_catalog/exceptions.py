"""Errors raised while building the route catalog."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base catalog error.

    ``message`` is the fixed text returned to API clients; the optional
    ``detail`` only ends up in logs.
    """

    message = "Route catalog unavailable"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail


class MissingDocument(CatalogError):
    """The OpenAPI document is not present on disk."""

    message = "OpenAPI file not found"


class ParseFailure(CatalogError):
    """The OpenAPI document exists but could not be parsed or flattened."""

    message = "Failed to parse OpenAPI file"
