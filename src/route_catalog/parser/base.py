"""Flattened route catalog models.

The OpenAPI parser converts every (path, method) pair of a document
into these models; they are what the HTTP endpoint and CLI emit.
"""

from pydantic import BaseModel, ConfigDict, Field


class ParameterDescriptor(BaseModel):
    """A single operation parameter (query, path, header, or cookie)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")  # query / path / header / cookie
    required: bool = False
    type: str = "string"  # string / integer / boolean / array / object
    description: str = ""


class RouteDescriptor(BaseModel):
    """One HTTP method on one route, as exposed by the catalog."""

    method: str  # GET / POST / PUT / DELETE / PATCH
    route: str  # /api/users/{id}
    summary: str = ""
    description: str = ""
    tags: list[str] = []
    parameters: list[ParameterDescriptor] = []
