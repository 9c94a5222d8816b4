"""OpenAPI 3.x document parser.

The raw YAML tree is validated into typed models at the parse boundary,
then every (path, method) pair under ``paths`` is flattened into a
RouteDescriptor. Document order is preserved.
"""

import datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from ..exceptions import MissingDocument, ParseFailure
from .base import ParameterDescriptor, RouteDescriptor

# Path item fields that are not operations.
PATH_ITEM_FIELDS = frozenset({"summary", "description", "servers", "parameters", "$ref"})


def _scalar_to_text(value: Any) -> Any:
    # PyYAML resolves YAML 1.1 dates and numbers; keep those as text.
    if isinstance(value, (int, float, datetime.date)) and not isinstance(value, bool):
        return str(value)
    return value


class SchemaObject(BaseModel):
    type: str | list[str] | None = None

    def primary_type(self) -> str:
        """Return the declared type, picking the first non-null one from a 3.1 type list."""
        if isinstance(self.type, list):
            return next((t for t in self.type if t != "null"), "string")
        return self.type or "string"


class ParameterObject(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str = Field(alias="in")
    required: bool | None = None
    description: str | None = None
    schema_: SchemaObject | None = Field(default=None, alias="schema")

    @field_validator("name", "description", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Any:
        return _scalar_to_text(value)

    @model_validator(mode="before")
    @classmethod
    def _resolve_ref(cls, data: Any, info: ValidationInfo) -> Any:
        root = (info.context or {}).get("root", {})
        seen: set[str] = set()
        while isinstance(data, dict) and "$ref" in data:
            ref = data["$ref"]
            if not isinstance(ref, str):
                raise ValueError(f"$ref must be a string, got {type(ref).__name__}")
            if ref in seen:
                raise ValueError(f"Circular $ref {ref!r}")
            seen.add(ref)
            data = resolve_ref(root, ref)
        return data


class Operation(BaseModel):
    summary: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    parameters: list[ParameterObject] | None = None

    @field_validator("summary", "description", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Any:
        return _scalar_to_text(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _tag_text(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_scalar_to_text(tag) for tag in value]
        return value


class OpenApiDocument(BaseModel):
    paths: dict[str, dict[str, Operation]] = {}

    @field_validator("paths", mode="before")
    @classmethod
    def _operations_only(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        return {route: _strip_path_item_fields(item) for route, item in value.items()}


def _strip_path_item_fields(item: Any) -> Any:
    if not isinstance(item, dict):
        return item
    return {
        method: operation
        for method, operation in item.items()
        if method not in PATH_ITEM_FIELDS and not str(method).startswith("x-")
    }


def resolve_ref(root: dict, ref: str) -> Any:
    """Resolve a local JSON pointer such as ``#/components/parameters/limit``."""
    if not isinstance(ref, str) or not ref.startswith("#/"):
        raise ValueError(f"Only local $ref pointers are supported, got {ref!r}")

    node: Any = root
    for token in ref[2:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and token in node:
            node = node[token]
        elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
            node = node[int(token)]
        else:
            raise ValueError(f"Unresolvable $ref {ref!r}")
    return node


def parse_document(text: str) -> OpenApiDocument:
    """Parse OpenAPI YAML (or JSON) text into a validated OpenApiDocument."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseFailure(f"Invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ParseFailure(f"Expected a mapping at the document root, got {type(data).__name__}")

    try:
        return OpenApiDocument.model_validate(data, context={"root": data})
    except ValidationError as exc:
        raise ParseFailure(f"Unexpected document shape: {exc}") from exc


def flatten_routes(document: OpenApiDocument) -> list[RouteDescriptor]:
    """Flatten ``paths`` into one RouteDescriptor per (path, method) pair."""
    routes = []
    for route, operations in document.paths.items():
        for method, operation in operations.items():
            routes.append(
                RouteDescriptor(
                    method=method.upper(),
                    route=route,
                    summary=operation.summary or "",
                    description=operation.description or "",
                    tags=operation.tags or [],
                    parameters=_parse_parameters(operation.parameters or []),
                )
            )
    return routes


def _parse_parameters(params: list[ParameterObject]) -> list[ParameterDescriptor]:
    return [
        ParameterDescriptor(
            name=p.name,
            location=p.location,
            required=p.required or False,
            type=p.schema_.primary_type() if p.schema_ else "string",
            description=p.description or "",
        )
        for p in params
    ]


def load_routes(file_path: Path) -> list[RouteDescriptor]:
    """Read an OpenAPI file and return its flattened route catalog."""
    if not file_path.exists():
        raise MissingDocument(str(file_path))

    try:
        text = file_path.read_text(encoding="utf-8")
        return flatten_routes(parse_document(text))
    except ParseFailure:
        raise
    except Exception as exc:
        raise ParseFailure(f"Cannot load {file_path}: {exc}") from exc
