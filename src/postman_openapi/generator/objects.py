"""OpenAPI 3.0 objects produced by the converter.

Field names follow Python conventions; aliases carry the OpenAPI names.
Serialize with :func:`dump`, which drops unset optional fields.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ParameterLocation = Literal["path", "query", "header"]


class OpenApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MediaType(OpenApiModel):
    schema_: dict | None = Field(default=None, alias="schema")
    example: Any = None


class Parameter(OpenApiModel):
    """A single operation parameter (path, query, or header)."""

    name: str
    location: ParameterLocation = Field(alias="in")
    description: str | None = None
    required: bool = False
    schema_: dict = Field(default_factory=lambda: {"type": "string"}, alias="schema")
    example: Any = None


class RequestBody(OpenApiModel):
    description: str | None = None
    content: dict[str, MediaType] = {}
    required: bool | None = None


class Response(OpenApiModel):
    description: str
    content: dict[str, MediaType] = {}


class SecurityScheme(OpenApiModel):
    type: str  # apiKey / http / oauth2
    scheme: str | None = None
    bearer_format: str | None = Field(default=None, alias="bearerFormat")
    name: str | None = None
    location: str | None = Field(default=None, alias="in")
    flows: dict[str, Any] | None = None


class Operation(OpenApiModel):
    tags: list[str]
    summary: str | None = None
    description: str = ""
    operation_id: str | None = Field(default=None, alias="operationId")
    parameters: list[Parameter] = []
    request_body: RequestBody | None = Field(default=None, alias="requestBody")
    security: list[dict[str, list[str]]] | None = None
    responses: dict[str, Response] = {}


PathItem = dict[str, Operation]
Paths = dict[str, PathItem]
SecuritySchemes = dict[str, SecurityScheme]


def dump(value: Any) -> Any:
    """Convert models (or dicts/lists of models) into plain OpenAPI data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, dict):
        return {key: dump(item) for key, item in value.items()}
    if isinstance(value, list):
        return [dump(item) for item in value]
    return value
