"""Extract OpenAPI parameters declared directly on a Postman request."""

import re
from typing import Any

from postman_openapi.generator.objects import Parameter
from postman_openapi.parser.base import KeyValue, Request, Url

# Headers that OpenAPI describes elsewhere (requestBody content, security).
_SKIPPED_HEADERS = {"content-type", "accept", "authorization"}

_INTEGER_RE = re.compile(r"^-?\d+$")
_NUMBER_RE = re.compile(r"^-?\d+\.\d+$")


def infer_type(value: Any) -> str:
    """Guess the primitive schema type of a Postman example value."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        if value.lower() in ("true", "false"):
            return "boolean"
        if _INTEGER_RE.match(value):
            return "integer"
        if _NUMBER_RE.match(value):
            return "number"
    return "string"


def _has_variable(value: Any) -> bool:
    return isinstance(value, str) and "{{" in value


def _to_parameter(entry: KeyValue, location: str, required: bool = False) -> Parameter:
    param = Parameter(
        name=entry.key,
        location=location,
        required=required,
        schema={"type": infer_type(entry.value)},
    )
    if entry.description_text:
        param.description = entry.description_text
    if entry.value not in (None, "") and not _has_variable(entry.value):
        param.example = entry.value
    return param


def extract_parameters(request: str | Request) -> list[Parameter]:
    """Return query, header and path parameters declared on ``request``.

    Disabled entries and entries without a key are ignored. Path
    parameters come only from the URL's ``variable`` list; placeholders
    that are not declared there produce nothing.
    """
    if isinstance(request, str):
        return []

    params: list[Parameter] = []
    url = request.url if isinstance(request.url, Url) else None

    if url is not None:
        for entry in url.query:
            if entry.key and not entry.disabled:
                params.append(_to_parameter(entry, "query"))

    if isinstance(request.header, list):
        for entry in request.header:
            if not entry.key or entry.disabled:
                continue
            if entry.key.lower() in _SKIPPED_HEADERS:
                continue
            params.append(_to_parameter(entry, "header"))

    if url is not None:
        for entry in url.variable:
            if entry.key and not entry.disabled:
                params.append(_to_parameter(entry, "path", required=True))

    return params
