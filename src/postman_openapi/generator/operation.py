"""Build the OpenAPI operation for a single Postman request."""

import re
from collections.abc import Sequence

from postman_openapi.config import ConvertOptions
from postman_openapi.generator.fragment import Fragment
from postman_openapi.generator.objects import Operation, SecuritySchemes
from postman_openapi.generator.parameters import reconcile_parameters
from postman_openapi.generator.responses import synthesize_responses
from postman_openapi.generator.security import apply_security
from postman_openapi.parser.base import Item, Request
from postman_openapi.parser.body import extract_request_body
from postman_openapi.parser.params import extract_parameters
from postman_openapi.parser.url import (
    extract_path_from_url,
    extract_path_parameter_names,
    normalize_path,
)

TAG_SEPARATOR = " > "
BODY_METHODS = ("post", "put", "patch")

_OPERATION_ID_RE = re.compile(r"\s*\[([^\]]+)\]$")


def split_operation_id(name: str | None) -> tuple[str | None, str | None]:
    """Split ``"Get widget [getWidget]"`` into ``("Get widget", "getWidget")``."""
    if not name:
        return name, None
    match = _OPERATION_ID_RE.search(name)
    if match is None:
        return name, None
    return name[: match.start()], match.group(1)


def build_operation(item: Item, tags: Sequence[str], options: ConvertOptions) -> Fragment:
    """Convert ``item`` into a fragment holding one path with one method."""
    request = item.request
    if isinstance(request, Request):
        method = (request.method or "get").lower()
        raw_url = request.raw_url
        description = request.description_text
    else:
        method = "get"
        raw_url = request
        description = ""

    path = normalize_path(extract_path_from_url(raw_url))
    path_parameter_names = extract_path_parameter_names(path)
    summary, operation_id = split_operation_id(item.name)

    operation = Operation(
        tags=[TAG_SEPARATOR.join(tags)] if tags else [options.default_tag],
        summary=summary,
        description=description,
        operation_id=operation_id,
    )

    if description:
        operation.description, operation.parameters = reconcile_parameters(
            description, extract_parameters(request), path_parameter_names
        )

    schemes: SecuritySchemes = {}
    if isinstance(request, Request):
        if request.auth is not None:
            apply_security(operation, request.auth, schemes)
        if method in BODY_METHODS and request.body is not None:
            operation.request_body = extract_request_body(request.body)

    operation.responses = synthesize_responses(item)

    return Fragment(paths={path: {method: operation}}, security_schemes=schemes)
