"""Extract an OpenAPI request body from a Postman request body."""

import json
import logging
from typing import Any

from postman_openapi.generator.objects import MediaType, RequestBody
from postman_openapi.parser.base import Body, KeyValue
from postman_openapi.parser.params import infer_type

logger = logging.getLogger(__name__)


def infer_schema(value: Any) -> dict:
    """Build a JSON schema describing the example ``value``."""
    if value is None:
        return {"nullable": True}
    if isinstance(value, bool):
        return {"type": "boolean"}
    if isinstance(value, int):
        return {"type": "integer"}
    if isinstance(value, float):
        return {"type": "number"}
    if isinstance(value, str):
        return {"type": "string"}
    if isinstance(value, list):
        return {"type": "array", "items": infer_schema(value[0]) if value else {}}
    if isinstance(value, dict):
        return {
            "type": "object",
            "properties": {key: infer_schema(item) for key, item in value.items()},
        }
    return {}


def _raw_language(body: Body) -> str | None:
    options = body.options or {}
    raw_options = options.get("raw") or {}
    if isinstance(raw_options, dict):
        return raw_options.get("language")
    return None


def _form_schema(fields: list[KeyValue], binary_files: bool) -> dict:
    properties: dict[str, dict] = {}
    for field in fields:
        if not field.key or field.disabled:
            continue
        if binary_files and field.type == "file":
            prop = {"type": "string", "format": "binary"}
        else:
            prop = {"type": infer_type(field.value)}
            if field.value not in (None, ""):
                prop["example"] = field.value
        if field.description_text:
            prop["description"] = field.description_text
        properties[field.key] = prop
    return {"type": "object", "properties": properties}


def _raw_body(body: Body) -> RequestBody:
    raw = body.raw or ""
    language = _raw_language(body)

    try:
        example = json.loads(raw) if raw.strip() else None
    except json.JSONDecodeError:
        example = None
        if language == "json":
            # Postman allows comments and variables in JSON bodies.
            logger.debug("Raw body marked as JSON does not parse, keeping it as text")
            return RequestBody(
                content={"application/json": MediaType(schema={"type": "object"}, example=raw)}
            )

    if example is not None:
        return RequestBody(
            content={"application/json": MediaType(schema=infer_schema(example), example=example)}
        )
    if language == "json":
        return RequestBody(content={"application/json": MediaType(schema={"type": "object"})})

    media_type = {
        "xml": "application/xml",
        "html": "text/html",
        "javascript": "application/javascript",
    }.get(language or "", "text/plain")
    return RequestBody(
        content={media_type: MediaType(schema={"type": "string"}, example=raw or None)}
    )


def extract_request_body(body: Body) -> RequestBody:
    """Translate ``body`` by its mode: raw, urlencoded, formdata or graphql."""
    if body.mode == "urlencoded":
        return RequestBody(
            content={
                "application/x-www-form-urlencoded": MediaType(
                    schema=_form_schema(body.urlencoded, binary_files=False)
                )
            }
        )
    if body.mode == "formdata":
        return RequestBody(
            content={
                "multipart/form-data": MediaType(schema=_form_schema(body.formdata, binary_files=True))
            }
        )
    if body.mode == "graphql":
        graphql = body.graphql or {}
        return RequestBody(
            content={
                "application/json": MediaType(
                    schema={
                        "type": "object",
                        "properties": {
                            "query": {"type": "string"},
                            "variables": {"type": "object"},
                        },
                    },
                    example={
                        "query": graphql.get("query", ""),
                        "variables": graphql.get("variables", ""),
                    },
                )
            }
        )
    if body.mode not in (None, "raw"):
        logger.debug("Unsupported body mode %r, emitting an empty JSON body", body.mode)
        return RequestBody(content={"application/json": MediaType()})
    return _raw_body(body)
