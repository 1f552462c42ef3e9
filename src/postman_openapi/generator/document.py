"""Assemble a complete OpenAPI document from a Postman collection."""

import logging
import re
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel

from postman_openapi.config import ConvertOptions
from postman_openapi.generator.fragment import Collision, Fragment
from postman_openapi.generator.objects import Paths, dump
from postman_openapi.generator.security import process_auth
from postman_openapi.generator.walker import report_collision, walk
from postman_openapi.parser.base import Collection, CollectionNode, Item, ItemGroup, Request
from postman_openapi.parser.postman import parse_collection
from postman_openapi.parser.url import extract_server_url

logger = logging.getLogger(__name__)

_POSTMAN_VAR_RE = re.compile(r"\{\{([^{}]+)\}\}")


class ConversionResult(BaseModel):
    document: dict[str, Any]
    collisions: list[Collision] = []


def _iter_items(nodes: list[CollectionNode]) -> Iterator[Item]:
    for node in nodes:
        if isinstance(node, ItemGroup):
            yield from _iter_items(node.item)
        elif isinstance(node, Item):
            yield node


def _resolve_variables(text: str, collection: Collection) -> str:
    def replace(match: re.Match) -> str:
        value = collection.variable_value(match.group(1))
        return value if value is not None else match.group(0)

    return _POSTMAN_VAR_RE.sub(replace, text)


def _servers(collection: Collection) -> list[dict[str, str]]:
    base_url = collection.variable_value("baseUrl")
    if base_url:
        return [{"url": base_url.rstrip("/")}]

    urls: list[str] = []
    for item in _iter_items(collection.item):
        raw_url = item.request.raw_url if isinstance(item.request, Request) else item.request
        server = extract_server_url(raw_url)
        if not server:
            continue
        server = _resolve_variables(server, collection)
        if "{{" in server or server in urls:
            continue
        urls.append(server)
    return [{"url": url} for url in urls]


def _info(collection: Collection, options: ConvertOptions) -> dict[str, str]:
    info = {
        "title": options.title or collection.info.name or "API",
        "version": options.version or collection.variable_value("version") or "1.0.0",
    }
    if collection.info.description_text:
        info["description"] = collection.info.description_text
    return info


def _tags(paths: Paths) -> list[dict[str, str]]:
    names: list[str] = []
    for path_item in paths.values():
        for operation in path_item.values():
            for tag in operation.tags:
                if tag not in names:
                    names.append(tag)
    return [{"name": name} for name in names]


def convert_collection(collection: Collection, options: ConvertOptions | None = None) -> ConversionResult:
    """Convert ``collection`` and report the collisions met on the way."""
    options = options or ConvertOptions()
    fragment = Fragment()
    requirements: list[dict[str, list[str]]] = []
    if collection.auth is not None:
        fragment.security_schemes, requirements = process_auth(collection.auth)
    for collision in fragment.merge(walk(collection.as_group(), options)):
        report_collision(collision, options)
    schemes = fragment.security_schemes

    document: dict[str, Any] = {
        "openapi": options.openapi_version,
        "info": _info(collection, options),
    }
    if options.include_servers:
        servers = _servers(collection)
        if servers:
            document["servers"] = servers
    tags = _tags(fragment.paths)
    if tags:
        document["tags"] = tags
    document["paths"] = dump(fragment.paths)
    if schemes:
        document["components"] = {"securitySchemes": dump(schemes)}
    if requirements:
        document["security"] = requirements

    logger.info(
        "Converted %d paths, %d security schemes, %d collisions",
        len(fragment.paths),
        len(schemes),
        len(fragment.collisions),
    )
    return ConversionResult(document=document, collisions=fragment.collisions)


def convert(collection: Collection | dict, options: ConvertOptions | None = None) -> dict[str, Any]:
    """Convert a Postman collection (model or raw dict) into an OpenAPI document."""
    if not isinstance(collection, Collection):
        collection = parse_collection(collection)
    return convert_collection(collection, options).document
