"""Postman Collection v2.0 / v2.1 loader.

Reads exported collection files (JSON, or the same structure in YAML) into
:class:`~postman_openapi.parser.base.Collection` models.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from postman_openapi.exceptions import CollectionLoadError, NotACollectionError
from postman_openapi.parser.base import Collection
from postman_openapi.parser.detect import detect_document

logger = logging.getLogger(__name__)


def parse_collection(data: Any) -> Collection:
    """Validate already-parsed collection data."""
    kind = detect_document(data)
    if kind != "postman":
        raise NotACollectionError(f"Document is not a Postman collection (detected: {kind})")
    try:
        return Collection.model_validate(data)
    except ValidationError as exc:
        raise CollectionLoadError(f"Invalid Postman collection: {exc}") from exc


def load_collection(file_path: Path) -> Collection:
    """Load a Postman collection file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CollectionLoadError(f"Cannot read {file_path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CollectionLoadError(f"{file_path} is neither JSON nor YAML: {exc}") from exc

    collection = parse_collection(data)
    logger.info("Loaded collection %r from %s", collection.info.name, file_path)
    return collection
