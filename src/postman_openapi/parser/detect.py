"""Detect the format of an API description document."""

import json
from pathlib import Path
from typing import Any

import yaml

POSTMAN_SCHEMA_HOST = "schema.getpostman.com"


def detect_document(data: Any) -> str:
    """Classify parsed document data.

    Returns: 'postman', 'openapi', or 'unknown'.
    """
    if not isinstance(data, dict):
        return "unknown"
    if "openapi" in data or "swagger" in data:
        return "openapi"
    info = data.get("info")
    if isinstance(info, dict):
        if "_postman_id" in info or POSTMAN_SCHEMA_HOST in str(info.get("schema", "")):
            return "postman"
        if isinstance(data.get("item"), list):
            return "postman"
    return "unknown"


def detect_format(file_path: Path) -> str:
    """Detect the format of a JSON or YAML file.

    Returns: 'postman', 'openapi', or 'unknown'.
    """
    text = file_path.read_text(encoding="utf-8")

    # Try YAML/JSON parsing
    try:
        return detect_document(yaml.safe_load(text))
    except yaml.YAMLError:
        pass

    # Try JSON specifically (for files not parseable as YAML)
    try:
        return detect_document(json.loads(text))
    except (json.JSONDecodeError, ValueError):
        pass

    return "unknown"
