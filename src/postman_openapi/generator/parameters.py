"""Merge request parameters with the parameter table of a description."""

import logging
from collections.abc import Collection, Iterable

from postman_openapi.generator.objects import Parameter
from postman_openapi.parser.markdown import parse_md_table, split_description

logger = logging.getLogger(__name__)

_TABLE_LOCATIONS = ("path", "query", "header")


def parameters_from_table(table: str) -> list[Parameter]:
    """Build parameters from markdown table text.

    Expected columns: object (the location), name, description, required,
    type, example. Only the exact value ``true`` marks a parameter required.
    """
    params = []
    for index, row in parse_md_table(table).items():
        name = row.get("name")
        location = (row.get("object") or "").lower()
        if not name:
            continue
        if location not in _TABLE_LOCATIONS:
            logger.debug("Skipping table row %d: unsupported location %r", index, location)
            continue
        param = Parameter(
            name=name,
            location=location,
            description=row.get("description"),
            required=row.get("required") == "true",
            schema={"type": row.get("type") or "string"},
        )
        if row.get("example"):
            param.example = row["example"]
        params.append(param)
    return params


def merge_parameters(
    extracted: Iterable[Parameter],
    from_table: Iterable[Parameter],
    path_parameter_names: Collection[str],
) -> list[Parameter]:
    """Deduplicate parameters by name; table parameters replace extracted ones.

    Path parameters whose name is not a placeholder of the path are dropped
    from both sources.
    """
    merged: dict[str, Parameter] = {}
    for source in (extracted, from_table):
        for param in source:
            if param.location == "path" and param.name not in path_parameter_names:
                continue
            merged[param.name] = param
    return list(merged.values())


def reconcile_parameters(
    description: str,
    extracted: Iterable[Parameter],
    path_parameter_names: Collection[str],
) -> tuple[str, list[Parameter]]:
    """Return (description without its tables, merged parameter list)."""
    text, table = split_description(description)
    return text.strip(), merge_parameters(extracted, parameters_from_table(table), path_parameter_names)
