"""CLI entry point for postman-openapi."""

import json
import logging
from pathlib import Path
from typing import Any

import click
import yaml

from postman_openapi.config import build_options
from postman_openapi.exceptions import PostmanOpenApiError
from postman_openapi.generator.document import convert_collection
from postman_openapi.parser.detect import detect_format
from postman_openapi.parser.postman import load_collection


def _output_format(output: Path, fmt: str) -> str:
    if fmt != "auto":
        return fmt
    return "yaml" if output.suffix in (".yaml", ".yml") else "json"


def _serialize(document: dict[str, Any], fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """Convert Postman collections into OpenAPI 3.0 documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("collection_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file path for the OpenAPI document.")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "json", "yaml"]), help="Output format.")
@click.option("--strict", is_flag=True, default=False, help="Report operations and security schemes that overwrite earlier ones.")
@click.option("--default-tag", default=None, help="Tag for requests outside any folder.")
@click.option("--title", default=None, help="Override info.title.")
@click.option("--api-version", default=None, help="Override info.version.")
@click.option("--no-servers", is_flag=True, default=False, help="Do not emit a servers section.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML or JSON file with conversion options.")
def convert(
    collection_path: Path,
    output: Path,
    fmt: str,
    strict: bool,
    default_tag: str | None,
    title: str | None,
    api_version: str | None,
    no_servers: bool,
    config_path: Path | None,
):
    """Convert a Postman collection into an OpenAPI document."""
    try:
        options = build_options(
            config_path,
            strict=True if strict else None,
            default_tag=default_tag,
            title=title,
            version=api_version,
            include_servers=False if no_servers else None,
        )
        click.echo(f"Loading {collection_path}...")
        collection = load_collection(collection_path)
    except PostmanOpenApiError as exc:
        error = click.ClickException(str(exc))
        error.exit_code = exc.exit_code
        raise error from exc

    result = convert_collection(collection, options)
    click.echo(f"Converted {len(result.document['paths'])} paths.")

    if options.strict and result.collisions:
        click.echo(f"Warning: {len(result.collisions)} definitions were overwritten.", err=True)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_serialize(result.document, _output_format(output, fmt)), encoding="utf-8")
    click.echo(f"OpenAPI document saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def detect(doc_path: Path):
    """Print the detected format of a document: postman, openapi or unknown."""
    click.echo(detect_format(doc_path))
