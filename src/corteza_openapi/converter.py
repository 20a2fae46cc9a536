"""Convert each namespace's rest.yaml into an OpenAPI document.

Namespaces are processed one at a time, in declared order. A missing or
empty definition, or a failed write, only skips that namespace.
"""

from pathlib import Path

import click

from corteza_openapi.config import NamespaceConfig
from corteza_openapi.errors import ConverterError
from corteza_openapi.generator.openapi import build_document
from corteza_openapi.generator.writer import write_document
from corteza_openapi.parser.rest import parse_rest


def convert_namespace(ns: NamespaceConfig, output_dir: Path) -> Path | None:
    """Generate one namespace's document. Returns the written path, or None if skipped."""
    click.echo(
        f"Generating {ns.display_name} documentation from specs file '{ns.source_path}'"
    )

    try:
        groups = parse_rest(ns.source_path)
    except ConverterError as e:
        click.echo(str(e), err=True)
        return None

    document = build_document(ns.namespace, groups)
    output_path = output_dir / f"{ns.namespace}.yaml"

    try:
        write_document(document, output_path)
    except OSError as e:
        click.echo(f"Could not write {output_path}: {e}", err=True)
        return None

    click.echo(f"  Saved {output_path}")
    return output_path


def convert_all(namespaces: list[NamespaceConfig], output_dir: Path) -> list[Path]:
    """Generate documents for all namespaces, returning the paths written."""
    written = []
    for ns in namespaces:
        path = convert_namespace(ns, output_dir)
        if path is not None:
            written.append(path)
    return written
