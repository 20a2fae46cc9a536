"""CLI entry point for corteza-openapi."""

from pathlib import Path

import click

from corteza_openapi.config import DEFAULT_SOURCE_ROOT, Settings, namespace_configs
from corteza_openapi.converter import convert_all


@click.command()
@click.argument(
    "source_root",
    required=False,
    default=str(DEFAULT_SOURCE_ROOT),
    type=click.Path(path_type=Path),
)
def main(source_root: Path):
    """Generate OpenAPI documents from Corteza rest.yaml definitions.

    SOURCE_ROOT is the corteza-server checkout (defaults to ../corteza-server).
    Documents are written to ./swagger/, or under $CORTEZA_OPENAPI_OUTPUT.
    """
    settings = Settings.from_env()
    namespaces = namespace_configs(source_root)

    written = convert_all(namespaces, settings.output_dir)

    click.echo(f"Done! Generated {len(written)} of {len(namespaces)} documents in {settings.output_dir}")


if __name__ == "__main__":
    main()
