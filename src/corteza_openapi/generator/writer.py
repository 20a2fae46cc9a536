"""Serialize OpenAPI documents to YAML and write them to disk."""

from pathlib import Path
from typing import Any

import yaml


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that writes shared objects out in full instead of as anchors."""

    def ignore_aliases(self, data):
        return True


def dump_document(document: dict[str, Any]) -> str:
    """Render a document as YAML, keeping key insertion order."""
    return yaml.dump(
        document,
        Dumper=_NoAliasDumper,
        sort_keys=False,
        allow_unicode=True,
    )


def write_document(document: dict[str, Any], output_path: Path) -> Path:
    """Write a document to output_path, overwriting any existing file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_document(document), encoding="utf-8")
    return output_path
