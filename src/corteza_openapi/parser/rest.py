"""Corteza ``rest.yaml`` parser.

Loads the ``endpoints`` list of a namespace definition into EndpointGroup models.
"""

from pathlib import Path

import yaml

from corteza_openapi.errors import EmptySpec, MissingInputFile
from .base import EndpointGroup


def parse_rest(file_path: Path) -> list[EndpointGroup]:
    """Parse a rest.yaml file into a list of EndpointGroup.

    Raises MissingInputFile when the file does not exist and EmptySpec when
    it has no endpoints. YAML and validation errors propagate unchanged.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MissingInputFile(file_path) from e

    doc = yaml.safe_load(text)

    endpoints = doc.get("endpoints") if isinstance(doc, dict) else None
    if not endpoints:
        raise EmptySpec(file_path)

    return [EndpointGroup.model_validate(group) for group in endpoints]
