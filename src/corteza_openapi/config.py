"""Static configuration: namespaces, default locations and document metadata."""

import os
from pathlib import Path

from pydantic import BaseModel

# Relative to the working directory: run from a checkout that sits next to corteza-server
DEFAULT_SOURCE_ROOT = Path("../corteza-server")

SOURCE_FILENAME = "rest.yaml"
OUTPUT_SUBDIR = "swagger"
OUTPUT_ENV_VAR = "CORTEZA_OPENAPI_OUTPUT"

# (namespace, display name), processed in this order
NAMESPACES: list[tuple[str, str]] = [
    ("system", "System"),
    ("compose", "Compose"),
    ("messaging", "Messaging"),
]

OPENAPI_VERSION = "3.0.0"
API_VERSION = "1.0.0"
CONTACT_EMAIL = "contact@mail.com"
LICENSE = {
    "name": "Apache 2.0",
    "url": "http://www.apache.org/licenses/LICENSE-2.0.html",
}


class NamespaceConfig(BaseModel):
    """Where one namespace's definition lives and how it is named."""

    source_path: Path
    namespace: str
    display_name: str


class Settings(BaseModel):
    """Run-time settings resolved from the environment."""

    output_root: Path

    @classmethod
    def from_env(cls) -> "Settings":
        output_root = os.getenv(OUTPUT_ENV_VAR)
        return cls(output_root=Path(output_root) if output_root else Path.cwd())

    @property
    def output_dir(self) -> Path:
        return self.output_root / OUTPUT_SUBDIR


def namespace_configs(
    root: Path, namespaces: list[tuple[str, str]] | None = None
) -> list[NamespaceConfig]:
    """Build the namespace list for a source root."""
    return [
        NamespaceConfig(
            source_path=root / namespace / SOURCE_FILENAME,
            namespace=namespace,
            display_name=display_name,
        )
        for namespace, display_name in (namespaces or NAMESPACES)
    ]
