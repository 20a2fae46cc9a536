"""Errors raised while loading a namespace's REST definition.

Both are recoverable: the converter reports them and moves on to the
next namespace. Anything else raised while reading or parsing is fatal.
"""

from pathlib import Path


class ConverterError(Exception):
    """Base class for converter errors tied to one source file."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{message}: {path}")
        self.path = path


class MissingInputFile(ConverterError):
    def __init__(self, path: Path):
        super().__init__(path, "Could not find specs file")


class EmptySpec(ConverterError):
    def __init__(self, path: Path):
        super().__init__(path, "Endpoints are undefined")
