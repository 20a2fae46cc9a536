"""Map Corteza parameter type tokens to OpenAPI schema fragments.

Type tokens come straight from rest.yaml and are mostly Go types
(``uint64``, ``*time.Time``, ``[]string``). New tokens go in the tables below.
"""

import copy
from typing import Any

PASSWORD_TYPE = "password"
# Parameter names that always get the password schema
PASSWORD_NAMES = {"password", "secret"}
ARRAY_MARKER = "[]"

# Scalar tokens -> schema
SCALAR_SCHEMAS: dict[str, dict[str, Any]] = {
    "string": {"type": "string"},
    # Corteza IDs are 64-bit and travel as strings
    "uint": {"type": "string"},
    "uint64": {"type": "string"},
    "int": {"type": "integer"},
    "int64": {"type": "integer"},
    "integer": {"type": "integer"},
    "uint8": {"type": "integer"},
    "bool": {"type": "boolean"},
    "boolean": {"type": "boolean"},
    "uuid": {"type": "string", "format": "uuid"},
    "time.Time": {"type": "string", "format": "date-time"},
    "*time.Time": {"type": "string", "format": "date-time"},
    "sqlxTypes.JSONText": {"type": "string", "format": "json"},
    "json.RawMessage": {"type": "string", "format": "json"},
    "*multipart.FileHeader": {"type": "string", "format": "binary"},
    PASSWORD_TYPE: {"type": "string", "format": "password"},
}

DEFAULT_SCHEMA: dict[str, Any] = {"type": "string"}

# Well-known Corteza structures, substituted wholesale
COMPOSITE_SCHEMAS: dict[str, dict[str, Any]] = {
    "types.RecordValueSet": {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "value": {"type": "string"},
            },
        },
    },
    "permissions.RuleSet": {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "roleID": {"type": "string"},
                "resource": {"type": "string"},
                "operation": {"type": "string"},
                "access": {"type": "string", "enum": ["allow", "deny", "inherit"]},
            },
        },
    },
    "types.ModuleFieldSet": {
        "type": "array",
        "items": {
            "type": "object",
            "properties": {
                "fieldID": {"type": "string"},
                "name": {"type": "string"},
                "kind": {"type": "string"},
                "label": {"type": "string"},
                "defaultValue": {"type": "string"},
                "maxLength": {"type": "integer"},
                "isRequired": {"type": "boolean"},
                "isPrivate": {"type": "boolean"},
                "isMulti": {"type": "boolean"},
                "isSystem": {"type": "boolean"},
                "options": {"type": "object"},
            },
        },
    },
}


def _element_type(type_token: str) -> str | None:
    """Return the element token of an array token, or None for non-arrays.

    Accepts both ``string[]`` and the Go spelling ``[]string``.
    """
    if type_token.endswith(ARRAY_MARKER):
        return type_token[: -len(ARRAY_MARKER)]
    if type_token.startswith(ARRAY_MARKER):
        return type_token[len(ARRAY_MARKER):]
    return None


def _lookup(type_token: str) -> dict[str, Any]:
    """Resolve a non-array token via the composite and scalar tables."""
    if type_token in COMPOSITE_SCHEMAS:
        return copy.deepcopy(COMPOSITE_SCHEMAS[type_token])
    return dict(SCALAR_SCHEMAS.get(type_token, DEFAULT_SCHEMA))


def get_schema(type_token: str | None, param_name: str = "") -> dict[str, Any]:
    """Return the OpenAPI schema for a parameter type token.

    Parameters named in PASSWORD_NAMES always get the password schema,
    whatever their declared type. Unknown tokens fall back to a plain string.
    Every call returns a fresh dict.
    """
    if param_name in PASSWORD_NAMES:
        type_token = PASSWORD_TYPE
    type_token = (type_token or "").strip()

    element = _element_type(type_token)
    if element is not None:
        return {"type": "array", "items": _lookup(element)}

    return _lookup(type_token)
