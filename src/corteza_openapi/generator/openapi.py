"""Build OpenAPI 3.0 documents from parsed endpoint groups.

Pure transformation, no I/O. Parameter locations map as follows:

- ``get``  -> query parameters
- ``path`` -> path parameters, always required
- ``post`` -> one object schema shared by the JSON and form request bodies

Endpoints whose combined paths collide are merged into one path item,
one entry per HTTP method.
"""

from typing import Any

from corteza_openapi.config import API_VERSION, CONTACT_EMAIL, LICENSE, OPENAPI_VERSION
from corteza_openapi.parser.base import Endpoint, EndpointGroup, ParamDecl, ParameterMap
from .schema import get_schema

REQUEST_BODY_MEDIA_TYPES = ("application/json", "application/x-www-form-urlencoded")


def build_info(namespace: str) -> dict[str, Any]:
    return {
        "title": f"Corteza {namespace} API",
        "description": f"Corteza {namespace} REST API definition",
        "version": API_VERSION,
        "contact": {"email": CONTACT_EMAIL},
        "license": dict(LICENSE),
    }


def merge_parameters(base: ParameterMap, own: ParameterMap) -> ParameterMap:
    """Prepend group-level parameters to the endpoint's, per location.

    Keys keep the endpoint's order; group-only locations follow.
    """
    merged: ParameterMap = {}
    for location, params in own.items():
        merged[location] = [*base.get(location, []), *params]
    for location, params in base.items():
        if location not in merged:
            merged[location] = list(params)
    return merged


def _param_object(param: ParamDecl, location: str, required: bool) -> dict[str, Any]:
    obj: dict[str, Any] = {"in": location, "name": param.name}
    if param.title is not None:
        obj["description"] = param.title
    obj["required"] = required
    obj["schema"] = get_schema(param.type, param.name)
    return obj


def build_request_body(params: list[ParamDecl]) -> dict[str, Any]:
    """Collect post parameters into a single object schema."""
    properties: dict[str, Any] = {}
    required: list[str] = []

    for p in params:
        prop = get_schema(p.type, p.name)
        if p.title is not None:
            prop["description"] = p.title
        properties[p.name] = prop
        if p.required:
            required.append(p.name)

    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required

    return {"content": {media: {"schema": schema} for media in REQUEST_BODY_MEDIA_TYPES}}


def build_operation(tag: str, endpoint: Endpoint, parameters: ParameterMap) -> dict[str, Any]:
    """Build the operation object for one endpoint."""
    operation: dict[str, Any] = {
        "tags": [tag],
        "summary": endpoint.title,
        "responses": {"200": {"description": "OK"}},
    }

    for location, params in parameters.items():
        if not params:
            continue

        if location == "get":
            operation.setdefault("parameters", []).extend(
                _param_object(p, "query", p.required) for p in params
            )
        elif location == "path":
            operation.setdefault("parameters", []).extend(
                _param_object(p, "path", True) for p in params
            )
        elif location == "post":
            operation["requestBody"] = build_request_body(params)

    return operation


def build_paths(groups: list[EndpointGroup]) -> dict[str, Any]:
    """Build the ``paths`` object; colliding paths merge by method."""
    paths: dict[str, Any] = {}
    for group in groups:
        for endpoint in group.apis:
            parameters = merge_parameters(group.parameters, endpoint.parameters)
            operation = build_operation(group.title, endpoint, parameters)
            path_item = paths.setdefault(f"{group.path}{endpoint.path}", {})
            path_item[endpoint.method.lower()] = operation
    return paths


def build_document(namespace: str, groups: list[EndpointGroup]) -> dict[str, Any]:
    """Assemble a complete OpenAPI document for one namespace."""
    return {
        "openapi": OPENAPI_VERSION,
        "info": build_info(namespace),
        "paths": build_paths(groups),
    }
