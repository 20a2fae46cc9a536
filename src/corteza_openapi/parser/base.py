"""Data models for parsed Corteza REST definitions.

A ``rest.yaml`` file holds a list of endpoint groups; each group shares a
base path and base parameters with the endpoints ("apis") under it.
"""

from pydantic import BaseModel, field_validator


def _scalar_to_str(value):
    # YAML reads `title: 2020` or `title: yes` as int / bool
    if isinstance(value, (bool, int, float)):
        return str(value)
    return value


class ParamDecl(BaseModel):
    """A single declared parameter.

    Plain YAML scalars (numbers, yes/no) in name, title and type are read
    as strings; a null required flag means not required.
    """

    name: str
    title: str | None = None
    type: str | None = "string"  # Corteza/Go type token, e.g. uint64, []string
    required: bool = False

    @field_validator("name", "title", "type", mode="before")
    @classmethod
    def scalar_to_str(cls, value):
        return _scalar_to_str(value)

    @field_validator("required", mode="before")
    @classmethod
    def null_required(cls, value):
        return False if value is None else value


# location key (get / post / path) -> declared parameters, in order
ParameterMap = dict[str, list[ParamDecl]]


def _drop_nulls(value):
    # `parameters:` and `get:` are often left empty in rest.yaml
    if value is None:
        return {}
    if isinstance(value, dict):
        return {k: v or [] for k, v in value.items()}
    return value


class Endpoint(BaseModel):
    """A single HTTP operation inside an endpoint group."""

    title: str = ""
    path: str = ""
    method: str
    parameters: ParameterMap = {}

    @field_validator("title", "path", mode="before")
    @classmethod
    def text_fields(cls, value):
        return "" if value is None else _scalar_to_str(value)

    @field_validator("parameters", mode="before")
    @classmethod
    def normalize_parameters(cls, value):
        return _drop_nulls(value)


class EndpointGroup(BaseModel):
    """A tag-level grouping of endpoints sharing a base path."""

    title: str = ""
    path: str = ""
    parameters: ParameterMap = {}
    apis: list[Endpoint] = []

    @field_validator("title", "path", mode="before")
    @classmethod
    def text_fields(cls, value):
        return "" if value is None else _scalar_to_str(value)

    @field_validator("parameters", mode="before")
    @classmethod
    def normalize_parameters(cls, value):
        return _drop_nulls(value)

    @field_validator("apis", mode="before")
    @classmethod
    def normalize_apis(cls, value):
        return value or []
