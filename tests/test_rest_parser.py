from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from corteza_openapi.errors import ConverterError, EmptySpec, MissingInputFile
from corteza_openapi.generator.openapi import build_document
from corteza_openapi.parser.rest import parse_rest

FIXTURES = Path(__file__).parent / "fixtures"
SYSTEM = FIXTURES / "corteza-server" / "system" / "rest.yaml"


class TestRestParser:
    def test_parse_groups(self):
        groups = parse_rest(SYSTEM)
        assert [g.title for g in groups] == ["Users", "Auth", "Roles"]

    def test_parse_endpoints(self):
        users = parse_rest(SYSTEM)[0]
        assert users.path == "/users"
        assert len(users.apis) == 3
        assert users.apis[0].parameters["get"][0].title == "search"

    def test_parse_group_parameters(self):
        roles = parse_rest(SYSTEM)[2]
        assert roles.parameters["path"][0].name == "roleID"
        assert roles.apis[0].parameters == {}


class TestRestParserErrors:
    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope" / "rest.yaml"
        with pytest.raises(MissingInputFile) as exc:
            parse_rest(path)
        assert exc.value.path == path
        assert isinstance(exc.value, ConverterError)

    def test_empty_endpoints(self):
        with pytest.raises(EmptySpec):
            parse_rest(FIXTURES / "empty.yaml")

    def test_no_endpoints_key(self, tmp_path):
        path = tmp_path / "rest.yaml"
        path.write_text("title: nothing here\n")
        with pytest.raises(EmptySpec):
            parse_rest(path)

    def test_empty_document(self, tmp_path):
        path = tmp_path / "rest.yaml"
        path.write_text("")
        with pytest.raises(EmptySpec):
            parse_rest(path)

    def test_malformed_yaml_propagates(self):
        with pytest.raises(yaml.YAMLError):
            parse_rest(FIXTURES / "malformed.yaml")

    def test_invalid_structure_propagates(self, tmp_path):
        path = tmp_path / "rest.yaml"
        path.write_text("endpoints:\n  - title: X\n    apis:\n      - title: no method\n")
        with pytest.raises(ValidationError):
            parse_rest(path)


class TestRestParserLooseScalars:
    def test_unusual_scalars_do_not_fail(self, tmp_path):
        path = tmp_path / "rest.yaml"
        path.write_text(
            "endpoints:\n"
            "  - title: Users\n"
            "    path: /users\n"
            "    apis:\n"
            "      - method: GET\n"
            "        path: /\n"
            "        parameters:\n"
            "          get:\n"
            "            - { name: q, type: ~ }\n"
            "            - { name: limit, type: 5 }\n"
            "            - { name: flag, title: yes }\n"
            "            - { name: year, title: 2020 }\n"
        )
        params = parse_rest(path)[0].apis[0].parameters["get"]
        assert params[0].type is None
        assert params[1].type == "5"
        assert params[2].title == "True"
        assert params[3].title == "2020"

    def test_null_type_maps_to_string_schema(self, tmp_path):
        path = tmp_path / "rest.yaml"
        path.write_text(
            "endpoints:\n"
            "  - path: /x\n"
            "    apis:\n"
            "      - { method: GET, parameters: { get: [{ name: q, type: ~ }] } }\n"
        )
        doc = build_document("system", parse_rest(path))
        assert doc["paths"]["/x"]["get"]["parameters"][0]["schema"] == {"type": "string"}
