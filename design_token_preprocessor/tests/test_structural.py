"""
Tests for structural validation of preprocessed documents.
"""

import json

from design_token_preprocessor import apply_preprocessors
from design_token_preprocessor.structural import ValidationResult, load_schemas, validate_against_schema

TOKEN_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://example.com/schemas/token.json",
    "type": "object",
    "required": ["$value", "$type"],
    "properties": {"$type": {"enum": ["color", "dimension", "number"]}},
}

GROUP_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://example.com/schemas/group.json",
    "type": "object",
    "patternProperties": {
        "^[^$]": {
            "if": {"anyOf": [{"required": ["$value"]}, {"required": ["$ref"]}]},
            "then": {"$ref": "token.json"},
            "else": {"$ref": "group.json"},
        }
    },
}


class TestValidateAgainstSchema:
    def test_preprocessed_document_is_valid(self, load_fixture):
        document = apply_preprocessors(load_fixture("format/valid/group", "extends-basic.json"))

        result = validate_against_schema(document, GROUP_SCHEMA, [TOKEN_SCHEMA, GROUP_SCHEMA])

        assert result == ValidationResult(valid=True, errors=[])

    def test_raw_document_needs_preprocessing(self, load_fixture):
        document = load_fixture("format/valid/group", "type-inheritance.json")

        raw = validate_against_schema(document, GROUP_SCHEMA, [TOKEN_SCHEMA, GROUP_SCHEMA])
        processed = validate_against_schema(apply_preprocessors(document), GROUP_SCHEMA, [TOKEN_SCHEMA, GROUP_SCHEMA])

        assert not raw.valid
        assert any(error.startswith("/colors/primary: ") for error in raw.errors)
        assert processed.valid

    def test_root_errors(self):
        result = validate_against_schema([], {"type": "object"})

        assert not result.valid
        assert result.errors == ["(root): [] is not of type 'object'"]


class TestLoadSchemas:
    def test_loads_json_files_recursively(self, tmp_path):
        (tmp_path / "format").mkdir()
        (tmp_path / "format" / "token.json").write_text(json.dumps(TOKEN_SCHEMA))
        (tmp_path / "group.json").write_text(json.dumps(GROUP_SCHEMA))
        (tmp_path / "notes.txt").write_text("ignored")

        schemas = load_schemas(tmp_path)

        assert [s["$id"] for s in schemas] == [TOKEN_SCHEMA["$id"], GROUP_SCHEMA["$id"]]
