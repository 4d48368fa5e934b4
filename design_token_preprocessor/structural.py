"""
Structural validation of preprocessed documents.

Once references are resolved and types are explicit, a plain JSON Schema
validator can check the document. The schema documents are supplied by the
caller; this module only wires them into jsonschema.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from referencing import Registry
from referencing.jsonschema import DRAFT202012


@dataclass
class ValidationResult:
    """Outcome of a structural validation."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)


def load_schemas(directory: str | Path) -> list[dict[str, Any]]:
    """
    Load every *.json schema below a directory.

    Args:
        directory: Directory to search recursively

    Returns:
        The parsed schemas, in path order
    """
    schemas = []
    for path in sorted(Path(directory).rglob("*.json")):
        with open(path, encoding="utf-8") as f:
            schemas.append(json.load(f))
    return schemas


def build_registry(schemas: Iterable[dict[str, Any]]) -> Registry:
    """Register schemas by their $id so that $ref between them resolves."""
    resources = []
    for schema in schemas:
        schema_id = schema.get("$id")
        if schema_id:
            resources.append((schema_id, DRAFT202012.create_resource(schema)))
    return Registry().with_resources(resources)


def _format_error(error) -> str:
    path = "/" + "/".join(str(p) for p in error.absolute_path) if error.absolute_path else "(root)"
    return f"{path}: {error.message}"


def validate_against_schema(
    document: Any,
    schema: dict[str, Any],
    extra_schemas: Iterable[dict[str, Any]] = (),
) -> ValidationResult:
    """
    Validate a document against a JSON Schema.

    Args:
        document: The (preprocessed) document
        schema: The main schema
        extra_schemas: Schemas the main schema references by $id

    Returns:
        ValidationResult listing every error as "<instance path>: <message>"
    """
    validator = Draft202012Validator(schema, registry=build_registry(extra_schemas))
    errors = sorted(validator.iter_errors(document), key=lambda e: list(map(str, e.absolute_path)))
    return ValidationResult(valid=not errors, errors=[_format_error(e) for e in errors])
