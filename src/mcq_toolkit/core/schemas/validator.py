"""
Schema Validation Utilities

Validates import payloads against the bundled JSON schemas.

The schemas only pin down the types of keys the importer reads; unknown
keys are allowed so backend additions never break an import. Structural
problems (a string where a list of header lines is expected, a question
that is not an object) are reported with the JSON path of the first
offending value plus the full list of violations.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
QUIZ_IMPORT_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _format_path(parts) -> str:
    return ".".join(str(p) for p in parts)


def validate_quiz_payload(data: Any) -> None:
    """
    Validate a decoded quiz import payload.

    Args:
        data: Decoded JSON document (expected shape `{"quiz": {...}}`)

    Raises:
        ValidationError: If the payload violates the import schema.
            `path` points at the first violation (dot-joined), `errors`
            lists every violation found.
    """
    schema = _load_schema("quiz_import")
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema)

    violations = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not violations:
        return

    first = violations[0]
    path = _format_path(first.absolute_path)
    location = f" at '{path}'" if path else ""
    raise ValidationError(
        f"Schema validation failed{location}: {first.message}",
        path=path,
        errors=[
            f"{_format_path(v.absolute_path) or '<root>'}: {v.message}"
            for v in violations
        ],
    )
