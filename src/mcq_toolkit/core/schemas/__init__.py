"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_quiz_payload,
    ValidationError,
    QUIZ_IMPORT_SCHEMA_VERSION,
)

__all__ = [
    "validate_quiz_payload",
    "ValidationError",
    "QUIZ_IMPORT_SCHEMA_VERSION",
]
