"""JSON schema validation for local compromised package lists."""

from __future__ import annotations

from typing import Any
from collections.abc import Iterable

from jsonschema import Draft202012Validator

from ..errors import PatternListError

PATTERN_LIST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Compromised package list",
    "oneOf": [
        {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        {
            "type": "object",
            "required": ["packages"],
            "properties": {
                "packages": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["name"],
                        "properties": {
                            "name": {"type": "string", "minLength": 1},
                            "versions": {"type": "array", "items": {"type": "string"}},
                        },
                    },
                },
            },
        },
    ],
}

_VALIDATOR = Draft202012Validator(PATTERN_LIST_SCHEMA)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_document(document: Any) -> None:
    """Raise PatternListError listing every schema violation in ``document``."""
    errors = sorted(_VALIDATOR.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise PatternListError("Package list failed validation:\n" + _format_errors(errors))
