"""Shape validation for field schemas (a JSON array of field items)."""

import logging
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

from ..core.data import SchemaProblem
from ..core.exceptions import SchemaValidationError
from .buffer import find_field_line

logger = logging.getLogger(__name__)

ALLOWED_INPUT_TYPES = ("text", "radio", "checkbox", "signature", "fileUpload", "info", "text-area")

# Present and not one of the JSON falsy values
TRUTHY: Dict[str, Any] = {"not": {"enum": ["", 0, False, None]}}

FIELD_ITEM_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["unique_id", "display_attributes"],
    "properties": {
        "unique_id": TRUTHY,
        "display_attributes": {
            "type": "object",
            "required": ["order", "input_type", "value"],
            "properties": {
                "order": {"type": "number"},
                "input_type": {"enum": list(ALLOWED_INPUT_TYPES)},
                "value": {
                    "type": "object",
                    "required": ["type"],
                    "properties": {"type": TRUTHY},
                },
            },
        },
    },
}

SCHEMA_DOCUMENT: Dict[str, Any] = {"type": "array", "items": FIELD_ITEM_SCHEMA}

_validator = Draft7Validator(SCHEMA_DOCUMENT)


def _error_path(path) -> str:
    return ".".join(str(p) for p in path) or "$"


def _field_label_id(item: Any) -> Optional[str]:
    raw = item.get("unique_id") if isinstance(item, dict) else None
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float)) or not raw:
        return None
    return str(raw)


def validate_schema(value: Any, source: Optional[str] = None) -> List[SchemaProblem]:
    """Return one problem per invalid field, in array order.

    When ``source`` (the text the value was parsed from) is given, each
    problem also carries the line where its field starts.
    """
    if not isinstance(value, list):
        return [SchemaProblem(index=None, errors=["Schema must be an array of field objects"], line=1)]

    grouped: Dict[int, List[str]] = {}
    for error in _validator.iter_errors(value):
        path = list(error.path)
        index, rest = path[0], path[1:]
        grouped.setdefault(index, []).append(f"{_error_path(rest)}: {error.message}")

    problems = []
    for index in sorted(grouped):
        item = value[index]
        unique_id = _field_label_id(item)
        line = find_field_line(source, index=index, unique_id=unique_id) if source is not None else None
        problems.append(
            SchemaProblem(index=index, errors=sorted(grouped[index]), unique_id=unique_id, line=line)
        )

    if problems:
        logger.debug(f"Schema has {len(problems)} invalid fields")
    return problems


def ensure_valid_schema(value: Any, source: Optional[str] = None) -> List[Dict[str, Any]]:
    """Return ``value`` if it is a valid field schema, else raise SchemaValidationError."""
    problems = validate_schema(value, source=source)
    if problems:
        raise SchemaValidationError(f"Invalid schema format: {problems[0].describe()}", problems)
    return value
