"""Editor-facing helpers built around the autofix engine."""

from .buffer import (
    count_lines,
    find_field_line,
    line_col_to_offset,
    locate_json_error,
    offset_to_line_col,
    parse_json,
)
from .schema_validation import ALLOWED_INPUT_TYPES, ensure_valid_schema, validate_schema
from .session import JsonEditorSession

__all__ = [
    "JsonEditorSession",
    "offset_to_line_col",
    "line_col_to_offset",
    "count_lines",
    "locate_json_error",
    "find_field_line",
    "parse_json",
    "ALLOWED_INPUT_TYPES",
    "validate_schema",
    "ensure_valid_schema",
]
