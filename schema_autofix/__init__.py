"""
schema-autofix - best-effort repair of hand-edited schema JSON.

This package provides the JSON autofix engine used by the PDF schema builder
and the schema visual editor, plus the editor-side helpers around it: error
positions, schema shape validation and the editor actions.
"""

# Repair engine
from .core import (
    AutofixConfig,
    JsonAutofixEngine,
    RepairPass,
    RepairResult,
    autofix_json,
    default_passes,
)
from .core.data import EditorOutcome, JsonErrorLocation, SchemaProblem
from .core.exceptions import (
    ConfigurationError,
    JsonSyntaxError,
    SchemaAutofixError,
    SchemaValidationError,
)

# Editor boundary
from .editor import JsonEditorSession, locate_json_error, validate_schema

__version__ = "0.1.0"

__all__ = [
    # Repair engine
    "autofix_json",
    "JsonAutofixEngine",
    "RepairPass",
    "RepairResult",
    "default_passes",
    "AutofixConfig",
    # Results
    "JsonErrorLocation",
    "SchemaProblem",
    "EditorOutcome",
    # Exceptions
    "SchemaAutofixError",
    "ConfigurationError",
    "JsonSyntaxError",
    "SchemaValidationError",
    # Editor boundary
    "JsonEditorSession",
    "locate_json_error",
    "validate_schema",
]
