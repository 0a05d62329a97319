"""Core engine, data structures and configuration."""

from .config import AutofixConfig
from .data import EditorOutcome, JsonErrorLocation, PassOutcome, RepairResult, SchemaProblem
from .exceptions import (
    ConfigurationError,
    JsonSyntaxError,
    SchemaAutofixError,
    SchemaValidationError,
)
from .jsonio import dumps_pretty, is_valid_json, strict_loads
from .repair import JsonAutofixEngine, RepairPass, autofix_json, default_passes

__all__ = [
    "AutofixConfig",
    "RepairResult",
    "PassOutcome",
    "JsonErrorLocation",
    "SchemaProblem",
    "EditorOutcome",
    "SchemaAutofixError",
    "ConfigurationError",
    "JsonSyntaxError",
    "SchemaValidationError",
    "strict_loads",
    "is_valid_json",
    "dumps_pretty",
    "JsonAutofixEngine",
    "RepairPass",
    "autofix_json",
    "default_passes",
]
