"""Exception hierarchy for schema-autofix.

The repair engine itself never raises for malformed text; these exceptions
belong to the strict layers around it (schema application, configuration).
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .data import JsonErrorLocation, SchemaProblem


class SchemaAutofixError(Exception):
    """Base exception for all schema-autofix errors."""


class ConfigurationError(SchemaAutofixError):
    """Raised when configuration values are invalid."""


class JsonSyntaxError(SchemaAutofixError):
    """Raised when text cannot be parsed as strict JSON."""

    def __init__(self, message: str, location: Optional["JsonErrorLocation"] = None):
        super().__init__(message)
        self.location = location

    def __str__(self) -> str:
        base = super().__str__()
        if self.location is None:
            return base
        return f"{base} (line {self.location.line}, column {self.location.column})"


class SchemaValidationError(SchemaAutofixError):
    """Raised when parsed JSON does not have the shape of a field schema."""

    def __init__(self, message: str, problems: Optional[List["SchemaProblem"]] = None):
        super().__init__(message)
        self.problems = problems or []

    @property
    def line(self) -> Optional[int]:
        """Source line of the first problem, if known."""
        for problem in self.problems:
            if problem.line is not None:
                return problem.line
        return None
