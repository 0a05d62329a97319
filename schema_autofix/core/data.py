"""Result data structures shared by the engine, editor and CLI."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RepairResult:
    """Outcome of one autofix run.

    ``fixed`` is always populated, even when the text still fails to parse.
    ``changes`` holds one entry per pass that altered the text, in run order.
    """

    fixed: str
    changes: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether any pass modified the text."""
        return bool(self.changes)

    def summary(self) -> str:
        """Single-line description of the applied fixes."""
        if not self.changes:
            return "No auto-fixable issues found"
        return f"Applied {len(self.changes)} fixes: {', '.join(self.changes)}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {"fixed": self.fixed, "changes": list(self.changes)}


@dataclass
class PassOutcome:
    """Text produced by a single repair pass and the change notes it logged."""

    text: str
    notes: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.notes)


@dataclass
class JsonErrorLocation:
    """Position of a JSON syntax error, addressed the way an editor shows it."""

    line: int
    column: int
    offset: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line": self.line,
            "column": self.column,
            "offset": self.offset,
            "message": self.message,
        }


@dataclass
class SchemaProblem:
    """Shape violations found in one schema field."""

    index: Optional[int]
    errors: List[str]
    unique_id: Optional[str] = None
    line: Optional[int] = None

    @property
    def label(self) -> str:
        """How the field is named in user-facing messages."""
        if self.index is None:
            return "Schema"
        if self.unique_id:
            return f"Field '{self.unique_id}'"
        return f"Field at index {self.index}"

    def describe(self) -> str:
        return f"{self.label}: {'; '.join(self.errors)}"


@dataclass
class EditorOutcome:
    """Result of an editor action, ready to be surfaced as a notification."""

    ok: bool
    message: str
    changes: List[str] = field(default_factory=list)
    error: Optional[JsonErrorLocation] = None
    schema: Optional[List[Dict[str, Any]]] = None
