"""Editor actions over a JSON schema buffer.

The session owns the text the user edits and the last schema that was
applied successfully. Every action returns an ``EditorOutcome`` instead of
raising, so a UI can turn it straight into a notification.
"""

import logging
import re
from typing import Any, Dict, List, Optional

from ..core.config import DEFAULT_CONFIG, AutofixConfig
from ..core.data import EditorOutcome, JsonErrorLocation
from ..core.exceptions import JsonSyntaxError, SchemaValidationError
from ..core.jsonio import dumps_pretty
from ..core.repair import JsonAutofixEngine
from ..core.repair.passes import CommentRemovalPass, TrailingCommaPass, UnquotedKeyPass
from .buffer import count_lines, line_col_to_offset, parse_json
from .schema_validation import ensure_valid_schema

logger = logging.getLogger(__name__)

BLANK_LINES_RE = re.compile(r"^\s*\n", re.MULTILINE)


def light_cleanup_engine() -> JsonAutofixEngine:
    """Comment, key and trailing-comma cleanup without reformatting."""
    return JsonAutofixEngine(passes=[CommentRemovalPass(), UnquotedKeyPass(), TrailingCommaPass()])


class JsonEditorSession:
    """Text buffer plus the schema it edits."""

    def __init__(
        self,
        schema: Optional[List[Dict[str, Any]]] = None,
        config: Optional[AutofixConfig] = None,
        engine: Optional[JsonAutofixEngine] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.engine = engine or JsonAutofixEngine(config=self.config)
        self._cleanup = light_cleanup_engine()
        self.schema: List[Dict[str, Any]] = list(schema or [])
        self.text = self.export_schema()
        self.error: Optional[JsonErrorLocation] = None
        self.has_changes = False

    def _render(self, value: Any) -> str:
        return dumps_pretty(value, indent=self.config.indent, ensure_ascii=self.config.ensure_ascii)

    def export_schema(self) -> str:
        return self._render(self.schema)

    def set_text(self, text: str) -> None:
        self.text = text
        self.has_changes = self.export_schema() != text
        self.error = None

    def reset(self) -> EditorOutcome:
        self.text = self.export_schema()
        self.error = None
        self.has_changes = False
        return EditorOutcome(ok=True, message="JSON editor reset to current schema")

    def gutter_lines(self) -> int:
        return count_lines(self.text, self.config.min_gutter_lines)

    def jump_to_error(self) -> Optional[int]:
        """Buffer offset of the current error, for placing the cursor."""
        if self.error is None:
            return None
        return line_col_to_offset(self.text, self.error.line, self.error.column)

    def apply_changes(self) -> EditorOutcome:
        """Parse the buffer and make it the current schema.

        Comments, bare keys and trailing commas are cleaned first. When
        parsing or validation fails the buffer takes the cleaned text, so the
        reported position points into what the user sees.
        """
        if not self.text.strip():
            return EditorOutcome(ok=False, message="Please enter JSON content to apply")

        cleaned = self._cleanup.run(self.text)
        try:
            schema = ensure_valid_schema(parse_json(cleaned.fixed), source=cleaned.fixed)
        except JsonSyntaxError as e:
            self.text = cleaned.fixed
            self.error = e.location
            return EditorOutcome(
                ok=False,
                message=f"JSON Syntax Error at line {e.location.line}, column {e.location.column}: {e.location.message}",
                changes=cleaned.changes,
                error=self.error,
            )
        except SchemaValidationError as e:
            self.text = cleaned.fixed
            line = e.line or 1
            self.error = JsonErrorLocation(
                line=line,
                column=1,
                offset=line_col_to_offset(self.text, line, 1),
                message=str(e),
            )
            return EditorOutcome(ok=False, message=f"Failed to apply changes: {e}", error=self.error)

        self.schema = schema
        self.has_changes = False
        self.error = None
        logger.info(f"Applied schema with {len(schema)} fields")
        return EditorOutcome(ok=True, message="Schema updated", changes=cleaned.changes, schema=schema)

    def import_schema(self, content: str) -> EditorOutcome:
        """Load file content as the new schema; the buffer shows it pretty-printed."""
        if not content.strip():
            return EditorOutcome(ok=False, message="The selected file is empty")

        self.set_text(content)
        outcome = self.apply_changes()
        if outcome.ok:
            self.text = self.export_schema()
            outcome.message = "Schema imported successfully"
        return outcome

    def clean_comments(self) -> EditorOutcome:
        """Strip comments and JS-isms, then pretty-print if the result parses."""
        if not self.text.strip():
            return EditorOutcome(ok=False, message="No JSON content to clean")

        cleaned = self._cleanup.run(self.text)
        text = BLANK_LINES_RE.sub("", cleaned.fixed)

        try:
            value = parse_json(text)
        except JsonSyntaxError as e:
            self.text = text
            self.error = e.location
            return EditorOutcome(
                ok=False,
                message=(
                    f"Comments removed, but JSON error remains at line {e.location.line}, "
                    f"column {e.location.column}: {e.location.message}"
                ),
                changes=cleaned.changes,
                error=self.error,
            )

        self.set_text(self._render(value))
        return EditorOutcome(
            ok=True,
            message="Comments removed and JSON cleaned successfully!",
            changes=cleaned.changes,
        )

    def autofix(self) -> EditorOutcome:
        """Run the repair engine over the buffer and adopt the result."""
        if not self.text.strip():
            return EditorOutcome(ok=False, message="No JSON content to fix")

        result = self.engine.run(self.text)
        if not result.changes:
            return EditorOutcome(ok=True, message=result.summary())

        self.set_text(result.fixed)
        try:
            value = parse_json(result.fixed)
        except JsonSyntaxError as e:
            self.error = e.location
            return EditorOutcome(
                ok=False,
                message=f"{result.summary()}. JSON improved but still has errors. Please review.",
                changes=result.changes,
                error=self.error,
            )

        if not isinstance(value, list):
            return EditorOutcome(ok=True, message=result.summary(), changes=result.changes)

        self.schema = value
        self.has_changes = False
        logger.info(f"Schema replaced by auto-fixed JSON with {len(value)} fields")
        return EditorOutcome(
            ok=True,
            message=f"{result.summary()}. Schema updated with auto-fixed JSON!",
            changes=result.changes,
            schema=value,
        )
