"""Line and column addressing over an editor text buffer.

Lines and columns are 1-based, offsets are 0-based, matching what the
editor gutter shows and what the ``json`` module reports.
"""

import json
import re
from typing import Any, Optional, Tuple

from ..core.data import JsonErrorLocation
from ..core.exceptions import JsonSyntaxError
from ..core.jsonio import PARSE_FAILURES, strict_loads

UNIQUE_ID_KEY = '"unique_id"'


def offset_to_line_col(text: str, offset: int) -> Tuple[int, int]:
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def line_col_to_offset(text: str, line: int, column: int) -> int:
    """Offset of ``line``/``column``, clamped to the buffer.

    A column past the end of its line lands on the line end; a line past the
    end of the buffer lands on the buffer end.
    """
    lines = text.split("\n")
    line = max(line, 1)
    position = 0
    for index in range(min(line - 1, len(lines))):
        position += len(lines[index]) + 1

    if line - 1 < len(lines):
        position += min(max(column - 1, 0), len(lines[line - 1]))

    return min(position, len(text))


def count_lines(text: str, minimum: int = 1) -> int:
    """Number of gutter lines to draw for ``text``."""
    return max(len(text.split("\n")), minimum)


def locate_json_error(text: str) -> Optional[JsonErrorLocation]:
    """Parse ``text`` strictly and describe where it fails, or None if it parses."""
    try:
        strict_loads(text)
    except json.JSONDecodeError as e:
        return JsonErrorLocation(line=e.lineno, column=e.colno, offset=e.pos, message=e.msg)
    except RecursionError:
        return JsonErrorLocation(line=1, column=1, offset=0, message="Document is nested too deeply")
    except ValueError as e:
        # Rejected NaN/Infinity constants carry no position of their own
        message = str(e)
        token = message.rsplit(" ", 1)[-1]
        match = re.search(r"(?<![\w\"])%s\b" % re.escape(token), text)
        offset = match.start() if match else 0
        line, column = offset_to_line_col(text, offset)
        return JsonErrorLocation(line=line, column=column, offset=offset, message=message)
    return None


def find_field_line(text: str, index: Optional[int] = None, unique_id: Optional[str] = None) -> int:
    """Best-effort line of a schema field, by position in the array or by id.

    ``index`` selects the ``index``-th ``"unique_id"`` key in the text;
    ``unique_id`` matches the first line mentioning that id as a string.
    Falls back to line 1.
    """
    seen = 0
    needle = f'"{unique_id}"' if unique_id else None

    for number, line in enumerate(text.split("\n"), start=1):
        occurrences = line.count(UNIQUE_ID_KEY)
        seen += occurrences
        if index is not None and occurrences and seen >= index + 1:
            return number
        if needle and needle in line:
            return number

    return 1


def parse_json(text: str) -> Any:
    """Strictly parse ``text``; raise JsonSyntaxError carrying the error position."""
    try:
        return strict_loads(text)
    except PARSE_FAILURES:
        location = locate_json_error(text)
    raise JsonSyntaxError(location.message, location)
