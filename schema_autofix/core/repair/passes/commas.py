"""Passes that add, remove or collapse separators."""

import re
from typing import List, Optional, Tuple

from .base import RepairPass, plural
from .scanning import sub_outside_strings

TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
DANGLING_COMMA_RE = re.compile(r",\s*([}\]])")
REPEATED_COMMA_RE = re.compile(r",(?:\s*,)+")

# (pattern, replacement) pairs, each removing one empty object element
EMPTY_OBJECT_RULES = (
    (re.compile(r",\s*\{\s*\}\s*,"), ","),
    (re.compile(r"\[\s*\{\s*\}\s*,"), "["),
    (re.compile(r",\s*\{\s*\}\s*\]"), "]"),
    (re.compile(r"\[\s*\{\s*\}\s*\]"), "[]"),
)

LINE_CLOSERS = ("}", "]", '"')
LINE_OPENERS = ("{", "[", '"')
STRUCTURE_END = ("}", "]")


class TrailingCommaPass(RepairPass):
    """Remove a comma directly followed by ``}`` or ``]``."""

    def __init__(self):
        super().__init__("trailing_commas")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        fixed, count = sub_outside_strings(TRAILING_COMMA_RE, r"\1", text)
        if not count:
            return text, []
        return fixed, [f"Removed {plural(count, 'trailing comma')}"]


class EmptyObjectPass(RepairPass):
    """Remove ``{}`` elements from arrays together with their separators."""

    def __init__(self):
        super().__init__("empty_objects")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        fixed = text
        removed = 0
        while True:
            round_removed = 0
            for pattern, replacement in EMPTY_OBJECT_RULES:
                fixed, count = sub_outside_strings(pattern, replacement, fixed)
                round_removed += count
            if not round_removed:
                break
            removed += round_removed

        if not removed:
            return text, []
        return fixed, [f"Removed {plural(removed, 'empty object')} from arrays"]


class DuplicateCommaPass(RepairPass):
    """Collapse runs of consecutive commas into one."""

    def __init__(self):
        super().__init__("duplicate_commas")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        fixed, count = sub_outside_strings(REPEATED_COMMA_RE, ",", text)
        if not count:
            return text, []
        return fixed, [f"Collapsed {plural(count, 'run')} of consecutive commas"]


class DanglingCommaPass(RepairPass):
    """Remove commas left in front of a closer by the earlier passes."""

    def __init__(self):
        super().__init__("dangling_commas")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        fixed, count = sub_outside_strings(DANGLING_COMMA_RE, r"\1", text)
        if not count:
            return text, []
        return fixed, [f"Removed {plural(count, 'comma')} before closing brackets"]


def _next_non_blank(lines: List[str], start: int) -> Optional[int]:
    for index in range(start, len(lines)):
        if lines[index].strip():
            return index
    return None


class MissingCommaPass(RepairPass):
    """Insert commas between entries written on consecutive lines.

    Heuristic, line-granular rather than token-granular: a line ending in
    ``}``, ``]`` or ``"`` followed by a line starting with ``{``, ``[`` or
    ``"`` gets a comma, unless the line after that one closes the enclosing
    structure. Multi-line string values and entries sharing a line with their
    neighbours are not handled.
    """

    def __init__(self):
        super().__init__("missing_commas")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        lines = text.split("\n")
        added = []

        for index, line in enumerate(lines):
            if not line.strip().endswith(LINE_CLOSERS):
                continue

            next_index = _next_non_blank(lines, index + 1)
            if next_index is None or not lines[next_index].strip().startswith(LINE_OPENERS):
                continue

            after_index = _next_non_blank(lines, next_index + 1)
            if after_index is not None and lines[after_index].strip().startswith(STRUCTURE_END):
                continue

            content = line.rstrip()
            lines[index] = content + "," + line[len(content):]
            added.append(index + 1)

        if not added:
            return text, []
        line_word = "line" if len(added) == 1 else "lines"
        where = ", ".join(str(number) for number in added)
        return "\n".join(lines), [f"Added {plural(len(added), 'missing comma')} after {line_word} {where}"]
