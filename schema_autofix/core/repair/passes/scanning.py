"""Lexical helpers shared by the repair passes.

JSON strings cannot hold raw line breaks, so an unterminated double-quoted
string is treated as ending at the end of its line. That keeps one stray quote
from hiding the rest of the document from the passes.
"""

import re
from typing import Callable, List, Optional, Tuple, Union

DOUBLE_QUOTED_RE = re.compile(r'"(?:[^"\\\n]|\\.)*"', re.DOTALL)

SINGLE_QUOTE_OPENERS = ",[{:"


def skip_double_quoted(text: str, start: int) -> int:
    """Return the index just past the double-quoted string opening at ``start``."""
    j = start + 1
    n = len(text)
    while j < n:
        ch = text[j]
        if ch == "\\":
            j += 2
            continue
        if ch == '"':
            return j + 1
        if ch == "\n":
            return j
        j += 1
    return n


def opens_single_quoted(text: str, index: int) -> bool:
    """Whether a ``'`` at ``index`` sits where a string literal may start."""
    if index == 0:
        return True
    prev = text[index - 1]
    return prev.isspace() or prev in SINGLE_QUOTE_OPENERS


def find_closing_single_quote(text: str, start: int) -> Optional[int]:
    """Index of the first unescaped ``'`` at or after ``start``."""
    j = start
    n = len(text)
    while j < n:
        ch = text[j]
        if ch == "\\":
            j += 2
            continue
        if ch == "'":
            return j
        j += 1
    return None


def split_strings(text: str) -> List[Tuple[str, bool]]:
    """Split text into ``(segment, is_double_quoted_string)`` pieces."""
    segments = []
    last = 0
    for match in DOUBLE_QUOTED_RE.finditer(text):
        if match.start() > last:
            segments.append((text[last:match.start()], False))
        segments.append((match.group(0), True))
        last = match.end()
    if last < len(text):
        segments.append((text[last:], False))
    return segments


def sub_outside_strings(
    pattern: "re.Pattern",
    repl: Union[str, Callable[["re.Match"], str]],
    text: str,
) -> Tuple[str, int]:
    """``re.subn`` applied only to text outside double-quoted strings."""
    total = 0
    parts = []
    for segment, is_string in split_strings(text):
        if is_string:
            parts.append(segment)
            continue
        replaced, count = pattern.subn(repl, segment)
        parts.append(replaced)
        total += count
    return "".join(parts), total
