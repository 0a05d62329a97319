"""Passes that strip content which has no place in JSON."""

from typing import List, Tuple

from .base import RepairPass, plural
from .scanning import find_closing_single_quote, opens_single_quoted, skip_double_quoted

BOM = "\ufeff"


class BomStripPass(RepairPass):
    """Drop a leading byte-order mark."""

    def __init__(self):
        super().__init__("bom_strip")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        if text.startswith(BOM):
            return text[1:], ["Removed BOM character"]
        return text, []


class CommentRemovalPass(RepairPass):
    """Remove ``//`` line comments and ``/* */`` block comments.

    The scan skips over string literals, so ``"https://example.com"`` keeps
    its slashes. Single-quoted literals are honored too because quote
    normalization runs later in the pipeline. The newline ending a line
    comment is kept; an unterminated block comment is left as is.
    """

    def __init__(self):
        super().__init__("comment_removal")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        out = []
        line_comments = 0
        block_comments = 0
        i = 0
        n = len(text)

        while i < n:
            ch = text[i]

            if ch == '"':
                end = skip_double_quoted(text, i)
                out.append(text[i:end])
                i = end
                continue

            if ch == "'" and opens_single_quoted(text, i):
                close = find_closing_single_quote(text, i + 1)
                if close is not None:
                    out.append(text[i:close + 1])
                    i = close + 1
                    continue

            if text.startswith("//", i):
                end = i + 2
                while end < n and text[end] not in "\r\n":
                    end += 1
                line_comments += 1
                i = end
                continue

            if text.startswith("/*", i):
                end = text.find("*/", i + 2)
                if end != -1:
                    block_comments += 1
                    i = end + 2
                    continue

            out.append(ch)
            i += 1

        notes = []
        if line_comments:
            notes.append(f"Removed {plural(line_comments, 'single-line comment')}")
        if block_comments:
            notes.append(f"Removed {plural(block_comments, 'multi-line comment')}")
        return "".join(out), notes
