"""Passes that put quotes where JSON expects them."""

import re
from typing import List, Tuple

from .base import RepairPass, plural
from .scanning import find_closing_single_quote, opens_single_quoted, sub_outside_strings

UNQUOTED_KEY_RE = re.compile(r"([{,]\s*)([A-Za-z_$][A-Za-z0-9_$]*)\s*:")


class UnquotedKeyPass(RepairPass):
    """Wrap bare identifiers used as property names in double quotes."""

    def __init__(self):
        super().__init__("unquoted_keys")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        fixed, count = sub_outside_strings(UNQUOTED_KEY_RE, r'\1"\2":', text)
        if not count:
            return text, []
        return fixed, [f"Fixed {plural(count, 'unquoted property name')}"]


def _requote(body: str) -> str:
    """Re-escape the body of a single-quoted literal for double quotes."""
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append("'" if nxt == "'" else ch + nxt)
            i += 2
            continue
        out.append('\\"' if ch == '"' else ch)
        i += 1
    return "".join(out)


class SingleQuotePass(RepairPass):
    """Convert single-quoted string literals to double-quoted ones.

    Single left-to-right scan. Text inside double-quoted strings is copied
    verbatim, so apostrophes like ``"it's"`` are untouched. A ``'`` opens a
    literal only at the start of the text or after whitespace, ``,``, ``[``,
    ``{`` or ``:``, and only when an unescaped closing ``'`` follows.
    """

    def __init__(self):
        super().__init__("single_quotes")

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        out = []
        replaced = 0
        in_string = False
        escaped = False
        i = 0
        n = len(text)

        while i < n:
            ch = text[i]

            if in_string:
                out.append(ch)
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch in '"\n':
                    in_string = False
                i += 1
                continue

            if ch == '"':
                in_string = True
                out.append(ch)
                i += 1
                continue

            if ch == "'" and opens_single_quoted(text, i):
                close = find_closing_single_quote(text, i + 1)
                if close is not None:
                    out.append('"' + _requote(text[i + 1:close]) + '"')
                    replaced += 2
                    i = close + 1
                    continue

            out.append(ch)
            i += 1

        if not replaced:
            return text, []
        return "".join(out), [f"Replaced {replaced} single quotes with double quotes"]
