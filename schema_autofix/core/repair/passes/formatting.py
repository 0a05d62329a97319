"""Layout passes: targeted touch-ups and the final validate-and-format step."""

import logging
import re
from typing import Iterable, List, Tuple

from ...config import DEFAULT_BLOCK_KEYS
from ...jsonio import PARSE_FAILURES, dumps_pretty, is_valid_json, strict_loads
from .base import RepairPass, plural

logger = logging.getLogger(__name__)


class BlockKeyTouchUpPass(RepairPass):
    """Move known block keys onto their own line after an opening brace.

    Only unrepaired text is touched; text that parses is re-serialized by
    the final pass anyway.
    """

    def __init__(self, keys: Iterable[str] = DEFAULT_BLOCK_KEYS):
        super().__init__("block_key_touch_up")
        self.keys = tuple(keys)
        alternatives = "|".join(re.escape(key) for key in self.keys)
        self._pattern = re.compile(r'\{[ \t]*("(?:%s)"\s*:)' % alternatives) if self.keys else None

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        if self._pattern is None or is_valid_json(text):
            return text, []

        fixed, count = self._pattern.subn(r"{\n  \1", text)
        if not count:
            return text, []
        return fixed, [f"Reformatted {plural(count, 'known block key')}"]


class FinalFormatPass(RepairPass):
    """Parse the repaired text and pretty-print it on success.

    On failure the text is handed back untouched and nothing is logged;
    unparseable output is a normal result, not an error.
    """

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        super().__init__("final_format")
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        try:
            value = strict_loads(text)
        except PARSE_FAILURES as e:
            logger.debug(f"Text is still not valid JSON after repair: {e}")
            return text, []

        formatted = dumps_pretty(value, indent=self.indent, ensure_ascii=self.ensure_ascii)
        return formatted, ["Reformatted JSON"]
