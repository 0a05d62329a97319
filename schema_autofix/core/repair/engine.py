"""JSON autofix engine: an ordered pipeline of heuristic repair passes.

Each pass is a pure text transformation. The engine threads the text through
them in a fixed order (later passes rely on the cleanup done by earlier ones)
and collects the notes of the passes that changed something. The result is
best effort: text that is still invalid after every pass is returned as is.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import DEFAULT_CONFIG, AutofixConfig
from ..data import RepairResult
from ..jsonio import is_valid_json
from .passes import (
    BlockKeyTouchUpPass,
    BomStripPass,
    CommentRemovalPass,
    DanglingCommaPass,
    DuplicateCommaPass,
    EmptyObjectPass,
    FinalFormatPass,
    MissingCommaPass,
    RepairPass,
    SingleQuotePass,
    TrailingCommaPass,
    UnquotedKeyPass,
)

logger = logging.getLogger(__name__)

# Adjacent passes of these types rerun together until the text settles: each
# can expose work for another (a dangling comma hides an empty object).
# They only ever delete text, so the loop ends.
SETTLING_PASSES = (EmptyObjectPass, DuplicateCommaPass, DanglingCommaPass)


def default_passes(config: Optional[AutofixConfig] = None) -> List[RepairPass]:
    """Build the standard pass list in run order."""
    config = config or DEFAULT_CONFIG
    return [
        BomStripPass(),
        CommentRemovalPass(),
        UnquotedKeyPass(),
        TrailingCommaPass(),
        SingleQuotePass(),
        EmptyObjectPass(),
        DuplicateCommaPass(),
        DanglingCommaPass(),
        MissingCommaPass(),
        BlockKeyTouchUpPass(config.known_block_keys),
        FinalFormatPass(indent=config.indent, ensure_ascii=config.ensure_ascii),
    ]


class JsonAutofixEngine:
    """Runs repair passes over JSON-like text and records what changed.

    The engine holds no per-call state, so one instance can serve any number
    of concurrent callers.
    """

    def __init__(
        self,
        passes: Optional[Iterable[RepairPass]] = None,
        config: Optional[AutofixConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.passes: Sequence[RepairPass] = tuple(
            passes if passes is not None else default_passes(self.config)
        )
        self._stages = self._group_stages(self.passes)

    @staticmethod
    def _group_stages(passes: Sequence[RepairPass]) -> List[Tuple[RepairPass, ...]]:
        stages: List[Tuple[RepairPass, ...]] = []
        for repair_pass in passes:
            settling = isinstance(repair_pass, SETTLING_PASSES)
            if settling and stages and isinstance(stages[-1][0], SETTLING_PASSES):
                stages[-1] = stages[-1] + (repair_pass,)
            else:
                stages.append((repair_pass,))
        return stages

    @staticmethod
    def _run_stage(stage: Tuple[RepairPass, ...], text: str, changes: List[str]) -> str:
        while True:
            start = text
            for repair_pass in stage:
                outcome = repair_pass.apply(text)
                text = outcome.text
                changes.extend(outcome.notes)
            if len(stage) == 1 or text == start:
                return text

    def run(self, text: str) -> RepairResult:
        """Repair ``text`` and return the result with its change log."""
        if not isinstance(text, str):
            raise TypeError(f"Text must be string, got {type(text)}")

        fixed = text
        changes: List[str] = []

        for stage in self._stages:
            fixed = self._run_stage(stage, fixed, changes)

        if changes:
            logger.info(f"Autofix applied {len(changes)} changes")
        else:
            logger.debug("Autofix found nothing to change")
        if not is_valid_json(fixed):
            logger.info("Text is still not valid JSON after autofix")

        return RepairResult(fixed=fixed, changes=changes)

    def pass_names(self) -> List[str]:
        return [repair_pass.get_name() for repair_pass in self.passes]


_default_engine = JsonAutofixEngine()


def autofix_json(text: str, config: Optional[AutofixConfig] = None) -> RepairResult:
    """Best-effort repair of near-JSON text.

    Never raises for malformed input. ``result.fixed`` is pretty-printed JSON
    when repair succeeded, otherwise the text as left by the last pass.
    """
    engine = _default_engine if config is None else JsonAutofixEngine(config=config)
    return engine.run(text)
