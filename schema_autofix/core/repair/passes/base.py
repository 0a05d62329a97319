"""Base class for textual repair passes."""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ...data import PassOutcome

logger = logging.getLogger(__name__)


def plural(count: int, singular: str, plural_form: Optional[str] = None) -> str:
    """Render ``count`` with the right noun form, e.g. ``2 trailing commas``."""
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural_form or singular + 's'}"


class RepairPass(ABC):
    """One pure text-in, text-out normalization step.

    Subclasses implement ``_execute_repair`` and return the rewritten text with
    the notes describing what they did. ``apply`` discards the notes whenever
    the text came back unchanged, so a pass that finds nothing logs nothing.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.__class__.__name__

    @abstractmethod
    def _execute_repair(self, text: str) -> Tuple[str, List[str]]:
        """Core repair logic - implemented by subclasses."""
        pass

    def apply(self, text: str) -> PassOutcome:
        repaired, notes = self._execute_repair(text)
        if repaired == text:
            return PassOutcome(text=text)

        logger.debug(f"Pass {self.name} fired: {'; '.join(notes)}")
        return PassOutcome(text=repaired, notes=notes)

    def get_name(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
