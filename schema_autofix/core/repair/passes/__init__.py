"""Repair passes, in the order the engine runs them."""

from .base import RepairPass
from .cleanup import BomStripPass, CommentRemovalPass
from .commas import (
    DanglingCommaPass,
    DuplicateCommaPass,
    EmptyObjectPass,
    MissingCommaPass,
    TrailingCommaPass,
)
from .formatting import BlockKeyTouchUpPass, FinalFormatPass
from .quoting import SingleQuotePass, UnquotedKeyPass

__all__ = [
    "RepairPass",
    "BomStripPass",
    "CommentRemovalPass",
    "UnquotedKeyPass",
    "TrailingCommaPass",
    "SingleQuotePass",
    "EmptyObjectPass",
    "DuplicateCommaPass",
    "DanglingCommaPass",
    "MissingCommaPass",
    "BlockKeyTouchUpPass",
    "FinalFormatPass",
]
