"""JSON repair pipeline."""

from .engine import JsonAutofixEngine, autofix_json, default_passes
from .passes import RepairPass

__all__ = ["JsonAutofixEngine", "autofix_json", "default_passes", "RepairPass"]
