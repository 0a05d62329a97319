"""Strict JSON parsing and canonical serialization.

Parsing mirrors a browser's ``JSON.parse``: ``NaN`` and ``Infinity`` are
rejected even though Python's ``json`` module accepts them by default.
"""

import json
from typing import Any

PARSE_FAILURES = (ValueError, RecursionError)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name}")


def strict_loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def is_valid_json(text: str) -> bool:
    try:
        strict_loads(text)
    except PARSE_FAILURES:
        return False
    return True


def dumps_pretty(value: Any, indent: int = 2, ensure_ascii: bool = False) -> str:
    """Serialize ``value`` the way ``JSON.stringify(value, null, 2)`` lays it out."""
    return json.dumps(value, indent=indent, ensure_ascii=ensure_ascii)
