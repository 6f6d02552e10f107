"""
Lenient field coercion for request bodies.

Optional request fields that hold the wrong type are treated as absent
rather than rejected.
"""

from typing import Any

from docs_qa.models.sdk import parse_sdk


def coerce_limit(value: Any) -> int | None:
    """Truncate numeric limits to int; anything else becomes None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value != value or value in (float("inf"), float("-inf")):
        return None
    return int(value)


def coerce_sdk(value: Any) -> str | None:
    """Keep known SDK identifiers only."""
    return parse_sdk(value)
