"""
Request limit clamping.

Dependencies: None
System role: Bounds caller-supplied result counts before retrieval
"""


def clamp_limit(requested: int | None, default: int, maximum: int) -> int:
    """
    Clamp a requested result count.

    Missing or non-positive values fall back to ``default``; larger values
    are capped at ``maximum``.
    """
    if requested is None or requested <= 0:
        return default
    return min(requested, maximum)
