"""
Approximate token counting.

Character-based estimate used only for cost reporting; never for truncation
or context-window enforcement.
"""

import math

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Estimate the token count of ``text`` (about four characters per token)."""
    if not text:
        return 0
    return max(1, math.ceil(len(text) / CHARS_PER_TOKEN))
