"""
SDK-aware result selection.

Collapses scored chunks to one per logical documentation page, preferring
the caller's SDK variant when the page has one.

Dependencies: docs_qa.models
System role: Per-page variant selection for retrieval results
"""

from docs_qa.models.chunk import ScoredChunk


def select_by_sdk(scored_chunks: list[ScoredChunk], target_sdk: str | None = None) -> list[ScoredChunk]:
    """
    Keep one chunk per page group, preferring ``target_sdk``.

    Chunks are grouped by ``base_url`` (falling back to ``url``). In each group
    the first chunk written for ``target_sdk`` wins; without one, the
    highest-scoring chunk wins (first occurrence on ties). Without a target
    SDK the input is returned unchanged.

    Args:
        scored_chunks: Chunks scored against the current query
        target_sdk: SDK the user is working with, if any

    Returns:
        list[ScoredChunk]: One chunk per group, in first-seen group order
    """
    if not target_sdk:
        return scored_chunks

    groups: dict[str, list[ScoredChunk]] = {}
    for scored in scored_chunks:
        groups.setdefault(scored.group_key, []).append(scored)

    selected: list[ScoredChunk] = []
    for group in groups.values():
        sdk_match = next((scored for scored in group if scored.sdk == target_sdk), None)
        if sdk_match is not None:
            selected.append(sdk_match)
        else:
            selected.append(max(group, key=lambda scored: scored.score))

    return selected
