"""Tests for conversation state chunk tracking."""

from docs_qa.core.agentic_system.agent.docs_agent_schema import ConversationState


def test_record_chunks_keeps_first_occurrence(make_scored) -> None:
    state = ConversationState()
    state.record_chunks([make_scored("a", 0.9)])
    state.record_chunks([make_scored("a", 0.1), make_scored("b", 0.5)])

    assert list(state.chunks) == ["a", "b"]
    assert state.chunks["a"].score == 0.9


def test_sources_keep_lowest_chunk_index_per_url(make_scored) -> None:
    state = ConversationState()
    state.record_chunks([
        make_scored("p2", 0.9, url="https://docs.example.com/p", chunk_index=2),
        make_scored("q0", 0.8, url="https://docs.example.com/q", chunk_index=0),
        make_scored("p0", 0.7, url="https://docs.example.com/p", chunk_index=0),
    ])

    sources = state.sources()

    assert [(s.url, s.chunk_index) for s in sources] == [
        ("https://docs.example.com/p", 0),
        ("https://docs.example.com/q", 0),
    ]


def test_starts_at_one_iteration() -> None:
    assert ConversationState().iterations == 1
