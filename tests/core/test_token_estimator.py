"""Tests for the query token heuristic."""

from docs_qa.core.token_estimator import estimate_tokens


def test_empty_text_is_zero_tokens() -> None:
    assert estimate_tokens("") == 0


def test_short_text_is_at_least_one_token() -> None:
    assert estimate_tokens("a") == 1


def test_rounds_up_per_four_characters() -> None:
    assert estimate_tokens("abcd") == 1
    assert estimate_tokens("abcde") == 2
    assert estimate_tokens("x" * 400) == 100
