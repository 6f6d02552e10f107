"""
Tests for the search_docs tool factory.

System role: Verification of tool argument handling and result formatting
"""

import json
import math
from unittest.mock import AsyncMock

import pytest
from langchain_core.utils.function_calling import convert_to_openai_tool

from docs_qa.core.agentic_system.agent.docs_agent_tool import (
    SEARCH_DOCS_TOOL_NAME,
    clamp_tool_limit,
    create_search_docs_tool,
    format_tool_results,
)


@pytest.mark.parametrize(
    "requested, expected",
    [
        (None, 5),
        (0, 5),
        (-3, 5),
        (1, 1),
        (3.7, 3),
        (10, 10),
        (50, 10),
        (math.inf, 5),
        (-math.inf, 5),
        (math.nan, 5),
    ],
)
def test_clamp_tool_limit(requested, expected) -> None:
    assert clamp_tool_limit(requested) == expected


def test_format_tool_results(make_scored) -> None:
    chunks = [make_scored("a", 0.5, title="A", url="https://docs.example.com/a", content="alpha")]

    payload = json.loads(format_tool_results(chunks))

    assert payload == [
        {"title": "A", "url": "https://docs.example.com/a", "content": "alpha", "score": 0.5}
    ]


class TestSearchDocsTool:
    """Test suite for create_search_docs_tool."""

    def test_tool_declaration(self) -> None:
        tool = create_search_docs_tool(AsyncMock(return_value=[]), fallback_query="q")

        assert tool.name == SEARCH_DOCS_TOOL_NAME
        assert set(tool.args) == {"query", "limit"}

    def test_declared_schema_requires_query(self) -> None:
        tool = create_search_docs_tool(AsyncMock(return_value=[]), fallback_query="q")

        parameters = convert_to_openai_tool(tool)["function"]["parameters"]

        assert parameters["required"] == ["query"]
        assert parameters["properties"]["limit"]["default"] == 5

    @pytest.mark.asyncio
    async def test_invokes_search_with_clamped_limit(self, make_scored) -> None:
        run_search = AsyncMock(return_value=[make_scored("a", 0.9)])
        tool = create_search_docs_tool(run_search, fallback_query="original")

        output = await tool.ainvoke({"query": "organizations", "limit": 25})

        run_search.assert_awaited_once_with("organizations", 10)
        assert json.loads(output)[0]["score"] == 0.9

    @pytest.mark.asyncio
    async def test_defaults_query_and_limit(self) -> None:
        run_search = AsyncMock(return_value=[])
        tool = create_search_docs_tool(run_search, fallback_query="original")

        output = await tool.ainvoke({})

        run_search.assert_awaited_once_with("original", 5)
        assert json.loads(output) == []

    @pytest.mark.asyncio
    async def test_blank_query_uses_fallback(self) -> None:
        run_search = AsyncMock(return_value=[])
        tool = create_search_docs_tool(run_search, fallback_query="original")

        await tool.ainvoke({"query": None, "limit": math.inf})

        run_search.assert_awaited_once_with("original", 5)
