#!/usr/bin/env python3
"""
Ask a question against the documentation from the command line.

Usage:
    python -m docs_qa.scripts.ask "How do I authenticate a user?"
    python -m docs_qa.scripts.ask "How to set up sign-in" --sdk react --model gpt-4o
"""

import argparse
import asyncio
import sys

from dotenv import load_dotenv

from docs_qa.application.services import AskService
from docs_qa.boundary.llm import OpenAIChatProvider
from docs_qa.configs import get_settings
from docs_qa.core.agentic_system.agent import DocsAgent
from docs_qa.core.exceptions import DocsQAException
from docs_qa.models.ask import AskRequest, AskResponse
from docs_qa.observability.logger import configure_logging
from docs_qa.scripts._common import (
    RULE,
    build_chunk_store,
    build_retrieval_service,
    check_cli_options,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Answer a question from the documentation")
    parser.add_argument("query", help="Question to ask")
    parser.add_argument("--limit", type=int, default=8, help="Number of context chunks (default: 8)")
    parser.add_argument("--sdk", default=None, help="Prefer results for an SDK (e.g. react, nextjs)")
    parser.add_argument("--model", default=None, help="Chat model (default: configured chat model)")
    parser.add_argument("--embeddings", default=None, help="Path to the embeddings snapshot")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show pipeline logs")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> AskResponse:
    settings = get_settings()
    retrieval_service = build_retrieval_service(settings)
    docs_agent = DocsAgent(
        retrieval_service=retrieval_service,
        chat_provider=OpenAIChatProvider(
            api_key=settings.openai.api_key,
            base_url=settings.openai.base_url,
        ),
        default_model=settings.openai.chat_model,
        max_iterations=settings.ask.max_iterations,
        max_tokens=settings.openai.max_tokens,
        temperature=settings.openai.temperature,
        tool_default_limit=settings.ask.tool_default_limit,
        tool_max_limit=settings.ask.tool_max_limit,
    )
    service = AskService(
        chunk_store=build_chunk_store(args.embeddings or settings.corpus.embeddings_path),
        docs_agent=docs_agent,
        settings=settings.ask,
    )
    return await service.ask(
        AskRequest(query=args.query, sdk=args.sdk, limit=args.limit, model=args.model)
    )


def print_response(response: AskResponse) -> None:
    print("\n" + RULE)
    print("Answer:")
    print(RULE)
    print(response.answer)
    print("\n" + RULE)
    print("Sources:")
    print(RULE)
    for index, source in enumerate(response.sources, start=1):
        print(f"{index}. {source.title}")
        print(f"   {source.url}")
    print(RULE)
    print(f"\nIterations: {response.iterations}")
    print("Costs:")
    cost = response.cost
    print(f"   Search:       ${cost.search_cost:.8f} ({cost.search_tokens} tokens)")
    print(f"   Completion:   ${cost.completion_cost:.8f} ({cost.completion_tokens} tokens)")
    print(f"   Total:        ${cost.total_cost:.8f}")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    if not check_cli_options(args.limit, args.sdk):
        return 1

    configure_logging("INFO" if args.verbose else "WARNING")
    print(f'Question: "{args.query}"')
    if args.sdk:
        print(f"Preferring SDK: {args.sdk}")

    try:
        response = asyncio.run(run(args))
    except DocsQAException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print_response(response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
