#!/usr/bin/env python3
"""
Search the documentation from the command line.

With a query, runs one search and exits. Without one, starts an interactive
prompt where each line is a search and ``:commands`` change the options.

Usage:
    python -m docs_qa.scripts.search "authentication"
    python -m docs_qa.scripts.search "session tokens" --limit 5 --sdk nextjs --rerank
    python -m docs_qa.scripts.search --limit 5
"""

import argparse
import asyncio
import sys
from collections.abc import Callable
from dataclasses import dataclass, replace

from dotenv import load_dotenv

from docs_qa.application.services import SearchService
from docs_qa.configs import get_settings
from docs_qa.core.exceptions import DocsQAException
from docs_qa.models.sdk import VALID_SDKS, parse_sdk
from docs_qa.models.search import SearchRequest, SearchResponse
from docs_qa.observability.logger import configure_logging
from docs_qa.scripts._common import (
    RULE,
    build_chunk_store,
    build_retrieval_service,
    check_cli_options,
)

PREVIEW_LENGTH = 200
MAX_LIMIT = 50
PROMPT = "search> "
EXIT_COMMANDS = {"exit", "quit", "q"}

HELP_TEXT = """
Available commands:
  :limit <number>      - Set result limit (default: 10, max: 50)
  :sdk <sdk>           - Prefer an SDK (react, nextjs, etc.)
  :no-sdk              - Clear SDK preference
  :rerank              - Toggle reranking on/off
  :options             - Show current options
  :help                - Show this help message
  :exit, :quit, :q     - Exit
Any other input is searched.
"""


@dataclass(frozen=True)
class SearchOptions:
    """Options applied to every search of an interactive session."""

    limit: int = 10
    sdk: str | None = None
    rerank: bool = False


@dataclass(frozen=True)
class CommandOutcome:
    options: SearchOptions
    query: str | None = None
    exit: bool = False


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Semantic search over the documentation",
        epilog="Without a query, an interactive prompt starts.",
    )
    parser.add_argument("query", nargs="?", default=None, help="Search query (omit for interactive mode)")
    parser.add_argument("--limit", type=int, default=10, help="Maximum number of results (default: 10, max: 50)")
    parser.add_argument("--sdk", default=None, help="Prefer results for an SDK (e.g. react, nextjs)")
    parser.add_argument("--rerank", action="store_true", help="Rerank candidates with a chat model")
    parser.add_argument("--embeddings", default=None, help="Path to the embeddings snapshot")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show pipeline logs")
    return parser.parse_args(argv)


def build_service(args: argparse.Namespace) -> SearchService:
    settings = get_settings()
    return SearchService(
        chunk_store=build_chunk_store(args.embeddings or settings.corpus.embeddings_path),
        retrieval_service=build_retrieval_service(settings),
        settings=settings.search,
    )


async def run(args: argparse.Namespace) -> SearchResponse:
    request = SearchRequest(query=args.query, limit=args.limit, sdk=args.sdk)
    return await build_service(args).search(request, rerank=args.rerank)


def print_response(response: SearchResponse) -> None:
    print(f"\nTop {len(response.results)} results:\n")
    print(RULE)
    for index, result in enumerate(response.results, start=1):
        preview = result.content[:PREVIEW_LENGTH].replace("\n", " ")
        print(f"{index}. {result.title} [{result.score:.3f}]")
        print(f"   {result.url} (chunk {result.chunk_index})")
        print(f"   {preview}")
        print()
    print(RULE)

    cost = response.cost
    print(f"Embedding cost: ${cost.cost:.8f} ({cost.tokens} tokens)")
    if cost.rerank_cost is not None:
        rerank_tokens = cost.rerank_tokens or 0
        print(f"Reranking cost: ${cost.rerank_cost:.8f} ({rerank_tokens} tokens)")
        print(f"Total cost:     ${cost.cost + cost.rerank_cost:.8f} ({cost.tokens + rerank_tokens} tokens)")


def show_options(options: SearchOptions) -> None:
    print(f"  Limit:  {options.limit}")
    print(f"  SDK:    {options.sdk or 'none'}")
    print(f"  Rerank: {'enabled' if options.rerank else 'disabled'}")


def parse_command(line: str) -> tuple[str, list[str]] | None:
    """Split an input line into ``(command, args)``; plain text is a search."""
    text = line.strip()
    if not text:
        return None
    if text.startswith(":"):
        parts = text[1:].split()
        if not parts:
            return None
        return parts[0].lower(), parts[1:]
    return "search", [text]


def handle_command(command: str, args: list[str], options: SearchOptions) -> CommandOutcome:
    """Apply one interactive command and report what to do next."""
    if command in EXIT_COMMANDS:
        return CommandOutcome(options, exit=True)

    if command == "help":
        print(HELP_TEXT)
    elif command == "options":
        show_options(options)
    elif command == "limit":
        if not args:
            print(f"Current limit: {options.limit}")
        elif not args[0].isdigit() or not 1 <= int(args[0]) <= MAX_LIMIT:
            print(f"Error: Invalid limit. Must be between 1 and {MAX_LIMIT}.", file=sys.stderr)
        else:
            options = replace(options, limit=int(args[0]))
            print(f"Limit set to {options.limit}")
    elif command == "sdk":
        if not args:
            print(f"Current SDK: {options.sdk or 'none'}")
        elif parse_sdk(args[0]) is None:
            print(f'Error: Invalid SDK "{args[0]}"', file=sys.stderr)
            print(f"Valid SDKs: {', '.join(sorted(VALID_SDKS))}", file=sys.stderr)
        else:
            options = replace(options, sdk=parse_sdk(args[0]))
            print(f"SDK set to {options.sdk}")
    elif command == "no-sdk":
        options = replace(options, sdk=None)
        print("SDK cleared")
    elif command == "rerank":
        options = replace(options, rerank=not options.rerank)
        print(f"Reranking {'enabled' if options.rerank else 'disabled'}")
    elif command == "search":
        return CommandOutcome(options, query=" ".join(args))
    else:
        # Unknown commands are searched as typed
        return CommandOutcome(options, query=" ".join([command, *args]))

    return CommandOutcome(options)


async def interactive(
    service: SearchService,
    options: SearchOptions,
    read_line: Callable[[str], str] = input,
) -> None:
    """Read commands and queries until exit or end of input."""
    print("Type a query to search, or :help for commands.")
    while True:
        try:
            line = await asyncio.to_thread(read_line, PROMPT)
        except EOFError:
            print()
            return

        parsed = parse_command(line)
        if parsed is None:
            continue

        outcome = handle_command(*parsed, options)
        options = outcome.options
        if outcome.exit:
            return
        if not outcome.query:
            continue

        request = SearchRequest(query=outcome.query, limit=options.limit, sdk=options.sdk)
        try:
            response = await service.search(request, rerank=options.rerank)
        except DocsQAException as e:
            print(f"Error: {e.message}", file=sys.stderr)
            continue
        print_response(response)


def run_interactive(args: argparse.Namespace) -> int:
    service = build_service(args)
    print("Loading embeddings...")
    try:
        corpus = service.chunk_store.load()
    except DocsQAException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    print(f"Loaded {len(corpus):,} chunks")

    options = SearchOptions(limit=min(args.limit, MAX_LIMIT), sdk=parse_sdk(args.sdk), rerank=args.rerank)
    try:
        asyncio.run(interactive(service, options))
    except KeyboardInterrupt:
        print()
    print("Goodbye!")
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    if not check_cli_options(args.limit, args.sdk):
        return 1

    configure_logging("INFO" if args.verbose else "WARNING")
    if args.query is None:
        return run_interactive(args)

    print(f'Searching for: "{args.query}"')
    if args.rerank:
        print("Reranking enabled")

    try:
        response = asyncio.run(run(args))
    except DocsQAException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print_response(response)
    return 0


if __name__ == "__main__":
    sys.exit(main())
