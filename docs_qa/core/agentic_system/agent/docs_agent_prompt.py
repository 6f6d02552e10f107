"""
Documentation agent prompts.

System and user prompt template for the documentation Q&A agent, and the
formatting of retrieved chunks into prompt context.

Dependencies: langchain_core.prompts
System role: Prompt template for documentation agent behavior
"""

from collections.abc import Iterable

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from docs_qa.models.chunk import ScoredChunk

SYSTEM_PROMPT = """You are a helpful assistant that answers questions about Clerk authentication and user management using the provided documentation.

When answering questions:
- Use the provided documentation context to give accurate answers
- Include code examples when relevant
- If the user specifies an SDK ({sdk_preference}), prioritize information relevant to that SDK
- Cite sources by mentioning the documentation title or URL when referencing specific information
- You can use the search_docs tool to find additional information if the initial context doesn't fully answer the question
- If you need more specific information, use search_docs with a focused query
- Be concise but thorough
- After gathering sufficient information, provide your final answer"""

USER_PROMPT = """Question: {question}

{sdk_note}

Documentation Context:
{context}"""

DOCS_AGENT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", USER_PROMPT),
])


def format_context_chunks(chunks: Iterable[ScoredChunk]) -> str:
    """
    Render chunks as prompt context.

    Each chunk is introduced by a ``---`` delimiter followed by its title,
    URL and content.
    """
    parts = []
    for scored in chunks:
        parts.append(
            f"---\n"
            f"Title: {scored.title}\n"
            f"URL: {scored.url}\n"
            f"Content:\n{scored.content}\n\n"
        )
    return "".join(parts)


def build_initial_messages(
    question: str,
    chunks: Iterable[ScoredChunk],
    target_sdk: str | None = None,
) -> list[BaseMessage]:
    """
    Build the ``[system, user]`` messages that open a conversation.

    Args:
        question: User's question
        chunks: Seed context from the initial search
        target_sdk: SDK the user is working with, if any

    Returns:
        list[BaseMessage]: System and human messages
    """
    return DOCS_AGENT_PROMPT.invoke({
        "sdk_preference": target_sdk or "any SDK",
        "question": question,
        "sdk_note": f"Note: The user is working with the {target_sdk} SDK." if target_sdk else "",
        "context": format_context_chunks(chunks),
    }).to_messages()
