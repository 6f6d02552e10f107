"""
Assistant answer text extraction.

Assistant message content is either a plain string or a list of content
blocks. Both shapes are normalised into one flat string.

Dependencies: langchain_core.messages
System role: Final answer extraction for the documentation agent
"""

from dataclasses import dataclass
from typing import Any, Literal, Union

from langchain_core.messages import AIMessage, BaseMessage


@dataclass(frozen=True)
class PlainAnswer:
    text: str
    kind: Literal["plain"] = "plain"


@dataclass(frozen=True)
class BlocksAnswer:
    blocks: tuple[str, ...]
    kind: Literal["blocks"] = "blocks"


TextAnswer = Union[PlainAnswer, BlocksAnswer]


def to_text_answer(content: Any) -> TextAnswer:
    """
    Classify message content.

    String content is a plain answer. List content keeps only its text
    blocks: bare strings and ``{"text": ...}`` mappings; anything else
    (tool-use blocks, images) is dropped.
    """
    if isinstance(content, str):
        return PlainAnswer(text=content)

    blocks: list[str] = []
    if isinstance(content, (list, tuple)):
        for block in content:
            if isinstance(block, str):
                blocks.append(block)
            elif isinstance(block, dict) and isinstance(block.get("text"), str):
                blocks.append(block["text"])
    return BlocksAnswer(blocks=tuple(blocks))


def answer_text(answer: TextAnswer) -> str:
    """Flatten a TextAnswer to a string."""
    if isinstance(answer, PlainAnswer):
        return answer.text
    return "".join(answer.blocks)


def message_text(content: Any) -> str:
    """Text of a message's content in either shape."""
    return answer_text(to_text_answer(content))


def last_assistant_text(messages: list[BaseMessage]) -> str:
    """Text of the most recent assistant message that has any, else ""."""
    for message in reversed(messages):
        if isinstance(message, AIMessage):
            text = message_text(message.content)
            if text:
                return text
    return ""
