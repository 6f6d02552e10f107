"""Documentation Q&A agent."""

from docs_qa.core.agentic_system.agent.docs_agent import DocsAgent
from docs_qa.core.agentic_system.agent.docs_agent_schema import AgentAnswer, ConversationState

__all__ = ["AgentAnswer", "ConversationState", "DocsAgent"]
