"""
Documentation question-answering service.

Semantic search over a precomputed embedding snapshot combined with a
bounded, tool-calling chat loop that produces sourced answers.
"""

__version__ = "0.1.0"
