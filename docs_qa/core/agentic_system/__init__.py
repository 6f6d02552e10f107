"""Tool-calling conversation agents."""
