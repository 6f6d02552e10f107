"""Command-line tools for querying the documentation corpus."""
