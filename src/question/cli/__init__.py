"""Command line interface for asking a single question."""
