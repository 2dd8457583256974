"""Command-line interface for relico."""
