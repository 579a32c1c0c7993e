"""Command-line interface for faretrack."""
