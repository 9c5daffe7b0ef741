"""Command-line interface for Yo."""
