"""Command-line interface for skillcheck."""
