"""Command-line interface for JSONCLEAN."""
