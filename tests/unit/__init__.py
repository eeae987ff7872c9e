"""Unit tests for JSONCLEAN."""
