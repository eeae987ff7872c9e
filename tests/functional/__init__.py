"""Functional tests for JSONCLEAN."""
