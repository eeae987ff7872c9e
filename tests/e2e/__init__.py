"""E2e tests for JSONCLEAN."""
