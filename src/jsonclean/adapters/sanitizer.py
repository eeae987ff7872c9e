"""Regex-based sanitizer for control characters in JSON payload fragments.

This module provides a Sanitizer implementation that collapses carriage
returns, line feeds, and horizontal tabs into single spaces, then squeezes any
resulting runs of spaces. Absent items, empty strings, and whitespace-only
strings pass through untouched. Other control characters (form feed, NUL,
backspace, ...) are deliberately left alone.
"""

import re

from jsonclean.interfaces import sanitizer
from jsonclean.interfaces.sanitizer import Item

# pylint: disable=too-few-public-methods

SPACE = " "
CONTROL_RUN_PATTERN = re.compile(r"[\r\n\t]+")
SPACE_RUN_PATTERN = re.compile(r" {2,}")


def is_blank(text: str) -> bool:
    """Return True if *text* is empty or only whitespace."""
    return not text.strip()


class ControlCharSanitizer(sanitizer.Sanitizer):
    """Sanitizer implementation using two regex substitution passes."""

    def sanitize_item(self, item: Item) -> Item:
        if item is None or is_blank(item):
            return item

        # 1) \r, \n, \t runs (any mix)  → one space
        sanitized = CONTROL_RUN_PATTERN.sub(SPACE, item)

        # 2) two or more spaces  → one space
        sanitized = SPACE_RUN_PATTERN.sub(SPACE, sanitized)

        return sanitized
