"""Interfaces for sanitizing JSON payload fragments.

This module defines the Sanitizer interface and the Item/Batch aliases used by
adapters and the service layer. A batch is an ordered sequence of items, where
each item is either absent (``None``) or a text value. Implementations provide
``sanitize_item``; the batch operation is shared and always preserves the
length of the batch and the position of every absent item.
"""

import abc
from collections.abc import Sequence
from typing import TypeAlias

# pylint: disable=too-few-public-methods

Item: TypeAlias = str | None
Batch: TypeAlias = Sequence[Item]


class Sanitizer(abc.ABC):
    """Interface for cleaning text items before they are embedded in JSON."""

    @abc.abstractmethod
    def sanitize_item(self, item: Item) -> Item:
        """Return a sanitized copy of a single item.

        Args:
            item: A text value, or ``None`` for an absent item.

        Returns:
            The sanitized text, or ``None`` if the item was absent.
        """

    def sanitize(self, batch: Batch) -> list[Item]:
        """Sanitize every item of a batch independently.

        Args:
            batch: Items to sanitize. May be empty.

        Returns:
            A new list with one sanitized item per input item, in input order.
        """
        return [self.sanitize_item(item) for item in batch]
