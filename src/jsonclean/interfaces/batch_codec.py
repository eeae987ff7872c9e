"""Interfaces for reading and writing batches as text.

A batch codec turns the text of an input stream into a list of items and turns
a list of items back into text. Codecs only check that each element is a
string or null; they do not sanitize anything.
"""

import abc
from collections.abc import Sequence
from enum import Enum

from .sanitizer import Item

# pylint: disable=too-few-public-methods


class BatchFormat(Enum):
    """Enumeration for batch text formats.

    Formats:
    - JSON: a single JSON array of strings and nulls.
    - JSONL: one JSON string or null per line.
    - RAW: the whole text is a single item.
    """

    JSON = "json"
    JSONL = "jsonl"
    RAW = "raw"


class BatchCodecError(Exception):
    """Base class for batch codec errors."""


class MalformedBatchError(BatchCodecError):
    """Raised when input text cannot be decoded into a batch."""

    def __init__(self, position: str, reason: str) -> None:
        super().__init__(f"Malformed batch at {position}: {reason}")
        self.position = position
        self.reason = reason


class BatchCodec(abc.ABC):
    """Interface for converting between text and batches."""

    _format: BatchFormat

    @abc.abstractmethod
    def decode(self, text: str) -> list[Item]:
        """Decode input text into a batch.

        Args:
            text: The full input text.

        Returns:
            The decoded items, in input order.

        Raises:
            MalformedBatchError: If the text is not a valid batch in this format.
        """

    @abc.abstractmethod
    def encode(self, batch: Sequence[Item]) -> str:
        """Encode a batch as output text.

        Args:
            batch: Items to encode.

        Returns:
            The text to write to the output stream.
        """

    @property
    def format(self) -> BatchFormat:
        """Return the batch format handled by this codec."""
        return self._format
