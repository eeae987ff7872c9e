"""Batch codecs for the JSON, JSON Lines, and raw text formats.

Each codec converts between the text of an input/output stream and a list of
items (strings or ``None``). Decoding validates element types and reports the
position of the first offending element; encoding never fails.
"""

import json
from collections.abc import Sequence

from jsonclean.interfaces import batch_codec
from jsonclean.interfaces.batch_codec import BatchFormat, MalformedBatchError
from jsonclean.interfaces.sanitizer import Item

# pylint: disable=too-few-public-methods


def _check_item(value: object, position: str) -> Item:
    """Return *value* if it is a valid item, else raise MalformedBatchError."""
    if value is None or isinstance(value, str):
        return value
    raise MalformedBatchError(
        position, f"expected a string or null, got {type(value).__name__}"
    )


class JsonArrayCodec(batch_codec.BatchCodec):
    """Codec for a batch stored as one JSON array."""

    def __init__(self, ensure_ascii: bool = False) -> None:
        self._format = BatchFormat.JSON
        self._ensure_ascii = ensure_ascii

    def decode(self, text: str) -> list[Item]:
        """Parse *text* as one JSON array of strings and nulls.

        Args:
            text: The whole input, already decoded from bytes.

        Returns:
            list[Item]: The array elements, in order.

        Raises:
            MalformedBatchError: If *text* is not valid JSON (position is the
                line and column), is not an array ("top level"), or holds an
                element that is neither a string nor null ("index i").
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedBatchError(
                f"line {e.lineno} column {e.colno}", e.msg
            ) from e
        if not isinstance(data, list):
            raise MalformedBatchError(
                "top level", f"expected a JSON array, got {type(data).__name__}"
            )
        return [_check_item(value, f"index {i}") for i, value in enumerate(data)]

    def encode(self, batch: Sequence[Item]) -> str:
        """Serialize *batch* as a JSON array on a single line.

        Args:
            batch: Items to write.

        Returns:
            str: The array followed by a newline.
        """
        return json.dumps(list(batch), ensure_ascii=self._ensure_ascii) + "\n"


class JsonLinesCodec(batch_codec.BatchCodec):
    """Codec for a batch stored as one JSON value per line.

    Blank lines carry no item and are skipped on decode.
    """

    def __init__(self, ensure_ascii: bool = False) -> None:
        self._format = BatchFormat.JSONL
        self._ensure_ascii = ensure_ascii

    def decode(self, text: str) -> list[Item]:
        """Parse one JSON string or null per non-blank line of *text*.

        Args:
            text: The whole input, already decoded from bytes.

        Returns:
            list[Item]: One item per non-blank line, in order.

        Raises:
            MalformedBatchError: If a line is not valid JSON or holds a value
                other than a string or null (position "line N", 1-based).
        """
        items: list[Item] = []
        # str.splitlines() would also split on U+2028 etc., which are legal
        # unescaped inside JSON strings.
        for lineno, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.rstrip("\r")
            if not line.strip():
                continue
            position = f"line {lineno}"
            try:
                value = json.loads(line)
            except json.JSONDecodeError as e:
                raise MalformedBatchError(position, e.msg) from e
            items.append(_check_item(value, position))
        return items

    def encode(self, batch: Sequence[Item]) -> str:
        """Serialize each item as a JSON value on its own line.

        Args:
            batch: Items to write.

        Returns:
            str: One line per item, each ending in a newline.
        """
        return "".join(
            json.dumps(item, ensure_ascii=self._ensure_ascii) + "\n" for item in batch
        )


class RawTextCodec(batch_codec.BatchCodec):
    """Codec treating the whole text as a single item."""

    def __init__(self) -> None:
        self._format = BatchFormat.RAW

    def decode(self, text: str) -> list[Item]:
        """Return *text* as a batch of exactly one item."""
        return [text]

    def encode(self, batch: Sequence[Item]) -> str:
        """Concatenate the text items verbatim, skipping nulls.

        Args:
            batch: Items to write; normally the single item from `decode`.

        Returns:
            str: The joined text, with no trailing newline added.
        """
        return "".join(item for item in batch if item is not None)


def make_codec(
    fmt: BatchFormat | str, ensure_ascii: bool = False
) -> batch_codec.BatchCodec:
    """Return a codec for the given format.

    Args:
        fmt: A BatchFormat member or its string value (e.g. ``"jsonl"``).
        ensure_ascii: Escape non-ASCII characters in JSON output. Ignored for
            the raw format.

    Returns:
        A new codec instance.

    Raises:
        ValueError: If *fmt* is not a known format value.
    """
    fmt = BatchFormat(fmt)
    if fmt is BatchFormat.JSON:
        return JsonArrayCodec(ensure_ascii=ensure_ascii)
    if fmt is BatchFormat.JSONL:
        return JsonLinesCodec(ensure_ascii=ensure_ascii)
    return RawTextCodec()
