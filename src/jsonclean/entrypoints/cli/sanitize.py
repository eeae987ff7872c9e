"""JSONCLEAN batch CLI: ``sanitize`` filter and ``check`` probe.

Both commands read a batch of JSON payload fragments from a file or stdin,
run it through the sanitizer via the message bus, and report the result.

Behavior
- ``sanitize`` writes the sanitized batch to stdout (or ``--output``) in the
  same format it was read in. Status lines go to **stderr**.
- ``check`` writes nothing to stdout; it exits 1 when any item would change.
- Input is read as bytes and decoded as UTF-8 (a leading BOM is dropped), so
  CR/LF pairs reach the sanitizer untouched.

Formats
- ``json``  : one JSON array of strings/nulls (default; ``JSONCLEAN_FORMAT``).
- ``jsonl`` : one JSON string or null per line; blank lines are skipped.
- ``raw``   : the whole input is one text item.

Failure modes
- Undecodable bytes, malformed JSON, or non-string elements → ``ClickException``
  naming the offending position (exit status 1).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, BinaryIO

import click

from jsonclean import config
from jsonclean.bootstrap import bootstrap
from jsonclean.interfaces.batch_codec import BatchCodecError, BatchFormat
from jsonclean.logging import BatchRun, LogSettings, log_startup
from jsonclean.service_layer.commands import SanitizeBatch

from .helpers import error, success, warn

if TYPE_CHECKING:
    from jsonclean.bootstrap import AppContainer
    from jsonclean.interfaces.batch_codec import BatchCodec
    from jsonclean.interfaces.sanitizer import Item

logger = logging.getLogger(__name__)

INPUT_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "utf-8"

UNDECODABLE_INPUT_MSG = "Input is not valid UTF-8 ({reason})."
UNENCODABLE_OUTPUT_MSG = (
    "Sanitized output cannot be written as UTF-8 ({reason}).\n"
    "Re-run with --ascii to escape non-ASCII characters."
)

FORMAT_CHOICES = [fmt.value for fmt in BatchFormat]

format_option = click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help=(
        "Batch format of the input (and output). "
        f"Defaults to ${config.BATCH_FORMAT_ENV_VAR}, or 'json' if unset."
    ),
)

input_argument = click.argument(
    "input_file",
    metavar="[INPUT]",
    type=click.File("rb"),
    default="-",
)


def _resolve_format(fmt: str | None) -> tuple[BatchFormat, str]:
    """Pick the batch format for this run.

    Args:
        fmt: Value of ``--format``, or None when the option was not given.

    Returns:
        tuple[BatchFormat, str]: The format, and where it came from
        (``--format``, ``JSONCLEAN_FORMAT`` or ``default``).

    Raises:
        click.ClickException: If ``JSONCLEAN_FORMAT`` names an unknown format.
    """
    if fmt is not None:
        return BatchFormat(fmt.lower()), "--format"
    try:
        batch_format = config.get_batch_format()
    except config.InvalidBatchFormatError as e:
        raise click.ClickException(str(e)) from e
    origin = config.BATCH_FORMAT_ENV_VAR if config.raw_batch_format() else "default"
    return batch_format, origin


def _stream_name(stream: object, fallback: str) -> str:
    """Return the file name behind *stream*, or *fallback* for anonymous streams."""
    name = getattr(stream, "name", None)
    return name if isinstance(name, str) else fallback


def _log_startup(ctx: click.Context, run: BatchRun) -> None:
    settings = ctx.find_object(LogSettings) or LogSettings()
    log_startup(logger, settings, run)


def _read_batch(codec: BatchCodec, input_file: BinaryIO) -> list[Item]:
    """Read and decode the whole input stream into a list of items.

    Args:
        codec: Codec for the chosen batch format.
        input_file: Binary input stream (a file or stdin).

    Returns:
        list[Item]: The decoded batch.

    Raises:
        click.ClickException: If the bytes are not UTF-8 or the text is not a
            valid batch in the codec's format.
    """
    try:
        text = input_file.read().decode(INPUT_ENCODING)
    except UnicodeDecodeError as e:
        raise click.ClickException(UNDECODABLE_INPUT_MSG.format(reason=e)) from e
    try:
        items = codec.decode(text)
    except BatchCodecError as e:
        raise click.ClickException(str(e)) from e
    logger.info("Read %d item(s) as %s", len(items), codec.format.value)
    return items


def _sanitize(container: AppContainer, items: list[Item]) -> list[Item]:
    return container.message_bus.handle(SanitizeBatch(items=tuple(items)))


def _changed_indexes(before: list[Item], after: list[Item]) -> list[int]:
    """Return the positions where sanitizing changed the item."""
    return [i for i, (b, a) in enumerate(zip(before, after)) if b != a]


@click.command()
@input_argument
@click.option(
    "--output",
    "-o",
    "output_file",
    type=click.File("wb"),
    default="-",
    show_default=True,
    help="Where to write the sanitized batch ('-' for stdout).",
)
@format_option
@click.option(
    "--ascii/--no-ascii",
    "ensure_ascii",
    default=False,
    show_default=True,
    help="Escape non-ASCII characters in JSON output (no effect with --format raw).",
)
@click.option(
    "--stats",
    is_flag=True,
    help="Print a one-line summary of how many items changed to stderr.",
)
@click.pass_context
def sanitize(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    input_file: BinaryIO,
    output_file: BinaryIO,
    fmt: str | None,
    ensure_ascii: bool,
    stats: bool,
) -> None:
    """Collapse CR/LF/TAB runs in each item of a batch into single spaces.

    Reads INPUT (default: stdin) and writes the sanitized batch, one output
    item per input item in the same order. Null items stay null; empty and
    whitespace-only strings are passed through unchanged.
    """
    batch_format, origin = _resolve_format(fmt)
    _log_startup(
        ctx,
        BatchRun(
            command="sanitize",
            batch_format=batch_format,
            format_origin=origin,
            format_env=config.raw_batch_format(),
            source=_stream_name(input_file, "<stdin>"),
            target=_stream_name(output_file, "<stdout>"),
            ensure_ascii=ensure_ascii,
        ),
    )

    container = bootstrap()
    codec = container.codec(batch_format, ensure_ascii=ensure_ascii)

    items = _read_batch(codec, input_file)
    if not items:
        warn("Input batch is empty.")

    result = _sanitize(container, items)

    try:
        payload = codec.encode(result).encode(OUTPUT_ENCODING)
    except UnicodeEncodeError as e:
        raise click.ClickException(UNENCODABLE_OUTPUT_MSG.format(reason=e)) from e
    output_file.write(payload)

    if stats:
        changed = len(_changed_indexes(items, result))
        success(f"Sanitized {len(result)} item(s), {changed} changed.")


@click.command()
@input_argument
@format_option
@click.pass_context
def check(ctx: click.Context, input_file: BinaryIO, fmt: str | None) -> None:
    """Report whether a batch is already clean.

    Exits with status 1 and lists the positions of items that sanitizing
    would change; exits 0 when every item is already clean.
    """
    batch_format, origin = _resolve_format(fmt)
    _log_startup(
        ctx,
        BatchRun(
            command="check",
            batch_format=batch_format,
            format_origin=origin,
            format_env=config.raw_batch_format(),
            source=_stream_name(input_file, "<stdin>"),
        ),
    )

    container = bootstrap()
    codec = container.codec(batch_format)

    items = _read_batch(codec, input_file)
    if dirty := _changed_indexes(items, _sanitize(container, items)):
        error(
            f"{len(dirty)} of {len(items)} item(s) need sanitizing "
            f"(index {', '.join(str(i) for i in dirty)})."
        )
        ctx.exit(1)
    success(f"All {len(items)} item(s) are clean.")
