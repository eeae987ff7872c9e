"""JSONCLEAN CLI entry point.

Defines the top-level ``jsonclean`` command (via Click-Extra), configures
logging for every subcommand, and registers the subcommands.

Currently available commands
- ``jsonclean sanitize``: filter a batch (stdin/file → stdout/file).
- ``jsonclean check``: exit 1 if any item of a batch would change.

Notes
- The CLI version is sourced from `jsonclean.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Logs go to stderr and the flight recorder; status lines and the
  ``--time`` report go to stderr. Only the batch is written to stdout.
- The group leaves its `LogSettings` on ``ctx.obj``; subcommands pass them to
  `log_startup` once they know what batch they are about to process.

Examples
    $ jsonclean --version
    $ printf '["a\\nb", null]' | jsonclean sanitize
    $ jsonclean -v sanitize --format jsonl payloads.jsonl -o clean.jsonl
"""

import logging
import time
from collections.abc import Callable
from pathlib import Path

import click
import click_extra as clickx

from jsonclean import __version__, config
from jsonclean.logging import LogSettings, configure_logging, console_level

from .helpers import hyperlink, parse_log_level
from .sanitize import check, sanitize

HELP = """JSONCLEAN command-line interface.

    JSONCLEAN cleans text fragments before they are embedded in a JSON request
    body. Every run of carriage returns, line feeds, and tabs inside an item is
    collapsed into a single space, and repeated spaces are squeezed, so the
    fragment keeps its word boundaries but can no longer break the payload.
    Null, empty, and whitespace-only items pass through unchanged.
    """

RFC8259_STRINGS_URL = "https://www.rfc-editor.org/rfc/rfc8259#section-7"

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  JSON strings (RFC 8259 §7): " + hyperlink(RFC8259_STRINGS_URL),
    ]
)


def _report_elapsed(start: float) -> Callable[[], None]:
    """Return a close callback that prints the time since *start* to stderr."""

    def report() -> None:
        elapsed = time.perf_counter() - start
        click.echo(f"Execution time: {elapsed:.3f} seconds.", err=True)

    return report


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[clickx.ColorOption(show_envvar=True), clickx.ExtraVersionOption()],
    epilog=EPILOG,
)
@click.option(
    "-v",
    "--verbose",
    "verbose",
    count=True,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet",
    count=True,
    help="Show less on the console: -q for ERROR, -qq for CRITICAL.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Prefix console records with timestamps and logger names, and show source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=config.default_log_path(),
    envvar=f"{config.ENV_PREFIX}_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder dumps its buffer to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar=f"{config.ENV_PREFIX}_FLIGHT_RECORDER",
    show_envvar=True,
    help=(
        "Buffer the last records at DEBUG, whatever -v/-q say, and write them "
        "to --log-path when a WARNING or worse is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    envvar=f"{config.ENV_PREFIX}_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
    help="Also write the flight-recorder buffer to --log-path on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    envvar=f"{config.ENV_PREFIX}_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL (e.g. "
        "-L jsonclean.service_layer=DEBUG). Applies to the console and the "
        "flight recorder. Repeatable; the variable takes a comma/space list."
    ),
)
@click.option(
    "--time/--no-time",
    "show_time",
    default=False,
    help="Print the execution time to stderr when the command finishes.",
)
@clickx.pass_context
def jsonclean(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
    show_time: bool,
) -> None:
    """JSONCLEAN command-line interface."""
    ctx.obj = LogSettings(
        console_level=console_level(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        recorder_path=log_path if flight_recorder else None,
        flush_on_exit=force_flush,
        logger_levels=logger_levels,
    )
    configure_logging(ctx.obj)
    ctx.call_on_close(logging.shutdown)

    # close callbacks run last-in first-out, so the timer reports before shutdown
    if show_time:
        ctx.call_on_close(_report_elapsed(time.perf_counter()))


jsonclean.add_command(sanitize)
jsonclean.add_command(check)
