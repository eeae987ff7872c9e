"""Logging setup for the JSONCLEAN CLI.

Console records are rendered by Rich on **stderr**, so stdout only ever
carries the sanitized batch. Alongside it runs an in-memory "flight
recorder" (a ``MemoryHandler``) that keeps recent records at DEBUG and dumps
them to a file when a WARNING or worse is logged.

The ``jsonclean`` group turns its options into a :class:`LogSettings`, calls
:func:`configure_logging`, and leaves the settings on the Click context. Each
subcommand then describes what it is about to do in a :class:`BatchRun` and
hands both to :func:`log_startup`. Only counts, formats and stream names are
ever logged, never item text.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from jsonclean import __version__
from jsonclean.config import BATCH_FORMAT_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping
    from logging import Logger
    from pathlib import Path

    from jsonclean.interfaces.batch_codec import BatchFormat

PROJECT_PREFIX = "jsonclean"
FLIGHT_RECORDER_CAPACITY = 2000
FLIGHT_RECORDER_FORMAT = (
    "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d: %(message)s"
)
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"


@dataclass(frozen=True)
class LogSettings:
    """Logging choices made on the ``jsonclean`` group.

    Attributes:
        console_level: Minimum level shown on the console.
        debug: Show timestamps, logger names and source paths on the console.
        color: Allow colored console output.
        recorder_path: File the flight recorder dumps to; ``None`` disables it.
        flush_on_exit: Dump the flight recorder on exit even without a WARNING.
        logger_levels: Per-logger minimum levels set with ``-L``.
    """

    console_level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    recorder_path: Path | None = None
    flush_on_exit: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class BatchRun:
    """What a subcommand is about to do with a batch.

    Attributes:
        command: Subcommand name (``sanitize`` or ``check``).
        batch_format: Format the batch is read (and written) in.
        format_origin: Where the format came from: ``--format``, the
            ``JSONCLEAN_FORMAT`` variable, or ``default``.
        format_env: Raw ``JSONCLEAN_FORMAT`` value, or ``None`` when unset.
        source: Name of the input stream or file.
        target: Name of the output stream or file; ``None`` for ``check``.
        ensure_ascii: Whether JSON output escapes non-ASCII characters.
    """

    command: str
    batch_format: BatchFormat
    format_origin: str
    format_env: str | None
    source: str
    target: str | None = None
    ensure_ascii: bool = False


def console_level(verbose: int, quiet: int) -> int:
    """Return the console level for the given ``-v``/``-q`` counts.

    Each ``-v`` lowers the WARNING default by one level and each ``-q`` raises
    it by one; the result is clamped to DEBUG..CRITICAL.
    """
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ConsoleFormatter(logging.Formatter):
    """Tag records from other libraries with their top-level package name.

    ``click_extra.colorize`` records render as ``[click_extra] message``;
    records from ``jsonclean.*`` loggers are left as they are.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.name.startswith(PROJECT_PREFIX):
            return message
        return f"[{record.name.partition('.')[0]}] {message}"


def _console_handler(settings: LogSettings) -> RichHandler:
    console = Console(stderr=True, color_system="auto" if settings.color else None)
    handler = RichHandler(
        level=logging.DEBUG if settings.debug else settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT)
        if settings.debug
        else ConsoleFormatter("%(message)s")
    )
    return handler


def _flight_recorder(path: Path, flush_on_close: bool) -> MemoryHandler:
    # mode="w": each run replaces the previous dump
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity=FLIGHT_RECORDER_CAPACITY,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LogSettings) -> list[logging.Handler]:
    """Install the console handler and flight recorder on the root logger.

    The root logger is opened up to DEBUG so that the flight recorder sees
    everything; the console handler filters by its own level. Per-logger
    levels from ``-L`` are applied last and affect both outputs.

    Args:
        settings: Logging choices from the ``jsonclean`` group options.

    Returns:
        list[logging.Handler]: The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [_console_handler(settings)]
    if settings.recorder_path is not None:
        handlers.append(
            _flight_recorder(settings.recorder_path, settings.flush_on_exit)
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(logger: Logger, settings: LogSettings, run: BatchRun) -> None:
    """Log a one-line summary of the run followed by DEBUG diagnostics.

    The INFO line names the version, the subcommand, the batch format and
    where it came from, the console level and whether the flight recorder is
    on. DEBUG lines give the input and output streams, the raw
    ``JSONCLEAN_FORMAT`` value, library versions, the flight-recorder file and
    any per-logger levels.

    Args:
        logger: Logger used to emit the messages.
        settings: Logging choices from the ``jsonclean`` group.
        run: The batch the subcommand is about to process.
    """
    logger.info(
        "JSONCLEAN %s %s: format=%s (%s), console=%s, flight-recorder=%s",
        __version__,
        run.command,
        run.batch_format.value,
        run.format_origin,
        logging.getLevelName(settings.console_level),
        "ON" if settings.recorder_path is not None else "OFF",
    )
    logger.debug("Input: %s", run.source)
    if run.target is not None:
        logger.debug("Output: %s (ascii=%s)", run.target, run.ensure_ascii)
    logger.debug(
        "%s: %s",
        BATCH_FORMAT_ENV_VAR,
        repr(run.format_env) if run.format_env is not None else "<unset>",
    )
    logger.debug(
        "Python %s, click %s, rich %s",
        sys.version.split()[0],
        version("click"),
        version("rich"),
    )
    if settings.recorder_path is not None:
        logger.debug(
            "Flight recorder: %s (flush on exit: %s)",
            settings.recorder_path,
            settings.flush_on_exit,
        )
    logger.debug(
        "Logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
