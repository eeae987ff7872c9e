"""Service layer handlers."""

import logging
from collections.abc import Callable

from jsonclean.interfaces.sanitizer import Item, Sanitizer

from . import commands

logger = logging.getLogger(__name__)


def sanitize_batch(cmd: commands.SanitizeBatch, sanitizer: Sanitizer) -> list[Item]:
    """Sanitize the items of a batch, preserving length and order."""

    result = sanitizer.sanitize(cmd.items)

    changed = sum(1 for before, after in zip(cmd.items, result) if before != after)
    logger.debug(
        "SanitizeBatch: %d item(s), %d changed, %d absent",
        len(result),
        changed,
        sum(1 for item in result if item is None),
    )
    return result


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., object]] = {
    commands.SanitizeBatch: sanitize_batch,
}
