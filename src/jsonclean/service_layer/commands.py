"""Module defining Commands."""

from dataclasses import dataclass

from jsonclean.interfaces.sanitizer import Item


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class SanitizeBatch(Command):
    """Command to sanitize a batch of JSON payload fragments.

    The items are held as a tuple so the command stays hashable and immutable.
    Its repr is kept short because the message bus logs commands and item text
    must not end up in the logs.
    """

    items: tuple[Item, ...]

    def __repr__(self) -> str:
        return f"SanitizeBatch(<{len(self.items)} item(s)>)"
