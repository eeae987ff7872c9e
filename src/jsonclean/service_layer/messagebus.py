"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The main responsibility of the message bus is to route commands to their
    appropriate handlers and hand back whatever the handler returns. It also
    manages logging and error handling during the dispatch process.

    Args:
        command_handlers: A mapping of command types to their handlers.
            Note that handlers should be callables that accept a single command argument.
            Additional dependencies (i.e. the sanitizer) should be injected via
            closures or other means.

    Note:
        This implementation is synchronous. Handlers here are pure and
        stateless, so a single bus may be shared between threads.
    """

    def __init__(
        self,
        command_handlers: dict[type[Command], Callable[..., object]],
    ) -> None:
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> object:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            The value returned by the handler.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                return handler(cmd)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., object]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
