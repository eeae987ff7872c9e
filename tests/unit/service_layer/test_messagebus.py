"""Unit tests for the MessageBus"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

import pytest

from jsonclean.service_layer.commands import Command
from jsonclean.service_layer.messagebus import MessageBus, NoHandlerForCommand

# pylint: disable=unused-argument, too-few-public-methods


@dataclass(frozen=True)
class CommandA(Command):
    """A simple fake command for testing purposes."""

    x: int = 0


@dataclass(frozen=True)
class CommandB(Command):
    """A simple fake command for testing purposes."""

    msg: str = "hi"


# --- Assert Helpers ---


def assert_log_message(records, message, level: str) -> None:
    """Assert that a log message is in the log records."""
    log_msgs = [rec.getMessage() for rec in records if rec.levelname == level]
    assert message in log_msgs


# --- Tests ---


def test_dispatches_to_specific_handler_once(caplog):
    """MessageBus dispatches to the correct handler once and logs it."""

    calls: list[Command] = []

    def handle_a(cmd: CommandA) -> None:
        calls.append(cmd)

    def handle_b(cmd: CommandB) -> None:
        calls.append(cmd)

    bus = MessageBus(command_handlers={CommandA: handle_a, CommandB: handle_b})
    a = CommandA(42)

    with caplog.at_level("DEBUG"):
        bus.handle(a)

    assert calls == [a]
    assert_log_message(
        caplog.records,
        f"Handling command {a} with handler {handle_a.__name__}",
        "DEBUG",
    )


def test_returns_handler_result():
    """handle() returns whatever the handler returns."""
    bus = MessageBus(command_handlers={CommandA: lambda cmd: cmd.x * 2})
    assert bus.handle(CommandA(21)) == 42


def test_message_bus_no_handler_logs_error(caplog):
    """MessageBus logs an error and raises when no handler is found."""
    bus = MessageBus(command_handlers={})
    with caplog.at_level("ERROR"):
        with pytest.raises(
            NoHandlerForCommand,
            match="No handler found for command CommandA",
        ):
            bus.handle(CommandA())

    assert_log_message(
        caplog.records,
        "No handler found for command CommandA",
        "ERROR",
    )


def test_no_handler_is_lookup_error():
    """NoHandlerForCommand can be caught as a LookupError."""
    with pytest.raises(LookupError):
        MessageBus(command_handlers={}).handle(CommandB())


def test_message_bus_handler_exception_logs(caplog):
    """MessageBus logs an exception raised by a handler and reraises."""

    def faulty_handler(cmd: CommandA):
        raise RuntimeError("Handler error")

    handlers: dict[type[Command], Callable[..., object]] = {
        CommandA: faulty_handler,
    }

    bus = MessageBus(command_handlers=handlers)
    with caplog.at_level("ERROR"):
        with pytest.raises(RuntimeError, match="Handler error"):
            bus.handle(CommandA())

    assert_log_message(
        caplog.records,
        f"Exception handling command {CommandA()} with handler faulty_handler",
        "ERROR",
    )


@pytest.mark.parametrize(
    ("handler", "expected_name"),
    [
        (partial(lambda cmd, dep: None, dep=1), "<lambda>"),
        (partial(print, end=""), "print"),
    ],
    ids=["partial-lambda", "partial-builtin"],
)
def test_handler_name_unwraps_partials(handler, expected_name):
    """Injected handlers (functools.partial) are logged by their wrapped name."""
    # pylint: disable=protected-access
    assert MessageBus._get_handler_name(handler) == expected_name


def test_handler_name_falls_back_to_repr():
    """Callables without a name are logged by repr."""

    class Handler:
        """Nameless callable."""

        def __call__(self, cmd):
            return None

    handler = Handler()
    # pylint: disable=protected-access
    assert MessageBus._get_handler_name(handler) == repr(handler)
