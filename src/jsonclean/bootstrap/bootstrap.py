"""Bootstrap the message bus with handlers and the sanitizer."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from jsonclean.adapters.codecs import make_codec
from jsonclean.adapters.sanitizer import ControlCharSanitizer
from jsonclean.service_layer.handlers import COMMAND_HANDLERS
from jsonclean.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from jsonclean.interfaces.batch_codec import BatchCodec, BatchFormat
    from jsonclean.interfaces.sanitizer import Sanitizer
    from jsonclean.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    codec_factory: Callable[..., BatchCodec]

    def codec(self, fmt: BatchFormat | str, ensure_ascii: bool = False) -> BatchCodec:
        """Return a codec for *fmt* built by the configured factory."""
        return self.codec_factory(fmt, ensure_ascii=ensure_ascii)


def build_message_bus(
    sanitizer: Sanitizer,
    command_handlers: Mapping[type[Command], Callable[..., object]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"sanitizer": sanitizer}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(sanitizer: Sanitizer | None = None) -> AppContainer:
    """Bootstrap the message bus with handlers and the sanitizer.

    Args:
        sanitizer: Sanitizer to inject. Defaults to ControlCharSanitizer.
    """
    if sanitizer is None:
        sanitizer = ControlCharSanitizer()
    message_bus = build_message_bus(sanitizer, COMMAND_HANDLERS)

    return AppContainer(
        message_bus=message_bus,
        codec_factory=make_codec,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
