"""Application CQRS – Command, CommandHandler, CommandBus, SimpleCommandBus."""
from __future__ import annotations

import abc
import sys
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from commandbus.kernel.errors import InvalidArgumentError
from commandbus.observability.logging import get_logger

if TYPE_CHECKING:
    from commandbus.application.cqrs.finder import CommandHandlerFinder

C = TypeVar("C", bound="Command")
R = TypeVar("R")

logger = get_logger(__name__)


class Command:
    """Marker base for commands (intent to perform an action)."""


def _resolves_to(command_type: type) -> bool:
    """True when ``module.qualname`` imports back to *command_type* itself."""
    target: Any = sys.modules.get(command_type.__module__)
    for part in command_type.__qualname__.split("."):
        target = getattr(target, part, None)
        if target is None:
            return False
    return target is command_type


def command_name(command_type: type) -> str:
    """Return the canonical name of a command type: its dotted import path.

    ``command_name(SumCommand)`` -> ``"commandbus.demo.SumCommand"``

    Classes not reachable through that path (defined in a function, built
    with ``type()``, or shadowed by a later definition) get an ``@<id>``
    suffix, so two distinct live classes never share a name.
    """
    if command_type is None:
        raise InvalidArgumentError("command_type")
    if not isinstance(command_type, type):
        raise InvalidArgumentError("command_type", f"must be a class, got {command_type!r}")
    name = f"{command_type.__module__}.{command_type.__qualname__}"
    if _resolves_to(command_type):
        return name
    return f"{name}@{id(command_type):x}"


class CommandHandler(abc.ABC, Generic[C, R]):
    """Executes one or more command kinds and returns a result.

    Which commands a handler serves is declared on the class with
    :func:`~commandbus.application.cqrs.mapping.command_mapping`.
    """

    @abc.abstractmethod
    def handle(self, command: C) -> R: ...


class CommandBus(abc.ABC):
    """Routes a command to the handler registered for it."""

    @abc.abstractmethod
    def execute(self, command: Command) -> Any: ...


class SimpleCommandBus(CommandBus):
    """Synchronous in-process command bus.

    Resolves the command's name through a :class:`CommandHandlerFinder` and
    returns the handler's result unchanged. Lookup failures and handler
    exceptions propagate to the caller.
    """

    def __init__(self, finder: CommandHandlerFinder) -> None:
        if finder is None:
            raise InvalidArgumentError("finder")
        self._finder = finder

    def execute(self, command: Command) -> Any:
        if command is None:
            raise InvalidArgumentError("command")
        name = command_name(type(command))
        handler = self._finder.find_handler_for(name)
        logger.debug("command_dispatched", command=name, handler=type(handler).__qualname__)
        return handler.handle(command)


__all__ = ["Command", "CommandBus", "CommandHandler", "SimpleCommandBus", "command_name"]
