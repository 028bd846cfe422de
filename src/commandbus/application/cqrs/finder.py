"""Application CQRS – CommandHandlerFinder port and its registry adapter."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from commandbus.application.cqrs.commands import CommandHandler
from commandbus.kernel.errors import HandlerNotFoundError, InvalidArgumentError

if TYPE_CHECKING:
    from commandbus.application.cqrs.registry import CommandHandlerRegistry


class CommandHandlerFinder(abc.ABC):
    """Port: resolve a command name to the handler that executes it.

    This is all a bus needs from the registry; it cannot register or
    remove handlers through it.
    """

    @abc.abstractmethod
    def find_handler_for(self, command_name: str) -> CommandHandler[Any, Any]:
        """Return the handler for *command_name*.

        Raises:
            InvalidArgumentError: *command_name* is ``None`` or empty.
            HandlerNotFoundError: no handler serves *command_name*.
        """


class RegistryCommandHandlerFinder(CommandHandlerFinder):
    """Finds handlers in a :class:`CommandHandlerRegistry`."""

    def __init__(self, registry: CommandHandlerRegistry) -> None:
        if registry is None:
            raise InvalidArgumentError("registry")
        self._registry = registry

    def find_handler_for(self, command_name: str) -> CommandHandler[Any, Any]:
        if command_name is None:
            raise InvalidArgumentError("command_name")
        if not command_name:
            raise InvalidArgumentError("command_name", "must not be empty")
        handler = self._registry.get_handler_for(command_name)
        if handler is None:
            raise HandlerNotFoundError(command_name)
        return handler


__all__ = ["CommandHandlerFinder", "RegistryCommandHandlerFinder"]
