"""Application CQRS – CommandBusBuilder fluent assembly.

Usage::

    bus = (
        CommandBusBuilder.create()
        .register_handler(SumCommandHandler, SumCommandHandler())
        .register_handler(PrintLineCommandHandler, PrintLineCommandHandler())
        .concurrent()
        .build()
    )
    bus.execute(SumCommand(15, 5))   # -> 20
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from commandbus.application.cqrs.commands import CommandHandler, SimpleCommandBus
from commandbus.application.cqrs.finder import RegistryCommandHandlerFinder
from commandbus.application.cqrs.registry import (
    CommandHandlerRegistry,
    new_concurrent_registry,
    new_registry,
)
from commandbus.application.cqrs.settings import CommandBusSettings
from commandbus.kernel.errors import InvalidArgumentError, TypeMismatchError


class CommandBusBuilder:
    """Collects handlers and options, then assembles a :class:`SimpleCommandBus`.

    Registry choice at :meth:`build` time: a registry passed to
    :meth:`with_registry`, otherwise a concurrent one if :meth:`concurrent`
    was called, otherwise the unsynchronised default.
    """

    def __init__(self) -> None:
        self._concurrent = False
        self._custom_registry: CommandHandlerRegistry | None = None
        self._handlers: dict[type[CommandHandler[Any, Any]], CommandHandler[Any, Any]] = {}

    @classmethod
    def create(cls) -> CommandBusBuilder:
        return cls()

    @classmethod
    def from_settings(cls, settings: CommandBusSettings) -> CommandBusBuilder:
        if settings is None:
            raise InvalidArgumentError("settings")
        builder = cls()
        if settings.concurrent:
            builder.concurrent()
        return builder

    def concurrent(self) -> CommandBusBuilder:
        self._concurrent = True
        return self

    def register_handler(
        self,
        handler_type: type[CommandHandler[Any, Any]],
        instance: CommandHandler[Any, Any],
    ) -> CommandBusBuilder:
        if handler_type is None:
            raise InvalidArgumentError("handler_type")
        if instance is None:
            raise InvalidArgumentError("instance")
        if not isinstance(handler_type, type) or not issubclass(handler_type, CommandHandler):
            raise InvalidArgumentError(
                "handler_type", f"must be a CommandHandler subclass, got {handler_type!r}"
            )
        if not isinstance(instance, handler_type):
            raise TypeMismatchError(handler_type, instance)
        self._handlers[handler_type] = instance
        return self

    def register_handlers(
        self,
        handlers: Mapping[type[CommandHandler[Any, Any]], CommandHandler[Any, Any]],
    ) -> CommandBusBuilder:
        if handlers is None:
            raise InvalidArgumentError("handlers")
        for handler_type, instance in handlers.items():
            self.register_handler(handler_type, instance)
        return self

    def with_registry(self, registry: CommandHandlerRegistry) -> CommandBusBuilder:
        """Use a caller-owned registry, e.g. to add handlers after :meth:`build`."""
        if registry is None:
            raise InvalidArgumentError("registry")
        self._custom_registry = registry
        return self

    def build(self) -> SimpleCommandBus:
        if self._custom_registry is not None:
            registry = self._custom_registry
        elif self._concurrent:
            registry = new_concurrent_registry()
        else:
            registry = new_registry()
        for handler_type, instance in self._handlers.items():
            registry.register_handler(handler_type, instance)
        return SimpleCommandBus(RegistryCommandHandlerFinder(registry))


__all__ = ["CommandBusBuilder"]
