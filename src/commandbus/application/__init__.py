"""Application – command dispatch building blocks."""

from commandbus.application.cqrs import (
    Command,
    CommandBus,
    CommandBusBuilder,
    CommandHandler,
    CommandHandlerFinder,
    CommandHandlerRegistry,
    SimpleCommandBus,
    command_mapping,
)

__all__ = [
    "Command",
    "CommandBus",
    "CommandBusBuilder",
    "CommandHandler",
    "CommandHandlerFinder",
    "CommandHandlerRegistry",
    "SimpleCommandBus",
    "command_mapping",
]
