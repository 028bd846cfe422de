"""Application CQRS – commands, handler registry, finder and bus."""
from commandbus.application.cqrs.commands import (
    Command,
    CommandBus,
    CommandHandler,
    SimpleCommandBus,
    command_name,
)
from commandbus.application.cqrs.mapping import (
    CommandMapping,
    CommandMappingExtractor,
    CommandMappings,
    CommandNameExtractor,
    command_mapping,
    command_mappings,
)
from commandbus.application.cqrs.registry import (
    CommandHandlerRegistry,
    new_concurrent_registry,
    new_registry,
)
from commandbus.application.cqrs.finder import CommandHandlerFinder, RegistryCommandHandlerFinder
from commandbus.application.cqrs.settings import CommandBusSettings
from commandbus.application.cqrs.builder import CommandBusBuilder

__all__ = [
    "Command",
    "CommandBus",
    "CommandBusBuilder",
    "CommandBusSettings",
    "CommandHandler",
    "CommandHandlerFinder",
    "CommandHandlerRegistry",
    "CommandMapping",
    "CommandMappingExtractor",
    "CommandMappings",
    "CommandNameExtractor",
    "RegistryCommandHandlerFinder",
    "SimpleCommandBus",
    "command_mapping",
    "command_mappings",
    "command_name",
    "new_concurrent_registry",
    "new_registry",
]
