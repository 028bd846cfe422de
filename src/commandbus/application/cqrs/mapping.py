"""Application CQRS – declarative handler → command mappings.

A handler class states which commands it executes with the
:func:`command_mapping` class decorator::

    @command_mapping(SumCommand)
    class SumCommandHandler(CommandHandler[SumCommand, int]):
        def handle(self, command: SumCommand) -> int:
            return command.first + command.second

    @command_mapping(CreateOrder, CancelOrder)
    class OrderHandler(CommandHandler[Command, None]): ...

The declaration lives on the class (not the instance) as either a single
:class:`CommandMapping` or a :class:`CommandMappings` group. Stacking the
decorator promotes the declaration to a group in top-to-bottom order.
Only a class's own declaration counts: subclasses must declare theirs.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, TypeVar, Union

from commandbus.application.cqrs.commands import Command, command_name
from commandbus.kernel.errors import InvalidArgumentError

H = TypeVar("H", bound=type)

MAPPING_ATTRIBUTE = "__command_mapping__"


@dataclasses.dataclass(frozen=True)
class CommandMapping:
    """Associates a handler class with one command type."""

    value: type[Command]

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError("value")
        if not isinstance(self.value, type) or not issubclass(self.value, Command):
            raise InvalidArgumentError("value", f"must be a Command subclass, got {self.value!r}")


@dataclasses.dataclass(frozen=True)
class CommandMappings:
    """An ordered group of :class:`CommandMapping` (duplicates allowed)."""

    value: tuple[CommandMapping, ...]


Declaration = Union[CommandMapping, CommandMappings]


def _own_mappings(cls: type) -> tuple[CommandMapping, ...]:
    declared = vars(cls).get(MAPPING_ATTRIBUTE)
    if declared is None:
        return ()
    if isinstance(declared, CommandMapping):
        return (declared,)
    if isinstance(declared, CommandMappings):
        return declared.value
    raise InvalidArgumentError(
        MAPPING_ATTRIBUTE, f"on {cls.__qualname__} must be a CommandMapping(s), got {declared!r}"
    )


def _declare(cls: Any, mappings: tuple[CommandMapping, ...]) -> None:
    if not isinstance(cls, type):
        raise InvalidArgumentError("handler_type", f"must be a class, got {cls!r}")
    combined = mappings + _own_mappings(cls)
    declaration: Declaration = combined[0] if len(combined) == 1 else CommandMappings(combined)
    setattr(cls, MAPPING_ATTRIBUTE, declaration)


def command_mapping(*command_types: type[Command]) -> Callable[[H], H]:
    """Class decorator declaring the command type(s) a handler executes."""
    if not command_types:
        raise InvalidArgumentError("command_types", "must name at least one command type")
    mappings = tuple(CommandMapping(command_type) for command_type in command_types)

    def decorator(cls: H) -> H:
        _declare(cls, mappings)
        return cls

    return decorator


def command_mappings(*mappings: CommandMapping) -> Callable[[H], H]:
    """Class decorator taking pre-built :class:`CommandMapping` records."""
    for mapping in mappings:
        if not isinstance(mapping, CommandMapping):
            raise InvalidArgumentError("mappings", f"must contain CommandMapping, got {mapping!r}")

    def decorator(cls: H) -> H:
        _declare(cls, tuple(mappings))
        return cls

    return decorator


class CommandMappingExtractor:
    """Reads the :class:`CommandMapping` records declared on a class."""

    def extract_mappings_from(self, given_class: type) -> list[CommandMapping]:
        if given_class is None:
            raise InvalidArgumentError("given_class")
        if not isinstance(given_class, type):
            raise InvalidArgumentError("given_class", f"must be a class, got {given_class!r}")
        return list(_own_mappings(given_class))


class CommandNameExtractor:
    """Turns a handler class's mappings into command names.

    A mapping to the :class:`Command` base itself is a placeholder that no
    concrete command can match, so it is skipped.
    """

    def __init__(self, mapping_extractor: CommandMappingExtractor | None = None) -> None:
        self._mapping_extractor = mapping_extractor or CommandMappingExtractor()

    def extract_command_names_for(self, given_class: type) -> list[str]:
        if given_class is None:
            raise InvalidArgumentError("given_class")
        return [
            command_name(mapping.value)
            for mapping in self._mapping_extractor.extract_mappings_from(given_class)
            if mapping.value is not Command
        ]


__all__ = [
    "CommandMapping",
    "CommandMappingExtractor",
    "CommandMappings",
    "CommandNameExtractor",
    "MAPPING_ATTRIBUTE",
    "command_mapping",
    "command_mappings",
]
