"""Arithmetic / printing demo – ``python -m commandbus.demo``."""
from __future__ import annotations

import dataclasses
import sys
from typing import TextIO

from commandbus.application.cqrs import (
    Command,
    CommandBus,
    CommandBusBuilder,
    CommandBusSettings,
    CommandHandler,
    command_mapping,
)
from commandbus.config import EnvSettingsLoader
from commandbus.observability.logging import JsonLoggerFactory


@dataclasses.dataclass(frozen=True)
class SumCommand(Command):
    first: int
    second: int


@dataclasses.dataclass(frozen=True)
class PrintLineCommand(Command):
    message: str


@command_mapping(SumCommand)
class SumCommandHandler(CommandHandler[SumCommand, int]):
    def handle(self, command: SumCommand) -> int:
        return command.first + command.second


@command_mapping(PrintLineCommand)
class PrintLineCommandHandler(CommandHandler[PrintLineCommand, bool]):
    """Writes the message to *stream* (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def handle(self, command: PrintLineCommand) -> bool:
        stream = self._stream or sys.stdout
        stream.write(command.message + "\n")
        return True


def build_bus(settings: CommandBusSettings | None = None, stream: TextIO | None = None) -> CommandBus:
    builder = CommandBusBuilder.from_settings(settings or CommandBusSettings())
    return (
        builder
        .register_handler(SumCommandHandler, SumCommandHandler())
        .register_handler(PrintLineCommandHandler, PrintLineCommandHandler(stream))
        .build()
    )


def main(first: int = 15, second: int = 5, stream: TextIO | None = None) -> int:
    settings = EnvSettingsLoader().load(CommandBusSettings)
    JsonLoggerFactory.configure(settings.log_level_number)
    bus = build_bus(settings, stream)
    result = bus.execute(SumCommand(first, second))
    bus.execute(PrintLineCommand(f"Result of {first} + {second} is {result}"))
    return result


if __name__ == "__main__":
    main()
