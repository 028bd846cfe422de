"""Testing fakes – RecordingCommandHandler."""
from __future__ import annotations

from typing import Any

from commandbus.application.cqrs import Command, CommandHandler


class RecordingCommandHandler(CommandHandler[Command, Any]):
    """Handler double that records every command it receives.

    Unmapped by design: subclass and decorate it with
    :func:`~commandbus.application.cqrs.command_mapping` to route commands to it::

        @command_mapping(CreateOrder)
        class CreateOrderRecorder(RecordingCommandHandler): ...
    """

    def __init__(self, result: Any = None) -> None:
        self.result = result
        self.handled: list[Command] = []

    def handle(self, command: Command) -> Any:
        self.handled.append(command)
        return self.result

    @property
    def call_count(self) -> int:
        return len(self.handled)


__all__ = ["RecordingCommandHandler"]
