"""Unit tests for testing helpers – fakes, fixtures and generated types."""

from __future__ import annotations

import pytest

from commandbus.application.cqrs import (
    Command,
    CommandHandler,
    CommandHandlerRegistry,
    CommandNameExtractor,
    command_name,
)
from commandbus.testing import RecordingCommandHandler, make_command_type, make_handler_type
from commandbus.testing.generators import GENERATED_MODULE


class TestRecordingCommandHandler:
    def test_records_and_returns_result(self) -> None:
        handler = RecordingCommandHandler(result=42)
        command = Command()
        assert handler.handle(command) == 42
        assert handler.handled == [command]
        assert handler.call_count == 1

    def test_default_result_is_none(self, recording_handler: RecordingCommandHandler) -> None:
        assert recording_handler.handle(Command()) is None

    def test_unmapped_by_default(self) -> None:
        assert CommandNameExtractor().extract_command_names_for(RecordingCommandHandler) == []


class TestGeneratedTypes:
    def test_command_types_are_unique(self) -> None:
        first, second = make_command_type(), make_command_type()
        assert first is not second
        assert command_name(first) != command_name(second)
        assert first.__module__ == GENERATED_MODULE
        assert issubclass(first, Command)

    def test_handler_type_is_mapped_to_commands(self) -> None:
        commands = [make_command_type(), make_command_type()]
        handler_type = make_handler_type(commands)
        assert issubclass(handler_type, CommandHandler)
        assert CommandNameExtractor().extract_command_names_for(handler_type) == [
            command_name(c) for c in commands
        ]

    def test_handler_type_without_commands(self) -> None:
        assert CommandNameExtractor().extract_command_names_for(make_handler_type([])) == []


class TestFixtures:
    def test_simple_registry(self, command_registry: CommandHandlerRegistry) -> None:
        assert command_registry.concurrent is False
        assert command_registry.is_registry_empty()

    def test_concurrent_registry(self, concurrent_command_registry: CommandHandlerRegistry) -> None:
        assert concurrent_command_registry.concurrent is True

    def test_any_registry_is_parametrised(self, any_command_registry: CommandHandlerRegistry) -> None:
        assert isinstance(any_command_registry, CommandHandlerRegistry)


@pytest.mark.parametrize("stem", ["Order", "Invoice"])
def test_stem_prefixes_generated_name(stem: str) -> None:
    assert make_command_type(stem).__name__.startswith(stem)
