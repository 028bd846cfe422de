"""Testing fixtures – pytest fixtures for registries and handler doubles.

Enable in your ``conftest.py``::

    pytest_plugins = ["commandbus.testing.fixtures"]
"""
from commandbus.testing.fixtures.registry import (
    any_command_registry,
    command_registry,
    concurrent_command_registry,
    recording_handler,
)

__all__ = [
    "any_command_registry",
    "command_registry",
    "concurrent_command_registry",
    "recording_handler",
]
