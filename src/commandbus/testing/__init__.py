"""Testing support – handler fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["commandbus.testing.fixtures"]
"""

from commandbus.testing.fakes import RecordingCommandHandler
from commandbus.testing.generators import (
    command_type_strategy,
    handler_type_strategy,
    make_command_type,
    make_handler_type,
)

__all__ = [
    "RecordingCommandHandler",
    "command_type_strategy",
    "handler_type_strategy",
    "make_command_type",
    "make_handler_type",
]
