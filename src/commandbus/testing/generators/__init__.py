"""Testing generators – dynamic command/handler types and Hypothesis strategies."""
from commandbus.testing.generators.strategies import (
    GENERATED_MODULE,
    command_type_strategy,
    handler_type_strategy,
    make_command_type,
    make_handler_type,
)

__all__ = [
    "GENERATED_MODULE",
    "command_type_strategy",
    "handler_type_strategy",
    "make_command_type",
    "make_handler_type",
]
