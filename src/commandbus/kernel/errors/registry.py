"""Registry errors — argument, type, lookup and consistency failures.

None of these are transient: they signal programmer or configuration
mistakes and are raised synchronously to the caller, never retried.
"""

from __future__ import annotations

from typing import Any

from commandbus.kernel.errors.base import BaseError


def _type_name(value: Any) -> str:
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    return repr(value)


class RegistryError(BaseError):
    """Base for every handler registry / dispatch failure."""

    default_code = "registry_error"


class InvalidArgumentError(RegistryError, ValueError):
    """A required argument is absent (``None``) or unusable."""

    default_code = "invalid_argument"

    def __init__(self, argument: str, reason: str = "must not be None", **kwargs: Any) -> None:
        super().__init__(f"{argument} {reason}", detail={"argument": argument}, **kwargs)
        self.argument = argument


class TypeMismatchError(RegistryError, TypeError):
    """A value supplied for a type key is not an instance of that type."""

    default_code = "type_mismatch"

    def __init__(self, expected: type, value: Any, **kwargs: Any) -> None:
        actual = type(value)
        super().__init__(
            f"Expected an instance of {_type_name(expected)}, got {_type_name(actual)}",
            detail={"expected": _type_name(expected), "actual": _type_name(actual)},
            **kwargs,
        )
        self.expected = expected
        self.actual = actual


class HandlerNotFoundError(RegistryError, LookupError):
    """No handler is registered for the requested command name."""

    default_code = "handler_not_found"

    def __init__(self, command_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"No handler registered for command '{command_name}'",
            detail={"command_name": command_name},
            **kwargs,
        )
        self.command_name = command_name


class RegistryConsistencyError(RegistryError):
    """A command name resolved to a handler type that holds no instance."""

    default_code = "registry_inconsistent"

    def __init__(self, command_name: str, handler_type: type, **kwargs: Any) -> None:
        super().__init__(
            f"Command '{command_name}' points at {_type_name(handler_type)}, "
            "which has no registered instance",
            detail={"command_name": command_name, "handler_type": _type_name(handler_type)},
            **kwargs,
        )
        self.command_name = command_name
        self.handler_type = handler_type


__all__ = [
    "HandlerNotFoundError",
    "InvalidArgumentError",
    "RegistryConsistencyError",
    "RegistryError",
    "TypeMismatchError",
]
