"""Kernel – framework-agnostic building blocks (errors, containers)."""

from commandbus.kernel.container import HeterogeneousContainer, TypedContainer
from commandbus.kernel.errors import (
    BaseError,
    HandlerNotFoundError,
    InvalidArgumentError,
    RegistryConsistencyError,
    RegistryError,
    TypeMismatchError,
)

__all__ = [
    "BaseError",
    "HandlerNotFoundError",
    "HeterogeneousContainer",
    "InvalidArgumentError",
    "RegistryConsistencyError",
    "RegistryError",
    "TypeMismatchError",
    "TypedContainer",
]
