"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── RegistryError                (registry.py)
        ├── InvalidArgumentError
        ├── TypeMismatchError
        ├── HandlerNotFoundError
        └── RegistryConsistencyError
"""

from commandbus.kernel.errors.base import BaseError
from commandbus.kernel.errors.registry import (
    HandlerNotFoundError,
    InvalidArgumentError,
    RegistryConsistencyError,
    RegistryError,
    TypeMismatchError,
)

__all__ = [
    "BaseError",
    "HandlerNotFoundError",
    "InvalidArgumentError",
    "RegistryConsistencyError",
    "RegistryError",
    "TypeMismatchError",
]
