"""Application CQRS – CommandHandlerRegistry.

The registry owns two maps that must always agree:

* handler type → handler instance (a :class:`HeterogeneousContainer`)
* command name → handler type (the dispatch index)

Every index entry points at a type that holds an instance, and removing a
type removes the index entries that point at it. Registration stores the
instance first, so a rejected instance leaves both maps untouched.

A concurrent registry runs each operation under one re-entrant lock, so
readers never see the index and the container disagree. The default
registry skips locking and is meant for single-owner use.
"""
from __future__ import annotations

import contextlib
import threading
from typing import Any, Callable, ContextManager, TypeVar

from commandbus.application.cqrs.commands import CommandHandler
from commandbus.application.cqrs.mapping import CommandNameExtractor
from commandbus.kernel.container import HeterogeneousContainer, TypedContainer
from commandbus.kernel.errors import InvalidArgumentError, RegistryConsistencyError
from commandbus.observability.logging import get_logger

H = TypeVar("H", bound=CommandHandler)

logger = get_logger(__name__)


def _require_handler_type(handler_type: Any) -> None:
    if handler_type is None:
        raise InvalidArgumentError("handler_type")
    if not isinstance(handler_type, type) or not issubclass(handler_type, CommandHandler):
        raise InvalidArgumentError(
            "handler_type", f"must be a CommandHandler subclass, got {handler_type!r}"
        )


class CommandHandlerRegistry:
    """Stores one handler instance per handler type and resolves command names.

    Args:
        container_factory: Builds the container that holds the instances
            (:class:`TypedContainer` by default). The registry calls it once and
            keeps the only reference; it must return an empty container.
        concurrent: Guard every operation with a registry-wide lock.
        name_extractor: Derives command names from a handler class.
    """

    def __init__(
        self,
        container_factory: Callable[[], HeterogeneousContainer] = TypedContainer,
        *,
        concurrent: bool = False,
        name_extractor: CommandNameExtractor | None = None,
    ) -> None:
        if container_factory is None:
            raise InvalidArgumentError("container_factory")
        container = container_factory()
        if container is None:
            raise InvalidArgumentError("container_factory", "returned None")
        if not container.is_empty():
            raise InvalidArgumentError("container_factory", "must build an empty container")
        self._container = container
        self._command_name_to_type: dict[str, type[CommandHandler[Any, Any]]] = {}
        self._name_extractor = name_extractor or CommandNameExtractor()
        self._concurrent = concurrent
        self._lock: ContextManager[Any] = threading.RLock() if concurrent else contextlib.nullcontext()

    @property
    def concurrent(self) -> bool:
        return self._concurrent

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def register_handler(self, handler_type: type[H], instance: H) -> H:
        """Register *instance* as the handler for *handler_type*.

        Every command name declared on *handler_type* now resolves to it,
        taking over names another type claimed before. Re-registering a type
        replaces its instance.

        Raises:
            InvalidArgumentError: *handler_type* or *instance* is ``None``.
            TypeMismatchError: *instance* is not a *handler_type*.
        """
        _require_handler_type(handler_type)
        if instance is None:
            raise InvalidArgumentError("instance")
        names = self._name_extractor.extract_command_names_for(handler_type)
        with self._lock:
            self._container.put(handler_type, instance)
            for name in names:
                self._command_name_to_type[name] = handler_type
        logger.debug("handler_registered", handler=handler_type.__qualname__, commands=names)
        return instance

    def unregister_handler(self, handler_type: type[H]) -> H | None:
        """Remove *handler_type* and the command names that point at it.

        Returns the removed instance, or ``None`` if the type was not registered.
        """
        _require_handler_type(handler_type)
        names = self._name_extractor.extract_command_names_for(handler_type)
        with self._lock:
            for name in names:
                if self._command_name_to_type.get(name) is handler_type:
                    del self._command_name_to_type[name]
            removed = self._container.remove(handler_type)
        if removed is not None:
            logger.debug("handler_unregistered", handler=handler_type.__qualname__, commands=names)
        return removed

    def clear_registry(self) -> None:
        with self._lock:
            self._command_name_to_type.clear()
            self._container.clear()
        logger.debug("registry_cleared")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_handler(self, handler_type: type[H]) -> H | None:
        _require_handler_type(handler_type)
        with self._lock:
            return self._container.get(handler_type)

    def get_handler_for(self, command_name: str) -> CommandHandler[Any, Any] | None:
        """Return the handler serving *command_name*, or ``None`` if unclaimed.

        Raises:
            InvalidArgumentError: *command_name* is ``None``.
            RegistryConsistencyError: the name points at a type with no instance.
        """
        if command_name is None:
            raise InvalidArgumentError("command_name")
        with self._lock:
            handler_type = self._command_name_to_type.get(command_name)
            if handler_type is None:
                return None
            instance = self._container.get(handler_type)
            if instance is None:
                raise RegistryConsistencyError(command_name, handler_type)
            return instance

    def contains_handler(self, handler_type: type[CommandHandler[Any, Any]]) -> bool:
        _require_handler_type(handler_type)
        with self._lock:
            return self._container.contains(handler_type)

    def command_names(self) -> list[str]:
        """Snapshot of the command names currently resolvable."""
        with self._lock:
            return list(self._command_name_to_type)

    def is_registry_empty(self) -> bool:
        with self._lock:
            return self._container.is_empty()

    def registry_size(self) -> int:
        with self._lock:
            return self._container.size()

    def __len__(self) -> int:
        return self.registry_size()

    def __repr__(self) -> str:
        kind = "concurrent" if self._concurrent else "simple"
        return f"CommandHandlerRegistry({kind}, handlers={self.registry_size()})"


def new_registry() -> CommandHandlerRegistry:
    """Unsynchronised registry for single-owner use."""
    return CommandHandlerRegistry()


def new_concurrent_registry() -> CommandHandlerRegistry:
    """Registry whose operations are serialised by a registry-wide lock."""
    return CommandHandlerRegistry(concurrent=True)


__all__ = ["CommandHandlerRegistry", "new_concurrent_registry", "new_registry"]
