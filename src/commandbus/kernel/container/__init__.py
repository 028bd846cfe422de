"""Kernel container – type-safe heterogeneous store."""
from commandbus.kernel.container.heterogeneous import HeterogeneousContainer, TypedContainer

__all__ = ["HeterogeneousContainer", "TypedContainer"]
