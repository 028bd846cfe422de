"""Observability – structured logging helpers."""
from commandbus.observability.logging.factory import JsonLoggerFactory
from commandbus.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
