"""Shared pytest configuration."""

pytest_plugins = ["commandbus.testing.fixtures"]
