"""
commandbus – in-process command dispatch.

Import path convention::

    from commandbus.application.cqrs import Command, CommandHandler, command_mapping
    from commandbus.application.cqrs import CommandBusBuilder, CommandHandlerRegistry
    from commandbus.kernel.errors import HandlerNotFoundError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
