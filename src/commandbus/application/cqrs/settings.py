"""Application CQRS – CommandBusSettings (``COMMANDBUS_*`` environment)."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from commandbus.config.settings import Settings
from commandbus.config.validation import InvalidSettingValueError

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class CommandBusSettings(Settings):
    """Assembly options for :class:`~commandbus.application.cqrs.CommandBusBuilder`.

    ``COMMANDBUS_CONCURRENT=true`` selects the lock-guarded registry.
    """

    _prefix: ClassVar[str] = "COMMANDBUS"

    concurrent: bool = False
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVEL_NAMES:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LEVEL_NAMES)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["CommandBusSettings"]
