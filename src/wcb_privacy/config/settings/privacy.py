"""Config settings – PrivacySettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from wcb_privacy.config.settings.base import Settings
from wcb_privacy.config.validation import InvalidSettingValueError

_MAX_PAGE_SIZE = 1000


@dataclasses.dataclass
class PrivacySettings(Settings):
    """Tunables for the personal data exporters.

    Read from ``WCB_PRIVACY_PAGE_SIZE``, ``WCB_PRIVACY_MAX_PAGES`` and
    ``WCB_PRIVACY_LOG_LEVEL`` by :class:`EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "WCB_PRIVACY"

    page_size: int = 20
    max_pages: int = 1000
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not 1 <= self.page_size <= _MAX_PAGE_SIZE:
            raise InvalidSettingValueError(
                "page_size", self.page_size, f"must be between 1 and {_MAX_PAGE_SIZE}"
            )
        if self.max_pages < 1:
            raise InvalidSettingValueError("max_pages", self.max_pages, "must be >= 1")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["PrivacySettings"]
