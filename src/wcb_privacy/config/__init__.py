"""Config – 12-factor settings and loaders."""

from wcb_privacy.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PrivacySettings,
    Settings,
    SettingsLoader,
)
from wcb_privacy.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PrivacySettings",
    "Settings",
    "SettingsLoader",
]
