"""Config settings – 12-factor env-based configuration."""
from wcb_privacy.config.settings.base import Settings
from wcb_privacy.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from wcb_privacy.config.settings.privacy import PrivacySettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "PrivacySettings", "Settings", "SettingsLoader"]
