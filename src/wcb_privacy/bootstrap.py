"""Application startup: settings, logging and the privacy registry."""
from __future__ import annotations

from collections.abc import Mapping

from wcb_privacy.application.privacy import (
    EraserRegistration,
    ExporterRegistration,
    MetadataStore,
    PrivacyRegistry,
    RecordStore,
    UserDirectory,
    build_privacy_registry,
)
from wcb_privacy.config import EnvSettingsLoader, PrivacySettings, SettingsLoader
from wcb_privacy.observability.logging import JsonLoggerFactory

__all__ = ["bootstrap", "load_settings"]


def load_settings(loader: SettingsLoader | None = None) -> PrivacySettings:
    """Load :class:`PrivacySettings` from the environment unless *loader* is given."""
    return (loader or EnvSettingsLoader()).load(PrivacySettings)


def bootstrap(
    users: UserDirectory,
    records: RecordStore,
    metadata: MetadataStore,
    *,
    settings: PrivacySettings | None = None,
    exporters: Mapping[str, ExporterRegistration] | None = None,
    erasers: Mapping[str, EraserRegistration] | None = None,
    configure_logging: bool = True,
) -> PrivacyRegistry:
    """Load settings, configure JSON logging and build the registry."""
    settings = settings or load_settings()
    if configure_logging:
        JsonLoggerFactory.configure(level=settings.log_level_number)
    return build_privacy_registry(
        users,
        records,
        metadata,
        settings=settings,
        exporters=exporters,
        erasers=erasers,
    )
