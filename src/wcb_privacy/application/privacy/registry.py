"""Application privacy – exporter/eraser registration.

:func:`build_privacy_registry` is the startup routine: it takes whatever the
host has registered so far, adds the budget-record exporters, and returns an
immutable :class:`PrivacyRegistry` for the export driver.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from wcb_privacy.application.privacy.exporters import (
    RecordExporter,
    ReimbursementExporter,
    VendorPaymentExporter,
)
from wcb_privacy.application.privacy.ports import MetadataStore, RecordStore, UserDirectory
from wcb_privacy.application.privacy.results import ExportPageResult
from wcb_privacy.config.settings import PrivacySettings
from wcb_privacy.observability.logging import get_logger

__all__ = [
    "EXPORTER_CLASSES",
    "EraserRegistration",
    "ExportCallback",
    "ExporterRegistration",
    "PrivacyRegistry",
    "build_privacy_registry",
    "register_personal_data_erasers",
    "register_personal_data_exporters",
]

ExportCallback = Callable[[str, int], ExportPageResult]

EXPORTER_CLASSES: tuple[type[RecordExporter], ...] = (
    ReimbursementExporter,
    VendorPaymentExporter,
)

_log = get_logger(__name__)


@dataclass(frozen=True)
class ExporterRegistration:
    friendly_name: str
    callback: ExportCallback

    def to_dict(self) -> dict[str, Any]:
        return {"exporter_friendly_name": self.friendly_name, "callback": self.callback}


@dataclass(frozen=True)
class EraserRegistration:
    friendly_name: str
    callback: Callable[[str, int], Any]

    def to_dict(self) -> dict[str, Any]:
        return {"eraser_friendly_name": self.friendly_name, "callback": self.callback}


@dataclass(frozen=True)
class PrivacyRegistry:
    """Read-only view of every registered exporter and eraser, keyed by slug."""

    exporters: Mapping[str, ExporterRegistration]
    erasers: Mapping[str, EraserRegistration]

    def __post_init__(self) -> None:
        object.__setattr__(self, "exporters", MappingProxyType(dict(self.exporters)))
        object.__setattr__(self, "erasers", MappingProxyType(dict(self.erasers)))

    def exporter(self, key: str) -> ExporterRegistration:
        return self.exporters[key]


def register_personal_data_erasers(
    erasers: Mapping[str, EraserRegistration],
) -> Mapping[str, EraserRegistration]:
    """Contribute no eraser for budget records.

    Reimbursement and vendor payment requests are kept for accounting and
    reference purposes, so they are never erased on a privacy request. The
    host's erasers are returned unchanged.
    """
    return erasers


def register_personal_data_exporters(
    exporters: Mapping[str, ExporterRegistration],
    users: UserDirectory,
    records: RecordStore,
    metadata: MetadataStore,
    *,
    page_size: int | None = None,
) -> dict[str, ExporterRegistration]:
    """Return *exporters* plus the reimbursement and vendor payment exporters."""
    kwargs: dict[str, Any] = {}
    if page_size is not None:
        kwargs["page_size"] = page_size

    merged = dict(exporters)
    for exporter_cls in EXPORTER_CLASSES:
        exporter = exporter_cls(users, records, metadata, **kwargs)
        merged[exporter_cls.key] = ExporterRegistration(
            friendly_name=exporter_cls.friendly_name,
            callback=exporter,
        )
    return merged


def build_privacy_registry(
    users: UserDirectory,
    records: RecordStore,
    metadata: MetadataStore,
    *,
    settings: PrivacySettings | None = None,
    exporters: Mapping[str, ExporterRegistration] | None = None,
    erasers: Mapping[str, EraserRegistration] | None = None,
) -> PrivacyRegistry:
    """Wire the budget-record exporters into a fresh registry."""
    settings = settings or PrivacySettings()
    registry = PrivacyRegistry(
        exporters=register_personal_data_exporters(
            exporters or {},
            users,
            records,
            metadata,
            page_size=settings.page_size,
        ),
        erasers=register_personal_data_erasers(erasers or {}),
    )
    _log.info(
        "privacy.registry.built",
        exporters=sorted(registry.exporters),
        erasers=sorted(registry.erasers),
        page_size=settings.page_size,
    )
    return registry
