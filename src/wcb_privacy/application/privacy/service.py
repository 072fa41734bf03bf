"""Application privacy – PersonalDataExportService.

Drives every registered exporter page by page, the way the host's personal
data export request does, and aggregates the results per exporter.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from wcb_privacy.application.privacy.registry import ExporterRegistration, PrivacyRegistry
from wcb_privacy.application.privacy.results import ExportItem
from wcb_privacy.config.settings import PrivacySettings
from wcb_privacy.kernel.errors import ApplicationError
from wcb_privacy.observability.logging import get_logger

__all__ = ["ExportPageLimitError", "ExportReport", "PersonalDataExportService"]


class ExportPageLimitError(ApplicationError):
    """An exporter kept reporting more pages than the driver allows."""

    default_code = "export_page_limit"

    def __init__(self, exporter_key: str, max_pages: int) -> None:
        super().__init__(
            f"Exporter '{exporter_key}' did not finish within {max_pages} pages",
            detail={"exporter": exporter_key, "max_pages": max_pages},
        )
        self.exporter_key = exporter_key
        self.max_pages = max_pages


@dataclass(frozen=True)
class ExportReport:
    items: Mapping[str, tuple[ExportItem, ...]] = field(default_factory=dict)
    errors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", MappingProxyType(dict(self.items)))
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    @property
    def ok(self) -> bool:
        return not self.errors

    def all_items(self) -> list[ExportItem]:
        """Every exported item, in registration order."""
        return [item for items in self.items.values() for item in items]

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": {key: [i.to_dict() for i in items] for key, items in self.items.items()},
            "errors": dict(self.errors),
        }


class PersonalDataExportService:
    """Collects one person's data from all registered exporters.

    A failing exporter is recorded in :attr:`ExportReport.errors` and does not
    stop the others.
    """

    def __init__(
        self,
        registry: PrivacyRegistry,
        *,
        settings: PrivacySettings | None = None,
    ) -> None:
        self._registry = registry
        self._max_pages = (settings or PrivacySettings()).max_pages
        self._log = get_logger(__name__)

    def export(self, email_address: str) -> ExportReport:
        items: dict[str, tuple[ExportItem, ...]] = {}
        errors: dict[str, str] = {}
        for key, registration in self._registry.exporters.items():
            try:
                items[key] = self._drain(key, registration, email_address)
            except Exception as exc:  # noqa: BLE001
                self._log.warning("privacy.export.failed", exporter=key, error=repr(exc))
                errors[key] = str(exc)
        return ExportReport(items=items, errors=errors)

    def _drain(
        self,
        key: str,
        registration: ExporterRegistration,
        email_address: str,
    ) -> tuple[ExportItem, ...]:
        collected: list[ExportItem] = []
        page = 1
        while True:
            if page > self._max_pages:
                raise ExportPageLimitError(key, self._max_pages)
            result = registration.callback(email_address, page)
            collected.extend(result.data)
            if result.done:
                self._log.debug("privacy.export.exporter_done", exporter=key, pages=page, items=len(collected))
                return tuple(collected)
            page += 1
