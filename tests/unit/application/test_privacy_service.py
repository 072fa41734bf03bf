"""Unit tests for PersonalDataExportService."""

from __future__ import annotations

from wcb_privacy.adapters.memory import InMemoryRecordStore, InMemoryUserDirectory
from wcb_privacy.application.privacy import (
    REIMBURSEMENT_POST_TYPE,
    VENDOR_PAYMENT_POST_TYPE,
    ExporterRegistration,
    ExportItem,
    ExportPageResult,
    PersonalDataExportService,
    PrivacyRegistry,
    build_privacy_registry,
)
from wcb_privacy.config import PrivacySettings
from wcb_privacy.kernel.types import Record, User

PAT = User(id=7, email="pat@example.com")


def _store() -> InMemoryRecordStore:
    store = InMemoryRecordStore()
    for i in range(1, 46):
        store.add(Record(id=i, post_type=REIMBURSEMENT_POST_TYPE, author_id=PAT.id, title=f"R{i}", date="2023-05-01"))
    store.add(
        Record(id=100, post_type=VENDOR_PAYMENT_POST_TYPE, author_id=PAT.id, title="Invoice", date="2023-01-01"),
        {"_camppayments_currency": ["USD"]},
    )
    return store


def _registry(**kwargs) -> PrivacyRegistry:
    store = _store()
    return build_privacy_registry(InMemoryUserDirectory([PAT]), store, store, **kwargs)


class TestPersonalDataExportService:
    def test_collects_every_page(self) -> None:
        report = PersonalDataExportService(_registry()).export("pat@example.com")
        assert report.ok
        assert len(report.items["wcb-reimbursements"]) == 45
        assert [i.item_id for i in report.items["wcb-vendor-payments"]] == ["wcp_payment_request-100"]
        assert len(report.all_items()) == 46

    def test_unknown_email(self) -> None:
        report = PersonalDataExportService(_registry()).export("nobody@example.com")
        assert report.ok
        assert report.all_items() == []
        assert set(report.items) == {"wcb-reimbursements", "wcb-vendor-payments"}

    def test_to_dict(self) -> None:
        report = PersonalDataExportService(_registry()).export("pat@example.com")
        payload = report.to_dict()
        assert payload["errors"] == {}
        assert payload["items"]["wcb-vendor-payments"][0]["data"][-1] == {"name": "Currency", "value": "USD"}

    def test_failing_exporter_does_not_stop_others(self) -> None:
        def _boom(email_address: str, page: int) -> ExportPageResult:
            raise RuntimeError("boom")

        store = _store()
        registry = build_privacy_registry(
            InMemoryUserDirectory([PAT]),
            store,
            store,
            exporters={"broken": ExporterRegistration("Broken", _boom)},
        )
        report = PersonalDataExportService(registry).export("pat@example.com")
        assert not report.ok
        assert report.errors == {"broken": "boom"}
        assert len(report.items["wcb-reimbursements"]) == 45

    def test_page_limit(self) -> None:
        calls: list[int] = []

        def _endless(email_address: str, page: int) -> ExportPageResult:
            calls.append(page)
            item = ExportItem(group_id="g", group_label="G", item_id=f"g-{page}")
            return ExportPageResult(data=(item,), done=False)

        registry = PrivacyRegistry(exporters={"endless": ExporterRegistration("Endless", _endless)}, erasers={})
        report = PersonalDataExportService(registry, settings=PrivacySettings(max_pages=3)).export("x@example.com")
        assert calls == [1, 2, 3]
        assert "endless" in report.errors
        assert "endless" not in report.items

    def test_pages_requested_in_order_until_done(self) -> None:
        calls: list[int] = []

        def _two_pages(email_address: str, page: int) -> ExportPageResult:
            calls.append(page)
            return ExportPageResult(data=(), done=page >= 2)

        registry = PrivacyRegistry(exporters={"two": ExporterRegistration("Two", _two_pages)}, erasers={})
        PersonalDataExportService(registry).export("x@example.com")
        assert calls == [1, 2]
