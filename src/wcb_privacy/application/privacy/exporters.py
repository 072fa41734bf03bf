"""Application privacy – personal data exporters for budget records.

Each exporter is a callable ``(email_address, page) -> ExportPageResult``.
Every benign failure (unknown email, no records, missing metadata) yields a
well-formed result; only faults raised by the stores propagate.
"""
from __future__ import annotations

from typing import Any, ClassVar, Final

from wcb_privacy.application.privacy.mapping import (
    REIMBURSEMENT_META_PREFIX,
    VENDOR_PAYMENT_META_PREFIX,
)
from wcb_privacy.application.privacy.meta import extract_meta_details
from wcb_privacy.application.privacy.ports import MetadataStore, RecordStore, UserDirectory
from wcb_privacy.application.privacy.query import DEFAULT_PAGE_SIZE, query_records
from wcb_privacy.application.privacy.results import ExportField, ExportItem, ExportPageResult
from wcb_privacy.kernel.types import MetaBag, Record
from wcb_privacy.observability.logging import get_logger

__all__ = [
    "REIMBURSEMENT_POST_TYPE",
    "RecordExporter",
    "ReimbursementExporter",
    "VENDOR_PAYMENT_POST_TYPE",
    "VendorPaymentExporter",
]

REIMBURSEMENT_POST_TYPE: Final = "wcb_reimbursement_request"
VENDOR_PAYMENT_POST_TYPE: Final = "wcp_payment_request"


class RecordExporter:
    """Exports the records of one post type authored by the requesting user.

    Subclasses only declare the class attributes below.
    """

    key: ClassVar[str]
    friendly_name: ClassVar[str]
    post_type: ClassVar[str]
    group_label: ClassVar[str]
    meta_prefix: ClassVar[str]

    def __init__(
        self,
        users: UserDirectory,
        records: RecordStore,
        metadata: MetadataStore,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        logger: Any = None,
    ) -> None:
        self._users = users
        self._records = records
        self._metadata = metadata
        self._page_size = page_size
        self._log = logger or get_logger(__name__, exporter=self.key)

    def __call__(self, email_address: str, page: int) -> ExportPageResult:
        user = self._users.get_user_by_email(email_address)
        if user is None or not user.id:
            self._log.debug("privacy.export.user_not_found", page=page)
            return ExportPageResult.empty()

        result_page = query_records(
            self._records,
            self.post_type,
            page,
            user.id,
            page_size=self._page_size,
        )
        if result_page is None:
            return ExportPageResult.empty()

        items: list[ExportItem] = []
        for record in result_page.items:
            if record.author_id != user.id:
                continue
            item = self.build_item(record, self._metadata.get_meta(record.id))
            if item.data:
                items.append(item)

        done = result_page.total_pages <= page
        self._log.debug(
            "privacy.export.page",
            page=page,
            user_id=user.id,
            items=len(items),
            total_pages=result_page.total_pages,
            done=done,
        )
        return ExportPageResult(data=tuple(items), done=done)

    def build_item(self, record: Record, meta: MetaBag) -> ExportItem:
        data = [
            ExportField(name="Title", value=record.title),
            ExportField(name="Date", value=record.date),
        ]
        data.extend(extract_meta_details(meta, self.meta_prefix))
        return ExportItem(
            group_id=self.post_type,
            group_label=self.group_label,
            item_id=record.item_id,
            data=tuple(data),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, page_size={self._page_size})"


class ReimbursementExporter(RecordExporter):
    key = "wcb-reimbursements"
    friendly_name = "WordCamp Reimbursement Requests"
    post_type = REIMBURSEMENT_POST_TYPE
    group_label = "WordCamp Reimbursement Request"
    meta_prefix = REIMBURSEMENT_META_PREFIX


class VendorPaymentExporter(RecordExporter):
    key = "wcb-vendor-payments"
    friendly_name = "WordCamp Vendor Payment Requests"
    post_type = VENDOR_PAYMENT_POST_TYPE
    group_label = "WordCamp Sponsor Invoices"
    meta_prefix = VENDOR_PAYMENT_META_PREFIX
