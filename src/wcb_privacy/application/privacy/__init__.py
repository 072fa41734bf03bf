"""Application privacy – personal data export for budget records."""
from wcb_privacy.application.privacy.exporters import (
    REIMBURSEMENT_POST_TYPE,
    VENDOR_PAYMENT_POST_TYPE,
    RecordExporter,
    ReimbursementExporter,
    VendorPaymentExporter,
)
from wcb_privacy.application.privacy.mapping import (
    FIELD_SUFFIXES,
    REIMBURSEMENT_META_PREFIX,
    VENDOR_PAYMENT_META_PREFIX,
    meta_mapping,
)
from wcb_privacy.application.privacy.meta import extract_meta_details
from wcb_privacy.application.privacy.ports import MetadataStore, RecordStore, UserDirectory
from wcb_privacy.application.privacy.query import DEFAULT_PAGE_SIZE, build_page_request, query_records
from wcb_privacy.application.privacy.registry import (
    EraserRegistration,
    ExporterRegistration,
    PrivacyRegistry,
    build_privacy_registry,
    register_personal_data_erasers,
    register_personal_data_exporters,
)
from wcb_privacy.application.privacy.results import ExportField, ExportItem, ExportPageResult
from wcb_privacy.application.privacy.service import (
    ExportPageLimitError,
    ExportReport,
    PersonalDataExportService,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "EraserRegistration",
    "ExportField",
    "ExportItem",
    "ExportPageLimitError",
    "ExportPageResult",
    "ExportReport",
    "ExporterRegistration",
    "FIELD_SUFFIXES",
    "MetadataStore",
    "PersonalDataExportService",
    "PrivacyRegistry",
    "REIMBURSEMENT_META_PREFIX",
    "REIMBURSEMENT_POST_TYPE",
    "RecordExporter",
    "RecordStore",
    "ReimbursementExporter",
    "UserDirectory",
    "VENDOR_PAYMENT_META_PREFIX",
    "VENDOR_PAYMENT_POST_TYPE",
    "VendorPaymentExporter",
    "build_page_request",
    "build_privacy_registry",
    "extract_meta_details",
    "meta_mapping",
    "query_records",
    "register_personal_data_erasers",
    "register_personal_data_exporters",
]
