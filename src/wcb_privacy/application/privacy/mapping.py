"""Meta-key to label table shared by reimbursement and vendor payment records.

Both record types store their payment details under the same field suffixes;
only the key prefix differs. The order below is the order fields appear in an
export.
"""
from __future__ import annotations

from typing import Final

REIMBURSEMENT_META_PREFIX: Final = "_wcbrr_"
VENDOR_PAYMENT_META_PREFIX: Final = "_camppayments_"

_FIELDS: Final[tuple[tuple[str, str], ...]] = (
    ("name_of_payer", "Payer Name"),
    ("currency", "Currency"),
    ("payment_method", "Payment Method"),

    # Payment method: direct deposit
    ("ach_bank_name", "Bank Name"),
    ("ach_account_type", "Account Type"),
    ("ach_routing_number", "Routing Number"),
    ("ach_account_number", "Account Number"),
    ("ach_account_holder_name", "Account Holder Name"),

    # Payment method: check
    ("payable_to", "Payable To"),
    ("check_street_address", "Street Address"),
    ("check_city", "City"),
    ("check_state", "State / Province"),
    ("check_zip_code", "ZIP / Postal Code"),
    ("check_country", "Country"),

    # Payment method: wire
    ("bank_name", "Beneficiary’s Bank Name"),
    ("bank_street_address", "Beneficiary’s Bank Street Address"),
    ("bank_city", "Beneficiary’s Bank City"),
    ("bank_state", "Beneficiary’s Bank State / Province"),
    ("bank_zip_code", "Beneficiary’s Bank ZIP / Postal Code"),
    ("bank_country_iso3166", "Beneficiary’s Bank Country"),
    ("bank_bic", "Beneficiary’s Bank SWIFT BIC"),
    ("beneficiary_account_number", "Beneficiary’s Account Number or IBAN"),

    # Intermediary bank
    ("interm_bank_name", "Intermediary Bank Name"),
    ("interm_bank_street_address", "Intermediary Bank Street Address"),
    ("interm_bank_city", "Intermediary Bank City"),
    ("interm_bank_state", "Intermediary Bank State / Province"),
    ("interm_bank_zip_code", "Intermediary Bank ZIP / Postal Code"),
    ("interm_bank_country_iso3166", "Intermediary Bank Country"),
    ("interm_bank_swift", "Intermediary Bank SWIFT BIC"),
    ("interm_bank_account", "Intermediary Bank Account"),

    # Beneficiary
    ("beneficiary_name", "Beneficiary’s Name"),
    ("beneficiary_street_address", "Beneficiary’s Street Address"),
    ("beneficiary_city", "Beneficiary’s City"),
    ("beneficiary_state", "Beneficiary’s State / Province"),
    ("beneficiary_zip_code", "Beneficiary’s ZIP / Postal Code"),
    ("beneficiary_country_iso3166", "Beneficiary’s Country"),

    # Free text
    ("description", "Description"),
    ("general_notes", "Notes"),
)

FIELD_SUFFIXES: Final[tuple[str, ...]] = tuple(suffix for suffix, _ in _FIELDS)


def meta_mapping(prefix: str = "") -> tuple[tuple[str, str], ...]:
    """Return ``(meta_key, label)`` pairs for *prefix*, in export order."""
    return tuple((prefix + suffix, label) for suffix, label in _FIELDS)


__all__ = [
    "FIELD_SUFFIXES",
    "REIMBURSEMENT_META_PREFIX",
    "VENDOR_PAYMENT_META_PREFIX",
    "meta_mapping",
]
