"""Unit tests for kernel record types."""

from __future__ import annotations

import pytest

from wcb_privacy.kernel.types import Record, User


class TestRecord:
    def test_item_id_combines_type_and_id(self) -> None:
        record = Record(id=42, post_type="wcb_reimbursement_request", author_id=7, title="Travel", date="2023-05-01")
        assert record.item_id == "wcb_reimbursement_request-42"

    def test_item_ids_differ_for_distinct_records(self) -> None:
        a = Record(id=1, post_type="wcp_payment_request", author_id=7, title="A", date="2023-01-01")
        b = Record(id=2, post_type="wcp_payment_request", author_id=7, title="A", date="2023-01-01")
        assert a.item_id != b.item_id

    def test_is_frozen(self) -> None:
        record = Record(id=1, post_type="t", author_id=1, title="x", date="d")
        with pytest.raises((AttributeError, TypeError)):
            record.title = "y"  # type: ignore[misc]


class TestUser:
    def test_display_name_defaults_empty(self) -> None:
        assert User(id=3, email="pat@example.com").display_name == ""
