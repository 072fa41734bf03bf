"""Unit tests for the in-memory user directory and record store."""

from __future__ import annotations

import pytest

from wcb_privacy.adapters.memory import InMemoryRecordStore, InMemoryUserDirectory
from wcb_privacy.application.pagination import Filter, PageRequest, Sort, SortDirection
from wcb_privacy.application.privacy import MetadataStore, RecordStore, UserDirectory, build_page_request
from wcb_privacy.kernel.errors import ValidationError
from wcb_privacy.kernel.types import Record, User


def _record(id: int, **kw) -> Record:
    kw.setdefault("post_type", "wcb_reimbursement_request")
    kw.setdefault("author_id", 1)
    kw.setdefault("title", f"R{id}")
    kw.setdefault("date", "2023-01-01")
    return Record(id=id, **kw)


class TestInMemoryUserDirectory:
    def test_satisfies_port(self) -> None:
        assert isinstance(InMemoryUserDirectory(), UserDirectory)

    def test_lookup(self) -> None:
        pat = User(id=1, email="Pat@Example.com")
        users = InMemoryUserDirectory([pat])
        assert users.get_user_by_email("pat@example.com") is pat
        assert users.get_user_by_email("nobody@example.com") is None

    def test_empty_email(self) -> None:
        assert InMemoryUserDirectory([User(id=1, email="a@b.co")]).get_user_by_email("") is None


class TestInMemoryRecordStore:
    def test_satisfies_ports(self) -> None:
        store = InMemoryRecordStore()
        assert isinstance(store, RecordStore)
        assert isinstance(store, MetadataStore)

    def test_equality_filter(self) -> None:
        store = InMemoryRecordStore()
        store.add(_record(1, author_id=1))
        store.add(_record(2, author_id=2))
        page = store.find(PageRequest(filters=(Filter("author_id", "=", 2),)))
        assert [r.id for r in page.items] == [2]
        assert page.total == 1

    def test_in_filter(self) -> None:
        store = InMemoryRecordStore()
        for i, status in enumerate(["draft", "paid", "trash"], start=1):
            store.add(_record(i, status=status))
        page = store.find(PageRequest(filters=(Filter("status", "in", ("draft", "paid")),)))
        assert [r.id for r in page.items] == [1, 2]

    def test_unknown_operator(self) -> None:
        store = InMemoryRecordStore()
        store.add(_record(1))
        with pytest.raises(ValidationError):
            store.find(PageRequest(filters=(Filter("id", ">", 0),)))

    def test_sort_descending_with_stable_ties(self) -> None:
        store = InMemoryRecordStore()
        store.add(_record(3, date="2023-01-01"))
        store.add(_record(1, date="2023-02-01"))
        store.add(_record(2, date="2023-01-01"))
        page = store.find(PageRequest(sorts=(Sort("date", SortDirection.DESC),)))
        assert [r.id for r in page.items] == [1, 2, 3]

    def test_total_counts_whole_result_set(self) -> None:
        store = InMemoryRecordStore()
        for i in range(1, 26):
            store.add(_record(i))
        page = store.find(build_page_request("wcb_reimbursement_request", 2, 1))
        assert len(page.items) == 5
        assert page.total == 25
        assert page.total_pages == 2

    def test_meta_roundtrip(self) -> None:
        store = InMemoryRecordStore()
        store.add(_record(1), {"_wcbrr_currency": ["EUR"]})
        store.set_meta(1, "_wcbrr_payment_method", ["Wire"])
        assert store.get_meta(1) == {"_wcbrr_currency": ("EUR",), "_wcbrr_payment_method": ("Wire",)}

    def test_meta_for_unknown_record(self) -> None:
        assert InMemoryRecordStore().get_meta(99) == {}

    def test_meta_is_a_copy(self) -> None:
        store = InMemoryRecordStore()
        meta = {"_wcbrr_currency": ["EUR"]}
        store.add(_record(1), meta)
        meta["_wcbrr_currency"].append("USD")
        assert store.get_meta(1)["_wcbrr_currency"] == ("EUR",)


class TestBuildPageRequest:
    def test_defaults(self) -> None:
        request = build_page_request("wcp_payment_request", 3, 7)
        assert request.page == 3
        assert request.size == 20
        assert Filter("post_type", "=", "wcp_payment_request") in request.filters
        assert Filter("author_id", "=", 7) in request.filters
        assert not any(f.field == "status" for f in request.filters)
        assert request.sorts == (Sort("date", SortDirection.DESC),)

    def test_explicit_status(self) -> None:
        request = build_page_request("wcp_payment_request", 1, 7, status="draft")
        assert Filter("status", "=", "draft") in request.filters
