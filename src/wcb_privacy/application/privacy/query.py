"""Application privacy – fetch one page of a user's records of one type."""
from __future__ import annotations

from typing import Final

from wcb_privacy.application.pagination import Filter, Page, PageRequest, Sort, SortDirection
from wcb_privacy.application.privacy.ports import RecordStore
from wcb_privacy.kernel.types import Record

__all__ = ["ANY_STATUS", "DEFAULT_PAGE_SIZE", "build_page_request", "query_records"]

DEFAULT_PAGE_SIZE: Final = 20
ANY_STATUS: Final = "any"


def build_page_request(
    post_type: str,
    page: int,
    author_id: int,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    status: str = ANY_STATUS,
) -> PageRequest:
    """Build the request for *author_id*'s records of *post_type*, newest first."""
    filters = [
        Filter("post_type", "=", post_type),
        Filter("author_id", "=", author_id),
    ]
    if status != ANY_STATUS:
        filters.append(Filter("status", "=", status))
    return PageRequest(
        page=page,
        size=page_size,
        sorts=(Sort("date", SortDirection.DESC),),
        filters=tuple(filters),
    )


def query_records(
    store: RecordStore,
    post_type: str,
    page: int,
    author_id: int,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page[Record] | None:
    """Return page *page* of *author_id*'s records of *post_type* in any status."""
    request = build_page_request(post_type, page, author_id, page_size=page_size)
    return store.find(request)
