"""Application – pagination primitives and the privacy export use cases."""

from wcb_privacy.application.pagination import Filter, Page, PageRequest, Sort, SortDirection

__all__ = ["Filter", "Page", "PageRequest", "Sort", "SortDirection"]
