"""Application pagination – page/sort/filter primitives."""
from wcb_privacy.application.pagination.page_request import Filter, PageRequest, Sort, SortDirection
from wcb_privacy.application.pagination.page import Page

__all__ = ["Filter", "Page", "PageRequest", "Sort", "SortDirection"]
