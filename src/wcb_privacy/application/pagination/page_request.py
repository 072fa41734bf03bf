"""Application pagination – PageRequest, Sort, SortDirection, Filter."""
from __future__ import annotations

import dataclasses
from enum import Enum

from wcb_privacy.kernel.errors import ValidationError

MAX_PAGE_SIZE = 1000


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclasses.dataclass(frozen=True)
class Sort:
    """Single sort criterion."""
    field: str
    direction: SortDirection = SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class Filter:
    """Key/value filter applied to a query."""
    field: str
    operator: str
    value: object


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters (pages are 1-based)."""
    page: int = 1
    size: int = 20
    sorts: tuple[Sort, ...] = ()
    filters: tuple[Filter, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError(
                "page must be >= 1",
                errors=[{"field": "page", "value": self.page}],
            )
        if self.size < 1 or self.size > MAX_PAGE_SIZE:
            raise ValidationError(
                f"size must be between 1 and {MAX_PAGE_SIZE}",
                errors=[{"field": "size", "value": self.size}],
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


__all__ = ["Filter", "MAX_PAGE_SIZE", "PageRequest", "Sort", "SortDirection"]
