"""In-memory adapters for the user directory, record store and metadata store."""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from wcb_privacy.application.pagination import Filter, Page, PageRequest, SortDirection
from wcb_privacy.kernel.errors import ValidationError
from wcb_privacy.kernel.types import MetaBag, Record, User

__all__ = ["InMemoryRecordStore", "InMemoryUserDirectory"]


def _normalise_email(email: str) -> str:
    return email.strip().lower()


class InMemoryUserDirectory:
    """Email lookup over a fixed set of users (case-insensitive)."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._by_email: dict[str, User] = {}
        for user in users:
            self.add(user)

    def add(self, user: User) -> None:
        self._by_email[_normalise_email(user.email)] = user

    def get_user_by_email(self, email: str) -> User | None:
        if not email:
            return None
        return self._by_email.get(_normalise_email(email))


class InMemoryRecordStore:
    """Records plus their metadata bags; implements RecordStore and MetadataStore.

    Supported filter operators are ``=`` and ``in``.
    """

    _OPERATORS = frozenset({"=", "in"})

    def __init__(self) -> None:
        self._records: dict[int, Record] = {}
        self._meta: dict[int, dict[str, list[str]]] = {}

    def add(self, record: Record, meta: Mapping[str, Sequence[str]] | None = None) -> None:
        self._records[record.id] = record
        self._meta[record.id] = {k: list(v) for k, v in (meta or {}).items()}

    def set_meta(self, record_id: int, key: str, values: Sequence[str]) -> None:
        self._meta.setdefault(record_id, {})[key] = list(values)

    def find(self, request: PageRequest) -> Page[Record]:
        matches = [r for r in self._records.values() if self._matches(r, request.filters)]
        # Stable sorts applied last-to-first give a multi-key ordering.
        matches.sort(key=lambda r: r.id)
        for sort in reversed(request.sorts):
            matches.sort(
                key=lambda r, f=sort.field: getattr(r, f),
                reverse=sort.direction is SortDirection.DESC,
            )
        return Page.of(matches, request)

    def get_meta(self, record_id: int) -> MetaBag:
        return {k: tuple(v) for k, v in self._meta.get(record_id, {}).items()}

    def _matches(self, record: Record, filters: Sequence[Filter]) -> bool:
        for f in filters:
            if f.operator not in self._OPERATORS:
                raise ValidationError(
                    f"Unsupported filter operator: {f.operator!r}",
                    errors=[{"field": f.field, "operator": f.operator}],
                )
            actual: Any = getattr(record, f.field)
            if f.operator == "=" and actual != f.value:
                return False
            if f.operator == "in" and actual not in f.value:  # type: ignore[operator]
                return False
        return True
