"""Application privacy – ports onto the host platform's stores."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from wcb_privacy.application.pagination import Page, PageRequest
from wcb_privacy.kernel.types import MetaBag, Record, User

__all__ = ["MetadataStore", "RecordStore", "UserDirectory"]


@runtime_checkable
class UserDirectory(Protocol):
    def get_user_by_email(self, email: str) -> User | None: ...


@runtime_checkable
class RecordStore(Protocol):
    """Document query engine.

    ``find`` applies every filter in *request*, sorts, and returns one page
    whose ``total`` counts the whole filtered result set.
    """

    def find(self, request: PageRequest) -> Page[Record]: ...


@runtime_checkable
class MetadataStore(Protocol):
    def get_meta(self, record_id: int) -> MetaBag: ...
