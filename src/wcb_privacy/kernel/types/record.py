"""Read-only views of the host platform's users and budget records."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import TypeAlias

MetaBag: TypeAlias = Mapping[str, Sequence[str]]
"""Per-record metadata; a scalar field's effective value lives at index 0."""


@dataclasses.dataclass(frozen=True, slots=True)
class User:
    """Account resolved from an email address."""

    id: int
    email: str
    display_name: str = ""


@dataclasses.dataclass(frozen=True, slots=True)
class Record:
    """A budget document: reimbursement request or vendor payment request.

    ``date`` is kept as the host's formatted string so that it is exported
    verbatim.
    """

    id: int
    post_type: str
    author_id: int
    title: str
    date: str
    status: str = "draft"

    @property
    def item_id(self) -> str:
        """Stable export identifier, unique per record."""
        return f"{self.post_type}-{self.id}"


__all__ = ["MetaBag", "Record", "User"]
