"""Application privacy – ExportField, ExportItem, ExportPageResult."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["ExportField", "ExportItem", "ExportPageResult"]


@dataclass(frozen=True)
class ExportField:
    name: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class ExportItem:
    """One record rendered for a personal data export."""

    group_id: str
    group_label: str
    item_id: str
    data: tuple[ExportField, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "group_id": self.group_id,
            "group_label": self.group_label,
            "item_id": self.item_id,
            "data": [f.to_dict() for f in self.data],
        }


@dataclass(frozen=True)
class ExportPageResult:
    """What an exporter returns for one page: the items and whether to stop."""

    data: tuple[ExportItem, ...] = field(default_factory=tuple)
    done: bool = True

    @classmethod
    def empty(cls) -> "ExportPageResult":
        """Nothing to export; the caller should not ask for another page."""
        return cls(data=(), done=True)

    def to_dict(self) -> dict[str, Any]:
        return {"data": [item.to_dict() for item in self.data], "done": self.done}
