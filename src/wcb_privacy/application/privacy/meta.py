"""Application privacy – turn a record's metadata bag into export fields."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from wcb_privacy.application.privacy.mapping import meta_mapping
from wcb_privacy.application.privacy.results import ExportField

__all__ = ["extract_meta_details", "first_value"]


def first_value(values: Any) -> str | None:
    """Return the scalar stored at index 0 of a meta entry, or ``None``.

    Bare strings are not treated as sequences; ``None`` and ``""`` count as
    empty. ``"0"`` is a real value.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        return None
    if len(values) == 0:
        return None
    value = values[0]
    if value is None or value == "":
        return None
    return value


def extract_meta_details(meta: Mapping[str, Any], prefix: str) -> list[ExportField]:
    """Return the mapped fields present in *meta*, in mapping order.

    Absent keys and empty or malformed entries are skipped.
    """
    details: list[ExportField] = []
    for key, label in meta_mapping(prefix):
        value = first_value(meta.get(key))
        if value is not None:
            details.append(ExportField(name=label, value=value))
    return details
