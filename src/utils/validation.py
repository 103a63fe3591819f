"""Validation helpers for raw data-file records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def require_fields(record: Mapping[str, Any], required: set[str]) -> None:
    missing = required - set(record)
    if missing:
        raise ValueError(f"Missing required fields: {sorted(missing)}")


def scalar_text(value: Any, field_name: str) -> str:
    # Only explicitly tagged scalars (!!int, !!bool, ...) arrive here as non-str.
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"Field {field_name!r} must be a scalar, got {type(value).__name__}")
    return str(value)


def text_list(value: Any, field_name: str) -> list[str]:
    if not isinstance(value, list):
        raise ValueError(f"Field {field_name!r} must be a sequence, got {type(value).__name__}")
    return [scalar_text(item, field_name) for item in value]
