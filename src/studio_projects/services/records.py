"""Helpers for building and merging immutable records."""

from dataclasses import fields, replace
from typing import TypeVar

T = TypeVar("T")


def field_names(record_type: type) -> set[str]:
    """Return the dataclass field names of a record type."""
    return {item.name for item in fields(record_type)}


def check_fields(record_type: type, data: dict[str, object]) -> None:
    """Raise ValueError if the payload carries fields the record lacks."""
    unknown = set(data) - field_names(record_type)
    if unknown:
        names = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown {record_type.__name__} fields: {names}")


def merge(record: T, changes: dict[str, object], protected: set[str]) -> T:
    """Return a copy of the record with changes applied.

    Protected fields keep their current values.
    """
    check_fields(type(record), changes)
    allowed = {key: value for key, value in changes.items() if key not in protected}
    return replace(record, **allowed)
