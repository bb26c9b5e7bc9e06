"""Field-level comparison of two instances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from field_mapper.mapping.beans import default_resolver
from field_mapper.mapping.property import PropertyResolver


@dataclass(frozen=True)
class FieldDifference:
    """One changed field: name plus stringified old and new values."""

    field_name: str
    old_value: str
    new_value: str


def diff(
    old: Any,
    new: Any,
    resolver: PropertyResolver | None = None,
) -> list[FieldDifference]:
    """Compare *new* against *old*, field by field.

    Only fields declared directly on ``type(new)`` are compared, in
    declaration order. A field that is None on *new* is never reported, since
    "unchanged" and "cleared" cannot be told apart. A None old value is
    recorded as an empty string.
    """
    resolver = resolver or default_resolver()
    differences: list[FieldDifference] = []
    for name in resolver.declared_field_names(type(new)):
        new_value = resolver.get_value(new, name)
        if new_value is None:
            continue
        old_value = resolver.get_value(old, name)
        if new_value != old_value:
            differences.append(
                FieldDifference(
                    field_name=name,
                    old_value="" if old_value is None else str(old_value),
                    new_value=str(new_value),
                )
            )
    return differences
