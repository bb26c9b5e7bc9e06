"""Mapping plan data classes.

Frozen dataclasses representing resolved source-to-destination field
correspondences. Built once per source shape and destination type, then
reused by ObjectMapper for every matching call.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


class FieldMapping:
    """Caller-supplied field renames (source name -> destination name).

    Explicit pairs take precedence over convention-based resolution. Do not
    mutate a FieldMapping after it has been used for a mapping: plans are
    cached by its contents at first use.

    Usage::

        FieldMapping().field("user_type", "kind").field("mail", "email")
    """

    def __init__(self, pairs: Mapping[str, str] | None = None) -> None:
        self._mapping: dict[str, str] = dict(pairs or {})

    def field(self, source_field: str, dest_field: str) -> FieldMapping:
        """Map *source_field* onto *dest_field*."""
        self._mapping[source_field] = dest_field
        return self

    def as_dict(self) -> dict[str, str]:
        return dict(self._mapping)

    def __contains__(self, source_field: object) -> bool:
        return source_field in self._mapping

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldMapping):
            return self._mapping == other._mapping
        return NotImplemented

    def __repr__(self) -> str:
        return f"FieldMapping({self._mapping!r})"


ExplicitMapping = FieldMapping | Mapping[str, str]


def explicit_pairs(explicit: ExplicitMapping | None) -> dict[str, str]:
    """Normalize a FieldMapping, plain dict, or None to a dict."""
    if explicit is None:
        return {}
    if isinstance(explicit, FieldMapping):
        return explicit.as_dict()
    return dict(explicit)


@dataclass(frozen=True)
class PlanKey:
    """Cache key for a mapping plan.

    ``shape`` is the source type for objects, or the frozenset of keys for
    mapping sources (a generic mapping has no fixed type). Explicit pairs are
    part of the key so different overrides never share a plan.
    """

    shape: Hashable
    dest_type: type
    explicit: frozenset[tuple[str, str]] = frozenset()

    @classmethod
    def for_source(
        cls, source: Any, dest_type: type, explicit: Mapping[str, str]
    ) -> PlanKey:
        shape: Hashable
        if isinstance(source, Mapping):
            shape = frozenset(source.keys())
        else:
            shape = type(source)
        return cls(shape=shape, dest_type=dest_type, explicit=frozenset(explicit.items()))


@dataclass(frozen=True)
class MappingPlan:
    """Resolved (source field -> destination field) pairs for one plan key."""

    dest_type: type
    pairs: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, str]:
        return dict(self.pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)
