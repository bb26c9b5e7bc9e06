"""Property-level helpers for arbitrary objects.

Thin functions over PropertyResolver and TypeCoercer for callers that work
with one property at a time rather than whole mappings.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypeVar

from field_mapper.core.coercion import TypeCoercer
from field_mapper.core.exceptions import AssignmentError, InstantiationError
from field_mapper.mapping.property import PropertyResolver, write_property

T = TypeVar("T")

_BASIC_TYPES: frozenset[type] = frozenset({int, float, complex, bool, str, bytes, Decimal})

_default_resolver = PropertyResolver()


def default_resolver() -> PropertyResolver:
    """The process-wide resolver used when none is supplied."""
    return _default_resolver


def new_instance(cls: type[T]) -> T:
    """Construct *cls* with no arguments.

    Raises:
        InstantiationError: If *cls* cannot be constructed without arguments
            or its constructor raises.
    """
    try:
        return cls()
    except Exception as e:
        raise InstantiationError(getattr(cls, "__name__", repr(cls)), str(e)) from e


def is_basic_type(cls: type) -> bool:
    """Return True for scalar builtin value types."""
    return cls in _BASIC_TYPES


def field_names(cls: type, resolver: PropertyResolver | None = None) -> list[str]:
    """Names of all properties of *cls*, inherited ones included."""
    return (resolver or _default_resolver).field_names(cls)


def get_property(obj: Any, name: str, resolver: PropertyResolver | None = None) -> Any:
    """Read property *name* from *obj*, or None when it does not exist."""
    return (resolver or _default_resolver).get_value(obj, name)


def set_property(
    obj: Any,
    name: str,
    value: Any,
    coercer: TypeCoercer | None = None,
    resolver: PropertyResolver | None = None,
) -> None:
    """Coerce *value* to the declared type of property *name* and write it.

    Raises:
        AssignmentError: If *obj* has no writable property *name* or the
            write fails.
    """
    resolver = resolver or _default_resolver
    descriptor = resolver.resolve(type(obj), name)
    if descriptor is None:
        raise AssignmentError(type(obj).__name__, name, "no such property")
    if value is not None:
        value = (coercer or TypeCoercer()).coerce(value, descriptor.type)
    write_property(obj, descriptor, value)


def to_dict(obj: Any, resolver: PropertyResolver | None = None) -> dict[str, Any] | None:
    """Snapshot all properties of *obj* into a dict.

    Mappings are returned as a plain dict copy; None maps to None.
    """
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return dict(obj)
    resolver = resolver or _default_resolver
    return {name: resolver.get_value(obj, name) for name in resolver.field_names(type(obj))}
