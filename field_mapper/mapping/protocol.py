"""Introspection protocols.

The mapping engine talks to object state only through these interfaces:
an Accessor reads or writes one property of an instance, and a
PropertySource enumerates a type's properties and reads/writes them by name.
PropertyResolver is the reflection-based PropertySource.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from field_mapper.mapping.property import PropertyDescriptor


@runtime_checkable
class Accessor(Protocol):
    """Reads or writes one property of an instance."""

    def get(self, obj: Any) -> Any:
        """Read the property value from *obj*."""
        ...

    def set(self, obj: Any, value: Any) -> None:
        """Write *value* to the property on *obj*."""
        ...


@runtime_checkable
class PropertySource(Protocol):
    """Enumerates and accesses the properties of arbitrary types."""

    def properties(self, cls: type) -> Mapping[str, PropertyDescriptor]:
        """All readable properties of *cls*, inherited ones included."""
        ...

    def get_value(self, obj: Any, name: str) -> Any:
        """Read property *name* from *obj*, or None if it does not exist."""
        ...

    def set_value(self, obj: Any, name: str, value: Any) -> None:
        """Write *value* to property *name* of *obj*."""
        ...
