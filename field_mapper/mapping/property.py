"""Property resolution.

A property is a named, typed attribute of a class that can be read from (and
usually written to) an instance. Properties are discovered from:

1. Pydantic models -> ``model_fields``
2. dataclasses -> ``dataclasses.fields``
3. plain classes -> class annotations across the MRO, falling back to the
   keyword parameters of ``__init__`` when the class has no annotations, and
   then to the public attributes a default instance sets on itself

plus every public ``property`` descriptor along the MRO. Private names
(leading underscore) and ``ClassVar``s are never properties.

A property without a usable writer (read-only ``property``, frozen
dataclass or Pydantic model field) gets a setter method attached when the
class defines ``set_<name>`` or ``set<Name>`` taking a single value.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import sys
import typing
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

from field_mapper.core.cache import ConcurrentCache
from field_mapper.core.exceptions import AssignmentError
from field_mapper.mapping.protocol import Accessor

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class AttributeAccessor:
    """Plain attribute access via getattr/setattr."""

    name: str

    def get(self, obj: Any) -> Any:
        return getattr(obj, self.name)

    def set(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)


@dataclasses.dataclass(frozen=True)
class MethodAccessor:
    """Access through an unbound method: ``function(obj)`` / ``function(obj, value)``."""

    function: Callable[..., Any]

    def get(self, obj: Any) -> Any:
        return self.function(obj)

    def set(self, obj: Any, value: Any) -> None:
        self.function(obj, value)


@dataclasses.dataclass(frozen=True)
class PropertyDescriptor:
    """A resolved property of ``owner``. Immutable once cached."""

    name: str
    type: Any
    owner: type
    reader: Accessor
    writer: Accessor | None = None

    @property
    def writable(self) -> bool:
        return self.writer is not None


def _is_private(name: str) -> bool:
    return name.startswith("_")


def _is_class_var(annotation: Any) -> bool:
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _evaluate(annotation: Any, klass: type) -> Any:
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(klass.__module__)
    namespace = dict(vars(module)) if module is not None else {}
    namespace.update(vars(klass))
    try:
        return eval(annotation, namespace)  # noqa: S307
    except (NameError, SyntaxError, TypeError, AttributeError):
        return Any


def _type_hints(cls: type) -> dict[str, Any]:
    """Evaluated annotations of *cls* and its bases.

    An annotation that cannot be evaluated (a forward reference to a name
    that does not exist at runtime) degrades to ``Any`` on its own; the
    other annotations keep their types.
    """
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError, AttributeError, SyntaxError):
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            for name, annotation in inspect.get_annotations(klass).items():
                hints[name] = _evaluate(annotation, klass)
        return hints


def _return_type(function: Callable[..., Any] | None) -> Any:
    if function is None:
        return Any
    try:
        return typing.get_type_hints(function).get("return", Any)
    except (NameError, TypeError):
        return Any


def _init_parameters(cls: type) -> dict[str, Any]:
    """Keyword parameters of ``cls.__init__`` mapped to their annotations."""
    if cls.__init__ is object.__init__:
        return {}
    try:
        signature = inspect.signature(cls.__init__)
    except (ValueError, TypeError):
        return {}
    try:
        hints = typing.get_type_hints(cls.__init__)
    except (NameError, TypeError):
        hints = {}
    kinds = (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    return {
        name: hints.get(name, Any)
        for name, param in list(signature.parameters.items())[1:]
        if param.kind in kinds and not _is_private(name)
    }


def _instance_attributes(cls: type) -> dict[str, Any]:
    """Public attributes a default instance of *cls* sets on itself."""
    try:
        instance = cls()
        attributes = vars(instance)
    except Exception as e:
        logger.debug("Cannot enumerate attributes of %s: %s", cls.__name__, e)
        return {}
    return {
        name: Any if value is None else type(value)
        for name, value in attributes.items()
        if not _is_private(name)
    }


def _is_plain_class(cls: type) -> bool:
    return not issubclass(cls, BaseModel) and not dataclasses.is_dataclass(cls)


def _annotated_fields(cls: type) -> dict[str, Any]:
    return {
        name: annotation
        for name, annotation in _type_hints(cls).items()
        if not _is_private(name) and not _is_class_var(annotation)
    }


def _plain_fields(cls: type) -> dict[str, Any]:
    """Annotations, else ``__init__`` parameters, else default instance attributes."""
    return _annotated_fields(cls) or _init_parameters(cls) or _instance_attributes(cls)


def _find_setter_method(cls: type, name: str) -> MethodAccessor | None:
    """Look up ``set_<name>`` or ``set<Name>`` on *cls*, inherited methods included."""
    for method_name in (f"set_{name}", f"set{name[:1].upper()}{name[1:]}"):
        function = getattr(cls, method_name, None)
        if function is None or not callable(function):
            continue
        try:
            inspect.signature(function).bind(None, None)
        except (TypeError, ValueError):
            continue
        logger.debug("Writing %s.%s through %s()", cls.__name__, name, method_name)
        return MethodAccessor(function)
    return None


def _introspect(cls: type) -> dict[str, PropertyDescriptor]:
    """Discover every property of *cls*, in declaration order."""
    found: dict[str, tuple[Any, bool]] = {}  # name -> (type, writable as attribute)

    if isinstance(cls, type) and issubclass(cls, BaseModel):
        frozen = bool(cls.model_config.get("frozen", False))
        for name, info in cls.model_fields.items():
            found[name] = (info.annotation if info.annotation is not None else Any, not frozen)
    elif dataclasses.is_dataclass(cls):
        hints = _type_hints(cls)
        frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
        for f in dataclasses.fields(cls):
            found[f.name] = (hints.get(f.name, Any), not frozen)
    else:
        for name, annotation in _plain_fields(cls).items():
            found[name] = (annotation, True)

    for klass in reversed(cls.__mro__):
        # BaseModel's own properties (model_extra, ...) are framework state
        if klass is object or klass is BaseModel:
            continue
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and not _is_private(name):
                found[name] = (_return_type(attr.fget), attr.fset is not None)

    descriptors: dict[str, PropertyDescriptor] = {}
    for name, (annotation, writable) in found.items():
        accessor = AttributeAccessor(name)
        writer: Accessor | None = accessor if writable else _find_setter_method(cls, name)
        descriptors[name] = PropertyDescriptor(
            name=name, type=annotation, owner=cls, reader=accessor, writer=writer
        )
    return descriptors


def write_property(obj: Any, descriptor: PropertyDescriptor, value: Any) -> None:
    """Write *value* through the descriptor's writer.

    Raises:
        AssignmentError: If the property has no writer or the write fails.
    """
    type_name = type(obj).__name__
    if descriptor.writer is None:
        raise AssignmentError(type_name, descriptor.name, "property is read-only")
    try:
        descriptor.writer.set(obj, value)
    except Exception as e:
        raise AssignmentError(type_name, descriptor.name, str(e)) from e


class PropertyResolver:
    """Finds and caches the properties of arbitrary types.

    Resolution never raises for a missing property: ``resolve`` returns None
    and callers treat that as "skip this field".

    Args:
        cache: Descriptor cache keyed by ``(type, field name)``. A fresh cache
            is created when omitted.
    """

    def __init__(
        self,
        cache: ConcurrentCache[tuple[type, str], PropertyDescriptor] | None = None,
    ) -> None:
        self._descriptors = cache if cache is not None else ConcurrentCache()
        self._properties: ConcurrentCache[type, Mapping[str, PropertyDescriptor]] = (
            ConcurrentCache()
        )

    def properties(self, cls: type) -> Mapping[str, PropertyDescriptor]:
        """All properties of *cls*, inherited ones included (read-only view)."""
        return self._properties.get_or_compute(
            cls, lambda: MappingProxyType(_introspect(cls))
        )

    def resolve(self, cls: type, field_name: str) -> PropertyDescriptor | None:
        """Return the property of *cls* named exactly *field_name*, or None."""
        key = (cls, field_name)
        descriptor = self._descriptors.get(key)
        if descriptor is not None:
            return descriptor
        descriptor = self.properties(cls).get(field_name)
        if descriptor is None:
            return None
        return self._descriptors.put(key, descriptor)

    def field_names(self, cls: type) -> list[str]:
        """Names of all properties of *cls*, inherited ones included."""
        return list(self.properties(cls))

    def declared_field_names(self, cls: type) -> list[str]:
        """Names of the properties declared directly on *cls*, not inherited."""
        own = set(inspect.get_annotations(cls))
        own.update(name for name, attr in vars(cls).items() if isinstance(attr, property))
        # generated dataclass and pydantic __init__s repeat inherited fields
        if _is_plain_class(cls) and "__init__" in vars(cls) and not _annotated_fields(cls):
            own.update(_plain_fields(cls))
        return [name for name in self.properties(cls) if name in own]

    def get_value(self, obj: Any, name: str) -> Any:
        """Read property *name* from *obj*; mappings are read by key.

        Returns None when the property does not exist or is unset.
        """
        if isinstance(obj, Mapping):
            return obj.get(name)
        descriptor = self.resolve(type(obj), name)
        if descriptor is None:
            return None
        try:
            return descriptor.reader.get(obj)
        except AttributeError:
            return None

    def set_value(self, obj: Any, name: str, value: Any) -> None:
        """Write *value* to property *name* of *obj*, without coercion.

        Raises:
            AssignmentError: If *obj* has no writable property *name*.
        """
        descriptor = self.resolve(type(obj), name)
        if descriptor is None:
            raise AssignmentError(type(obj).__name__, name, "no such property")
        write_property(obj, descriptor, value)

    def clear(self) -> None:
        """Drop all cached descriptors."""
        self._descriptors.clear()
        self._properties.clear()
