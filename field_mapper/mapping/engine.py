"""Object mapping engine.

ObjectMapper builds (or fetches from cache) a MappingPlan for the source
shape and destination type, instantiates the destination with no arguments,
and copies every non-None source value across, coercing it to the declared
type of the destination property.

Source fields with no destination counterpart are dropped silently: a
mapping is a best-effort merge, not a strict schema match.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from field_mapper.core.cache import ConcurrentCache
from field_mapper.core.coercion import TypeCoercer
from field_mapper.core.config import MapperConfig
from field_mapper.core.exceptions import AssignmentError, ConfigurationError
from field_mapper.core.naming import candidate_names
from field_mapper.mapping.beans import default_resolver, new_instance
from field_mapper.mapping.plan import (
    ExplicitMapping,
    MappingPlan,
    PlanKey,
    explicit_pairs,
)
from field_mapper.mapping.property import (
    PropertyDescriptor,
    PropertyResolver,
    write_property,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_destination(dest_type: Any) -> None:
    """Reject destinations that cannot hold mapped properties."""
    origin = typing.get_origin(dest_type) or dest_type
    if not isinstance(origin, type):
        raise ConfigurationError(repr(dest_type), "destination must be a class")
    if issubclass(origin, Mapping):
        raise ConfigurationError(
            getattr(origin, "__name__", repr(dest_type)),
            "destination must not be a mapping type",
        )


class ObjectMapper:
    """Maps objects and string-keyed mappings onto destination classes.

    Args:
        resolver: Property resolver. A fresh one is created when omitted.
        coercer: Type coercer. Built from *config* when omitted.
        plan_cache: Plan cache keyed by PlanKey. A fresh one is created
            when omitted.
        config: Mapper configuration.
    """

    def __init__(
        self,
        resolver: PropertyResolver | None = None,
        coercer: TypeCoercer | None = None,
        plan_cache: ConcurrentCache[PlanKey, MappingPlan] | None = None,
        config: MapperConfig | None = None,
    ) -> None:
        self._config = config or MapperConfig()
        self._resolver = resolver if resolver is not None else PropertyResolver()
        self._coercer = coercer if coercer is not None else TypeCoercer(config=self._config)
        self._plans = plan_cache if plan_cache is not None else ConcurrentCache()

    @property
    def resolver(self) -> PropertyResolver:
        return self._resolver

    @property
    def coercer(self) -> TypeCoercer:
        return self._coercer

    def mapping(
        self,
        source: Any,
        dest_type: type[T] | None,
        explicit: ExplicitMapping | None = None,
    ) -> T | None:
        """Map *source* onto a new instance of *dest_type*.

        Args:
            source: Any object, or a string-keyed mapping.
            dest_type: Destination class; must be constructible without arguments.
            explicit: Field renames applied before convention-based matching.

        Returns:
            The populated destination instance, or None when *source* or
            *dest_type* is None.

        Raises:
            ConfigurationError: If *dest_type* is a mapping type.
            InstantiationError: If *dest_type* cannot be constructed.
            AssignmentError: If a planned destination property cannot be written.
        """
        if source is None or dest_type is None:
            return None
        _check_destination(dest_type)

        plan = self.plan_for(source, dest_type, explicit)
        dest = new_instance(dest_type)
        for source_name, dest_name in plan:
            value = self._resolver.get_value(source, source_name)
            # None never overwrites a destination default
            if value is None:
                continue
            descriptor = self._resolver.resolve(dest_type, dest_name)
            if descriptor is None:
                raise AssignmentError(dest_type.__name__, dest_name, "no such property")
            write_property(dest, descriptor, self._coercer.coerce(value, descriptor.type))
        return dest

    def mapping_array(self, sources: Iterable[Any], dest_type: type[T]) -> list[T | None]:
        """Map every element of *sources*, preserving order.

        The first failure aborts the whole batch.
        """
        return [self.mapping(source, dest_type) for source in sources]

    def plan_for(
        self,
        source: Any,
        dest_type: type,
        explicit: ExplicitMapping | None = None,
    ) -> MappingPlan:
        """Return the cached plan for this source shape and destination, building it on a miss."""
        pairs = explicit_pairs(explicit)
        key = PlanKey.for_source(source, dest_type, pairs)
        plan = self._plans.get(key)
        if plan is not None:
            return plan
        return self._plans.put(key, self._build_plan(source, dest_type, pairs))

    def _build_plan(
        self, source: Any, dest_type: type, explicit: dict[str, str]
    ) -> MappingPlan:
        if isinstance(source, Mapping):
            names = [name for name in source.keys() if isinstance(name, str)]
        else:
            names = self._resolver.field_names(type(source))

        resolved: dict[str, str] = {}
        for name in names:
            if name in explicit:
                continue
            for candidate in candidate_names(name):
                descriptor = self._resolver.resolve(dest_type, candidate)
                # computed read-only properties are not mapping targets
                if descriptor is not None and descriptor.writable:
                    resolved[name] = descriptor.name
                    break
            else:
                logger.debug(
                    "No counterpart for '%s' on %s, dropping it", name, dest_type.__name__
                )
        resolved.update(explicit)

        logger.debug(
            "Built mapping plan %s -> %s with %d fields",
            type(source).__name__,
            dest_type.__name__,
            len(resolved),
        )
        return MappingPlan(dest_type=dest_type, pairs=tuple(resolved.items()))

    def clear_caches(self) -> None:
        """Drop all cached plans and property descriptors."""
        self._plans.clear()
        self._resolver.clear()


_default_mapper = ObjectMapper(resolver=default_resolver())


def default_mapper() -> ObjectMapper:
    """The process-wide mapper behind the module-level functions."""
    return _default_mapper


def mapping(
    source: Any,
    dest_type: type[T] | None,
    explicit: ExplicitMapping | None = None,
) -> T | None:
    """Map *source* onto a new *dest_type* instance with the default mapper."""
    return _default_mapper.mapping(source, dest_type, explicit)


def mapping_array(sources: Iterable[Any], dest_type: type[T]) -> list[T | None]:
    """Map every element of *sources* with the default mapper."""
    return _default_mapper.mapping_array(sources, dest_type)


def resolve_property(cls: type, field_name: str) -> PropertyDescriptor | None:
    """Resolve a property of *cls* with the default resolver."""
    return _default_mapper.resolver.resolve(cls, field_name)
