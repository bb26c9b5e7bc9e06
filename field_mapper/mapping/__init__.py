"""Mapping layer - resolve properties and copy fields between objects."""

from __future__ import annotations

from field_mapper.mapping.beans import (
    field_names,
    get_property,
    is_basic_type,
    new_instance,
    set_property,
    to_dict,
)
from field_mapper.mapping.diff import FieldDifference, diff
from field_mapper.mapping.engine import ObjectMapper, mapping, mapping_array, resolve_property
from field_mapper.mapping.plan import FieldMapping, MappingPlan, PlanKey
from field_mapper.mapping.property import (
    AttributeAccessor,
    MethodAccessor,
    PropertyDescriptor,
    PropertyResolver,
)
from field_mapper.mapping.protocol import Accessor, PropertySource

__all__ = [
    "ObjectMapper",
    "PropertyResolver",
    "PropertyDescriptor",
    "AttributeAccessor",
    "MethodAccessor",
    "Accessor",
    "PropertySource",
    "MappingPlan",
    "PlanKey",
    "FieldMapping",
    "FieldDifference",
    "mapping",
    "mapping_array",
    "resolve_property",
    "diff",
    "field_names",
    "get_property",
    "set_property",
    "to_dict",
    "new_instance",
    "is_basic_type",
]
