"""field-mapper - runtime object-to-object field mapping."""

from __future__ import annotations

from field_mapper.core.cache import ConcurrentCache
from field_mapper.core.coercion import TypeCoercer, number_to_string, standard_converters
from field_mapper.core.config import MapperConfig
from field_mapper.core.exceptions import (
    AssignmentError,
    ConfigurationError,
    FieldMapperError,
    InstantiationError,
    MappingError,
)
from field_mapper.core.naming import to_camel_case, to_underscore_name
from field_mapper.mapping.beans import get_property, set_property, to_dict
from field_mapper.mapping.diff import FieldDifference, diff
from field_mapper.mapping.engine import ObjectMapper, mapping, mapping_array, resolve_property
from field_mapper.mapping.plan import FieldMapping, MappingPlan
from field_mapper.mapping.property import PropertyDescriptor, PropertyResolver

__all__ = [
    # Engine
    "ObjectMapper",
    "mapping",
    "mapping_array",
    "MappingPlan",
    "FieldMapping",
    # Properties
    "PropertyResolver",
    "PropertyDescriptor",
    "resolve_property",
    "get_property",
    "set_property",
    "to_dict",
    # Diff
    "diff",
    "FieldDifference",
    # Coercion
    "TypeCoercer",
    "standard_converters",
    "number_to_string",
    # Naming
    "to_camel_case",
    "to_underscore_name",
    # Config and caching
    "MapperConfig",
    "ConcurrentCache",
    # Exceptions
    "FieldMapperError",
    "MappingError",
    "ConfigurationError",
    "InstantiationError",
    "AssignmentError",
]
