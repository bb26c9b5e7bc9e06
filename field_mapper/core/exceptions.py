"""field-mapper exception hierarchy.

All exceptions are field-mapper-specific. Errors raised by destination
constructors or setters are chained, never exposed bare to callers.
A property that cannot be found is not an error: resolution returns None.
"""

from __future__ import annotations


class FieldMapperError(Exception):
    """Base exception for all field-mapper errors."""


# --- Mapping ---


class MappingError(FieldMapperError):
    """Base for mapping errors."""


class ConfigurationError(MappingError):
    """Raised when a mapping is requested into a disallowed destination type."""

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        super().__init__(f"Cannot map into {type_name}: {detail}")


class InstantiationError(MappingError):
    """Raised when a destination type cannot be constructed without arguments."""

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        super().__init__(f"Cannot instantiate {type_name}: {detail}")


class AssignmentError(MappingError):
    """Raised when a value cannot be written to a destination property."""

    def __init__(self, type_name: str, field_name: str, detail: str) -> None:
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"Cannot assign {type_name}.{field_name}: {detail}")
