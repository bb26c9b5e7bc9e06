"""Mapper configuration.

MapperConfig is a Pydantic model for type-safe mapper configuration.
It controls the converter registry installed by default and the text
parsing rules used during type coercion.
"""

from __future__ import annotations

from pydantic import BaseModel


class MapperConfig(BaseModel):
    """Configuration for ObjectMapper and TypeCoercer."""

    use_standard_converters: bool = True
    true_strings: frozenset[str] = frozenset({"true", "yes", "y", "on", "1"})
    false_strings: frozenset[str] = frozenset({"false", "no", "n", "off", "0", ""})
    datetime_formats: list[str] = ["%Y-%m-%d %H:%M:%S", "%Y/%m/%d %H:%M:%S", "%Y/%m/%d"]
    strip_strings: bool = True
