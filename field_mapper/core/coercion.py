"""Type coercion applied when a value is written to a destination property.

Coercion is best-effort and never raises:

1. value already of the target type -> returned unchanged
2. converter registered for the target type -> converter(value)
3. textual value -> validated into the target type by Pydantic (lax mode)
4. anything else -> returned unchanged, any incompatibility surfaces on write
"""

from __future__ import annotations

import logging
import types
import typing
from collections.abc import Callable
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from field_mapper.core.cache import ConcurrentCache
from field_mapper.core.config import MapperConfig

logger = logging.getLogger(__name__)

Converter = Callable[[Any], Any]

# One validator per target type, shared by every coercer
_adapters: ConcurrentCache[Any, TypeAdapter[Any]] = ConcurrentCache()


def _adapter(target: Any) -> TypeAdapter[Any]:
    return _adapters.get_or_compute(target, lambda: TypeAdapter(target))


def number_to_string(number: Any) -> str:
    """Render a number in plain notation, never in exponent form.

    ``3.0 -> "3.0"``, ``1e-07 -> "0.0000001"``, ``Decimal("1E+3") -> "1000"``.
    """
    if isinstance(number, float):
        if number != number or number in (float("inf"), float("-inf")):
            return str(number)
        # repr gives the shortest round-tripping digits
        return format(Decimal(repr(number)), "f")
    if isinstance(number, Decimal):
        if not number.is_finite():
            return str(number)
        return format(number, "f")
    return str(number)


def _to_text(value: Any) -> str:
    if isinstance(value, (float, Decimal)):
        return number_to_string(value)
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _validator(target: type) -> Converter:
    def convert(value: Any) -> Any:
        return _adapter(target).validate_python(value)

    return convert


def _parse_formats(text: str, formats: list[str]) -> datetime:
    for pattern in formats:
        try:
            return datetime.strptime(text, pattern)
        except ValueError:
            continue
    raise ValueError(f"not a date/time: {text!r}")


def _bool_converter(config: MapperConfig) -> Converter:
    """Booleans from the configured true/false words."""

    def convert(value: Any) -> bool:
        if isinstance(value, str):
            lowered = value.lower()
            if lowered in config.true_strings:
                return True
            if lowered in config.false_strings:
                return False
            raise ValueError(f"not a boolean: {value!r}")
        return _adapter(bool).validate_python(value)

    return convert


def _datetime_converter(config: MapperConfig) -> Converter:
    """ISO 8601 via Pydantic, then the configured strptime patterns."""

    def convert(value: Any) -> datetime:
        try:
            return _adapter(datetime).validate_python(value)
        except ValidationError:
            if not isinstance(value, str):
                raise
        return _parse_formats(value, config.datetime_formats)

    return convert


def _date_converter(config: MapperConfig) -> Converter:
    to_datetime = _datetime_converter(config)

    def convert(value: Any) -> date:
        try:
            return _adapter(date).validate_python(value)
        except ValidationError:
            if not isinstance(value, str):
                raise
        return to_datetime(value).date()

    return convert


def standard_converters(config: MapperConfig | None = None) -> dict[type, Converter]:
    """The converter registry installed by default."""
    config = config or MapperConfig()
    return {
        str: _to_text,
        int: _validator(int),
        float: _validator(float),
        Decimal: _validator(Decimal),
        bool: _bool_converter(config),
        datetime: _datetime_converter(config),
        date: _date_converter(config),
    }


def _unwrap_optional(target: Any) -> Any:
    """Reduce ``Optional[X]`` and ``X | None`` to ``X``; other unions to None."""
    origin = typing.get_origin(target)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(target) if arg is not type(None)]
        return args[0] if len(args) == 1 else None
    return target


class TypeCoercer:
    """Converts values to the declared type of a destination property.

    Args:
        converters: Converter registry keyed by target type. Defaults to
            ``standard_converters(config)`` unless the config disables them.
        config: Boolean words, datetime patterns and whitespace handling.
    """

    def __init__(
        self,
        converters: dict[type, Converter] | None = None,
        config: MapperConfig | None = None,
    ) -> None:
        self._config = config or MapperConfig()
        if converters is not None:
            self._converters = dict(converters)
        elif self._config.use_standard_converters:
            self._converters = standard_converters(self._config)
        else:
            self._converters = {}

    @property
    def config(self) -> MapperConfig:
        return self._config

    def register(self, target: type, converter: Converter) -> None:
        """Register (or replace) the converter for *target*."""
        self._converters[target] = converter

    def unregister(self, target: type) -> None:
        self._converters.pop(target, None)

    def lookup(self, target: type) -> Converter | None:
        return self._converters.get(target)

    def coerce(self, value: Any, target: Any) -> Any:
        """Coerce *value* to *target*, returning it unchanged when that is not possible."""
        target = _unwrap_optional(target)
        if target is Any or target is object or not isinstance(target, type):
            return value
        if type(value) is target:
            return value

        candidate = value
        if isinstance(value, str) and self._config.strip_strings:
            candidate = value.strip()
        converter = self._converters.get(target)
        try:
            if converter is not None:
                return converter(candidate)
            if isinstance(candidate, str):
                return self.parse_text(candidate, target)
        except (ValueError, TypeError, ArithmeticError) as e:
            # pydantic's ValidationError is a ValueError
            logger.debug(
                "Could not coerce %r to %s, passing it through: %s",
                value,
                target.__name__,
                e,
            )
        return value

    def parse_text(self, text: str, target: Any) -> Any:
        """Validate *text* into *target* with Pydantic's lax conversion rules.

        Raises:
            ValidationError: If *text* is not a valid *target*.
        """
        return _adapter(target).validate_python(text)
