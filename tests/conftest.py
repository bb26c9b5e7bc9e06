"""Shared test fixtures."""

from __future__ import annotations

import pytest

from field_mapper.core.coercion import TypeCoercer
from field_mapper.mapping.engine import ObjectMapper
from field_mapper.mapping.property import PropertyResolver


@pytest.fixture
def resolver() -> PropertyResolver:
    """Fresh property resolver with an empty cache."""
    return PropertyResolver()


@pytest.fixture
def mapper(resolver: PropertyResolver) -> ObjectMapper:
    """Fresh mapper with the standard converters and empty caches."""
    return ObjectMapper(resolver=resolver)


@pytest.fixture
def bare_mapper() -> ObjectMapper:
    """Fresh mapper with no registered converters.

    Only text parsing applies, every other value passes through unchanged.
    """
    return ObjectMapper(coercer=TypeCoercer(converters={}))
