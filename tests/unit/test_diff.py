"""Unit tests for diff."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from field_mapper.mapping.diff import FieldDifference, diff
from field_mapper.mapping.property import PropertyResolver


@dataclass
class Person:
    name: str | None = None
    age: int | None = None


@dataclass
class Employee(Person):
    team: str | None = None


@dataclass
class Badge:
    name: str | None = None


class TestDiff:
    def test_changed_field_reported(self, resolver: PropertyResolver) -> None:
        result = diff(Person(name="A", age=5), Person(name="B", age=5), resolver)
        assert result == [FieldDifference(field_name="name", old_value="A", new_value="B")]

    def test_identical_objects(self, resolver: PropertyResolver) -> None:
        assert diff(Person(name="A", age=5), Person(name="A", age=5), resolver) == []

    def test_none_on_new_is_ignored(self, resolver: PropertyResolver) -> None:
        assert diff(Person(name="A", age=5), Person(age=5), resolver) == []

    def test_none_on_old_recorded_as_empty_string(self, resolver: PropertyResolver) -> None:
        result = diff(Person(), Person(age=7), resolver)
        assert result == [FieldDifference(field_name="age", old_value="", new_value="7")]

    def test_declaration_order(self, resolver: PropertyResolver) -> None:
        result = diff(Person(name="A", age=1), Person(name="B", age=2), resolver)
        assert [d.field_name for d in result] == ["name", "age"]

    def test_inherited_fields_not_compared(self, resolver: PropertyResolver) -> None:
        result = diff(Employee(name="A"), Employee(name="B", team="core"), resolver)
        assert result == [FieldDifference(field_name="team", old_value="", new_value="core")]

    def test_old_of_other_type(self, resolver: PropertyResolver) -> None:
        result = diff(Badge(name="A"), Person(name="B", age=3), resolver)
        assert result == [
            FieldDifference(field_name="name", old_value="A", new_value="B"),
            FieldDifference(field_name="age", old_value="", new_value="3"),
        ]

    def test_default_resolver(self) -> None:
        assert len(diff(Person(name="A"), Person(name="B"))) == 1

    def test_field_difference_frozen(self) -> None:
        difference = FieldDifference(field_name="name", old_value="A", new_value="B")
        with pytest.raises(AttributeError):
            difference.new_value = "C"  # type: ignore[misc]
