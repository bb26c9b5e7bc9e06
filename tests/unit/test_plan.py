"""Unit tests for MappingPlan, PlanKey and FieldMapping."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from field_mapper.mapping.plan import FieldMapping, MappingPlan, PlanKey, explicit_pairs


@dataclass
class Target:
    name: str = ""


class TestFieldMapping:
    def test_fluent_chaining(self) -> None:
        explicit = FieldMapping().field("a", "x").field("b", "y")
        assert explicit.as_dict() == {"a": "x", "b": "y"}
        assert len(explicit) == 2
        assert "a" in explicit
        assert list(explicit) == ["a", "b"]

    def test_initial_pairs(self) -> None:
        assert FieldMapping({"a": "x"}) == FieldMapping().field("a", "x")

    def test_as_dict_is_a_copy(self) -> None:
        explicit = FieldMapping({"a": "x"})
        explicit.as_dict()["b"] = "y"
        assert "b" not in explicit

    @pytest.mark.parametrize(
        "explicit",
        [None, {}, FieldMapping()],
    )
    def test_explicit_pairs_empty(self, explicit: object) -> None:
        assert explicit_pairs(explicit) == {}  # type: ignore[arg-type]

    def test_explicit_pairs_normalizes(self) -> None:
        assert explicit_pairs(FieldMapping({"a": "x"})) == explicit_pairs({"a": "x"})


class TestPlanKey:
    def test_object_shape_is_type(self) -> None:
        key = PlanKey.for_source(Target(), Target, {})
        assert key.shape is Target

    def test_mapping_shape_is_key_set(self) -> None:
        key = PlanKey.for_source({"b": 1, "a": 2}, Target, {})
        assert key.shape == frozenset({"a", "b"})

    def test_key_order_irrelevant(self) -> None:
        first = PlanKey.for_source({"a": 1, "b": 2}, Target, {})
        second = PlanKey.for_source({"b": 1, "a": 2}, Target, {})
        assert first == second
        assert hash(first) == hash(second)

    def test_explicit_pairs_distinguish_keys(self) -> None:
        first = PlanKey.for_source({"a": 1}, Target, {"a": "x"})
        second = PlanKey.for_source({"a": 1}, Target, {"a": "y"})
        assert first != second


class TestMappingPlan:
    def test_frozen(self) -> None:
        plan = MappingPlan(dest_type=Target, pairs=(("name", "name"),))
        with pytest.raises(AttributeError):
            plan.pairs = ()  # type: ignore[misc]

    def test_iteration(self) -> None:
        plan = MappingPlan(dest_type=Target, pairs=(("a", "x"), ("b", "y")))
        assert list(plan) == [("a", "x"), ("b", "y")]
        assert len(plan) == 2
        assert plan.as_dict() == {"a": "x", "b": "y"}

    def test_empty_plan(self) -> None:
        assert len(MappingPlan(dest_type=Target)) == 0
