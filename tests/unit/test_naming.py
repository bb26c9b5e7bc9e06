"""Unit tests for naming convention conversion."""

from __future__ import annotations

import pytest

from field_mapper.core.naming import candidate_names, to_camel_case, to_underscore_name


class TestToCamelCase:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("user_name", "userName"),
            ("user_type_code", "userTypeCode"),
            ("age", "age"),
            ("userName", "userName"),
            ("_private_field", "_privateField"),
        ],
    )
    def test_conversion(self, name: str, expected: str) -> None:
        assert to_camel_case(name) == expected


class TestToUnderscoreName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("userName", "user_name"),
            ("userTypeCode", "user_type_code"),
            ("age", "age"),
            ("user_name", "user_name"),
            ("Name", "name"),
        ],
    )
    def test_conversion(self, name: str, expected: str) -> None:
        assert to_underscore_name(name) == expected


class TestRoundTrip:
    @pytest.mark.parametrize("name", ["user_name", "a_b_c", "created_at", "id", "order_line_item"])
    def test_underscore_round_trip(self, name: str) -> None:
        assert to_underscore_name(to_camel_case(name)) == name

    @pytest.mark.parametrize("name", ["userName", "aBC", "createdAt", "id", "orderLineItem"])
    def test_camel_round_trip(self, name: str) -> None:
        assert to_camel_case(to_underscore_name(name)) == name


class TestCandidateNames:
    def test_underscore_name(self) -> None:
        assert candidate_names("user_name") == ["user_name", "userName"]

    def test_camel_name(self) -> None:
        assert candidate_names("userName") == ["userName", "user_name"]

    def test_plain_name_has_single_candidate(self) -> None:
        assert candidate_names("age") == ["age"]
