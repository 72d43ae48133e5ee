# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the free-text type grammar."""

import pytest

from apiforge.compiler.type_parser import parse_field_type, parse_parameter_type, parse_type
from apiforge.model.types import (
    ArrayType,
    BooleanType,
    IntegerType,
    OptionalType,
    ReferenceType,
    StringType,
)

# ###############
# Required types
# ###############


class TestPrimitives:
    @pytest.mark.parametrize(
        ("type_string", "expected"),
        [
            ("Integer", IntegerType()),
            ("String", StringType()),
            ("Boolean", BooleanType()),
            ("  Integer\n", IntegerType()),
        ],
    )
    def test_primitive(self, type_string: str, expected: object) -> None:
        assert parse_type(type_string, "") == expected

    def test_integer_or_string_widens_to_string(self) -> None:
        assert parse_type("Integer or String", "Yes") == StringType()

    def test_primitive_match_is_case_sensitive(self) -> None:
        assert parse_type("integer", "") == ReferenceType(name="integer")


class TestReferences:
    def test_unknown_text_is_a_reference(self) -> None:
        assert parse_type("Foo", "foo foo.") == ReferenceType(name="Foo")

    def test_reference_keeps_original_text(self) -> None:
        assert parse_type("Input File", "") == ReferenceType(name="Input File")

    def test_empty_type_string_is_a_reference(self) -> None:
        assert parse_type("", "") == ReferenceType(name="")


class TestArrays:
    def test_array_of_primitive(self) -> None:
        assert parse_type("Array of String", "") == ArrayType(element_type=StringType())

    def test_array_of_reference(self) -> None:
        assert parse_type("Array of PhotoSize", "") == ArrayType(element_type=ReferenceType(name="PhotoSize"))

    def test_nested_arrays(self) -> None:
        expected = ArrayType(element_type=ArrayType(element_type=ReferenceType(name="KeyboardButton")))
        assert parse_type("Array of Array of KeyboardButton", "") == expected

    def test_array_prefix_ignores_whitespace(self) -> None:
        assert parse_type("Array\n  of   Integer", "") == ArrayType(element_type=IntegerType())


# ###############
# Optionality
# ###############


class TestOptional:
    def test_optional_marker_in_description(self) -> None:
        assert parse_field_type("Foo", "Optional.foo foo.") == OptionalType(inner_type=ReferenceType(name="Foo"))

    def test_optional_marker_after_whitespace(self) -> None:
        assert parse_field_type("Integer", "  \n Optional. Count.") == OptionalType(inner_type=IntegerType())

    def test_marker_must_lead(self) -> None:
        assert parse_field_type("Integer", "Count. Optional.") == IntegerType()

    def test_marker_is_case_sensitive(self) -> None:
        assert parse_field_type("Integer", "optional. Count.") == IntegerType()

    def test_optional_array_wraps_whole_type(self) -> None:
        result = parse_field_type("Array of PhotoSize", "Optional. Photos.")
        assert result == OptionalType(inner_type=ArrayType(element_type=ReferenceType(name="PhotoSize")))

    def test_optional_parameter(self) -> None:
        assert parse_parameter_type("Boolean", "Optional") == OptionalType(inner_type=BooleanType())

    def test_required_parameter(self) -> None:
        assert parse_parameter_type("Integer or String", "Yes") == StringType()
