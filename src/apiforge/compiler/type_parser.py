# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for the free-text type grammar used in API documentation tables.

The documentation encodes types purely through textual conventions:

* ``Integer``, ``String`` and ``Boolean`` are primitives;
* ``Array of X`` is an array of ``X`` (and may nest: ``Array of Array of X``);
* anything else names another entity;
* optionality lives in a separate cell, which starts with ``Optional``.

Matching ignores whitespace so that incidental markup whitespace (line
breaks, indentation inside ``<td>`` cells) does not change the result.
Parsing is total: unknown text always becomes a reference type.
"""

from __future__ import annotations

from apiforge.model.types import (
    ArrayType,
    BooleanType,
    IntegerType,
    OptionalType,
    ReferenceType,
    StringType,
    TypeDescriptor,
)

# ###############
# Public Interface
# ###############

OPTIONAL_MARKER = "Optional"
ARRAY_OF_PREFIX = "Arrayof"


def parse_type(type_string: str, qualifier_string: str) -> TypeDescriptor:
    """Parse a type cell and its optionality qualifier into a type descriptor.

    An optional type is always wrapped as a whole, so an optional array is
    ``OptionalType(ArrayType(...))`` and never ``ArrayType(OptionalType(...))``.

    Args:
        type_string: Raw text of the Type cell.
        qualifier_string: Raw text of the cell that marks optionality
            (Description for DTO fields, Required for method parameters).

    Returns:
        The parsed :data:`~apiforge.model.types.TypeDescriptor`.
    """
    if _strip_whitespace(qualifier_string).startswith(OPTIONAL_MARKER):
        return OptionalType(inner_type=_parse_required_type(type_string))
    return _parse_required_type(type_string)


def parse_field_type(type_string: str, description_string: str) -> TypeDescriptor:
    """Parse the type of a DTO field; optionality is read from its description."""
    return parse_type(type_string, description_string)


def parse_parameter_type(type_string: str, required_string: str) -> TypeDescriptor:
    """Parse the type of a method parameter; optionality is read from its Required cell."""
    return parse_type(type_string, required_string)


# ################
# Implementation
# ################

_PRIMITIVES: dict[str, type[IntegerType | StringType | BooleanType]] = {
    "Integer": IntegerType,
    "String": StringType,
    "Boolean": BooleanType,
    # Parameters accepting either type are generated with the wider one.
    "IntegerorString": StringType,
}


def _strip_whitespace(text: str) -> str:
    return "".join(text.split())


def _parse_required_type(type_string: str) -> TypeDescriptor:
    stripped = _strip_whitespace(type_string)

    primitive = _PRIMITIVES.get(stripped)
    if primitive is not None:
        return primitive()

    if stripped.startswith(ARRAY_OF_PREFIX):
        element = _parse_required_type(stripped[len(ARRAY_OF_PREFIX) :])
        return ArrayType(element_type=element)

    return ReferenceType(name=type_string)
