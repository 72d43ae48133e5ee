# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Raw API model (DTOs, methods and the recursive type descriptors)."""

from apiforge.model.entities import (
    RawApi,
    RawDto,
    RawField,
    RawMethod,
    RawParameter,
)
from apiforge.model.types import (
    ArrayType,
    BooleanType,
    IntegerType,
    OptionalType,
    ReferenceType,
    StringType,
    TypeDescriptor,
    is_optional,
    referenced_name,
)

__all__ = [
    # Type system
    "IntegerType",
    "StringType",
    "BooleanType",
    "ReferenceType",
    "ArrayType",
    "OptionalType",
    "TypeDescriptor",
    "referenced_name",
    "is_optional",
    # Entities
    "RawField",
    "RawParameter",
    "RawDto",
    "RawMethod",
    "RawApi",
]
