# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors for fields and parameters of the scraped API model."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class IntegerType(BaseModel):
    """The primitive ``Integer`` type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["integer"] = "integer"


class StringType(BaseModel):
    """The primitive ``String`` type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"


class BooleanType(BaseModel):
    """The primitive ``Boolean`` type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["boolean"] = "boolean"


class ReferenceType(BaseModel):
    """Reference to another entity (usually a DTO) by name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reference"] = "reference"
    name: str


class ArrayType(BaseModel):
    """An array of elements of a single type.

    The element type may never be optional: an optional array is expressed
    as ``OptionalType(inner_type=ArrayType(...))``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    element_type: TypeDescriptor

    @model_validator(mode="after")
    def _element_not_optional(self) -> ArrayType:
        if isinstance(self.element_type, OptionalType):
            raise ValueError("an array element type cannot be optional")
        return self


class OptionalType(BaseModel):
    """Marks the whole type of a field or parameter as optional."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["optional"] = "optional"
    inner_type: TypeDescriptor

    @model_validator(mode="after")
    def _inner_not_optional(self) -> OptionalType:
        if isinstance(self.inner_type, OptionalType):
            raise ValueError("an optional type cannot wrap another optional type")
        return self


# A type descriptor: a primitive, a named reference, or an array/optional wrapper.
# The `kind` discriminator keeps JSON round trips unambiguous.
TypeDescriptor = Annotated[
    IntegerType | StringType | BooleanType | ReferenceType | ArrayType | OptionalType,
    _Field(discriminator="kind"),
]


def referenced_name(type_descriptor: TypeDescriptor) -> str | None:
    """Return the name of the reference type wrapped by *type_descriptor*.

    Array and optional wrappers are looked through at any depth. Primitive
    types yield ``None``.
    """
    if isinstance(type_descriptor, ReferenceType):
        return type_descriptor.name
    if isinstance(type_descriptor, ArrayType):
        return referenced_name(type_descriptor.element_type)
    if isinstance(type_descriptor, OptionalType):
        return referenced_name(type_descriptor.inner_type)
    return None


def is_optional(type_descriptor: TypeDescriptor) -> bool:
    """Return True if the outermost type is an :class:`OptionalType`."""
    return isinstance(type_descriptor, OptionalType)


# Resolve forward references for the recursive wrappers.
ArrayType.model_rebuild()
OptionalType.model_rebuild()
