# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entities of the raw API model: DTOs, methods and their members."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from apiforge.model.types import TypeDescriptor

# ###############
# Public Interface
# ###############


class RawField(BaseModel):
    """A typed field of a DTO."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeDescriptor


class RawParameter(BaseModel):
    """A typed parameter of a method."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: TypeDescriptor


class RawDto(BaseModel):
    """A record-like entity with an ordered list of fields."""

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[RawField, ...] = ()


class RawMethod(BaseModel):
    """A named operation with an ordered list of parameters."""

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: tuple[RawParameter, ...] = ()


class RawApi(BaseModel):
    """Top-level model holding every DTO and method scraped from a document."""

    model_config = ConfigDict(frozen=True)

    dtos: tuple[RawDto, ...] = _Field(default_factory=tuple)
    methods: tuple[RawMethod, ...] = _Field(default_factory=tuple)
