# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of scraped tables into the raw API model."""

from __future__ import annotations

from collections.abc import Iterable

from apiforge.compiler.type_parser import parse_field_type, parse_parameter_type
from apiforge.model.entities import RawApi, RawDto, RawField, RawMethod, RawParameter
from apiforge.scraper.tables import DtoRow, DtoTable, MethodRow, MethodTable, Table

# ###############
# Public Interface
# ###############


def build(tables: Iterable[Table]) -> RawApi:
    """Build the raw API model from scraped tables.

    DTO tables become :class:`RawDto` entities, method tables become
    :class:`RawMethod` entities; document order is kept within each kind.
    """
    dtos: list[RawDto] = []
    methods: list[RawMethod] = []
    for table in tables:
        if isinstance(table, DtoTable):
            dtos.append(_build_dto(table))
        elif isinstance(table, MethodTable):
            methods.append(_build_method(table))
    return RawApi(dtos=tuple(dtos), methods=tuple(methods))


# ################
# Implementation
# ################


def _build_dto(table: DtoTable) -> RawDto:
    return RawDto(name=table.name, fields=tuple(_build_field(row) for row in table.rows))


def _build_field(row: DtoRow) -> RawField:
    return RawField(
        name=row.field_string,
        type=parse_field_type(row.type_string, row.description_string),
    )


def _build_method(table: MethodTable) -> RawMethod:
    return RawMethod(name=table.name, parameters=tuple(_build_parameter(row) for row in table.rows))


def _build_parameter(row: MethodRow) -> RawParameter:
    return RawParameter(
        name=row.parameter_string,
        type=parse_parameter_type(row.type_string, row.required_string),
    )
