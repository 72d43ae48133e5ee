# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Raw tables extracted from the API document, before any type parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class DtoRow:
    """One row of a Field/Type/Description table.

    Attributes:
        field_string: Text of the Field cell.
        type_string: Text of the Type cell.
        description_string: Text of the Description cell.
    """

    field_string: str
    type_string: str
    description_string: str


@dataclass(frozen=True)
class MethodRow:
    """One row of a Parameter/Type/Required/Description table.

    Attributes:
        parameter_string: Text of the Parameter cell.
        type_string: Text of the Type cell.
        required_string: Text of the Required cell (``Yes`` or ``Optional``).
        description_string: Text of the Description cell.
    """

    parameter_string: str
    type_string: str
    required_string: str
    description_string: str


@dataclass(frozen=True)
class DtoTable:
    """A DTO table, named after the heading that precedes it."""

    name: str
    rows: tuple[DtoRow, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MethodTable:
    """A method table, named after the heading that precedes it."""

    name: str
    rows: tuple[MethodRow, ...] = field(default_factory=tuple)


Table = DtoTable | MethodTable
