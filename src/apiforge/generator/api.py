# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""View objects handed to templates.

Each view is derived from a raw entity once the target-language type
strings and renames are known. Templates receive them as plain dictionaries
(:meth:`pydantic.BaseModel.model_dump`), e.g. for a DTO::

    {
      "name": {"original": "ChatPhoto", "snake_case": "chat_photo", ...},
      "fields": [
        {"name": "small_file_id", "original_name": "small_file_id",
         "type": "String", "optional": false, "reference": null},
        ...
      ],
      "used_dto_names": [...]
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from apiforge.generator.names import Names

# ###############
# Public Interface
# ###############


class TemplateField(BaseModel):
    """A DTO field as seen by templates.

    Attributes:
        name: Field name after renames.
        original_name: Field name as written in the document.
        type: Rendered target-language type, e.g. ``Option<Vec<PhotoSize>>``.
        optional: Whether the field is optional.
        reference: Name variants of the referenced DTO, if the type wraps one.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    original_name: str
    type: str
    optional: bool
    reference: Names | None = None


class TemplateParameter(BaseModel):
    """A method parameter as seen by templates; see :class:`TemplateField`."""

    model_config = ConfigDict(frozen=True)

    name: str
    original_name: str
    type: str
    optional: bool
    reference: Names | None = None


class TemplateDto(BaseModel):
    """A DTO as seen by templates.

    ``used_dto_names`` lists every other DTO referenced by a field, once, for
    target languages that need explicit imports.
    """

    model_config = ConfigDict(frozen=True)

    name: Names
    fields: tuple[TemplateField, ...] = ()
    used_dto_names: tuple[Names, ...] = ()


class TemplateMethod(BaseModel):
    """A method as seen by templates."""

    model_config = ConfigDict(frozen=True)

    name: Names
    parameters: tuple[TemplateParameter, ...] = ()
    used_dto_names: tuple[Names, ...] = ()
