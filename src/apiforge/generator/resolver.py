# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of template files against the raw API model.

For every template file of the configuration, in order:

1. its resolve strategy string is checked;
2. the rendering data is built, either one entity at a time
   (``FOR_EACH_*``, template variable ``dto`` / ``method``) or for the whole
   collection at once (``FOR_ALL_*``, template variable ``dtos`` /
   ``methods``);
3. the content and filename templates are rendered against that data;
4. the resulting files are merged into the run's :class:`TargetFiles`,
   failing on any filename collision.

Type strings are rendered bottom-up: the innermost type is rendered first
and then substituted into the ``array`` or ``optional`` wrapper template,
one wrapper at a time, so ``Optional(ArrayOf(Reference("Foo")))`` becomes
e.g. ``Option<Vec<Foo>>``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from apiforge.generator.api import TemplateDto, TemplateField, TemplateMethod, TemplateParameter
from apiforge.generator.config import Configuration, TemplateFile
from apiforge.generator.names import Names
from apiforge.generator.renderer import (
    ARRAY_TEMPLATE,
    OPTIONAL_TEMPLATE,
    Renderer,
    file_name_template_name,
    rename_template_name,
)
from apiforge.generator.resolve_strategy import ResolveStrategy
from apiforge.generator.target_files import TargetFile, TargetFiles
from apiforge.model.entities import RawApi, RawDto, RawField, RawMethod, RawParameter
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

# ###############
# Public Interface
# ###############


def resolve(raw_api: RawApi, configuration: Configuration, renderer: Renderer) -> TargetFiles:
    """Resolve every template file of *configuration* against *raw_api*.

    Raises:
        ResolveError: On an unknown strategy, a render failure or a
            filename collision. No partial result is returned.
    """
    return TemplateResolver(configuration, renderer).resolve(raw_api)


class TemplateResolver:
    """Turns the raw API model into target files using an injected renderer."""

    def __init__(self, configuration: Configuration, renderer: Renderer) -> None:
        self._configuration = configuration
        self._renderer = renderer

    def resolve(self, raw_api: RawApi) -> TargetFiles:
        """Render all template files; see :func:`resolve`."""
        collections = {
            "dtos": [self.dto_view(dto).model_dump() for dto in raw_api.dtos],
            "methods": [self.method_view(method).model_dump() for method in raw_api.methods],
        }

        result = TargetFiles()
        for template_file in self._configuration.template_files:
            strategy = ResolveStrategy.from_string(template_file.resolve_strategy)
            result.insert_all(self._resolve_template_file(template_file, strategy, collections[strategy.collection]))
        return result

    def render_type(self, type_descriptor: TypeDescriptor) -> str:
        """Render a type descriptor as a target-language type string."""
        if isinstance(type_descriptor, IntegerType):
            return self._configuration.integer_type
        if isinstance(type_descriptor, StringType):
            return self._configuration.string_type
        if isinstance(type_descriptor, BooleanType):
            return self._configuration.boolean_type
        if isinstance(type_descriptor, ReferenceType):
            return type_descriptor.name
        if isinstance(type_descriptor, ArrayType):
            return self._wrap(ARRAY_TEMPLATE, self.render_type(type_descriptor.element_type))
        if isinstance(type_descriptor, OptionalType):
            return self._wrap(OPTIONAL_TEMPLATE, self.render_type(type_descriptor.inner_type))
        raise TypeError(f"Unsupported type descriptor: {type_descriptor!r}")

    def rename(self, identifier: str, owner: Names) -> str:
        """Apply the rename rule for *identifier*, if any.

        Matching is exact and case-sensitive. The replacement is rendered
        against the name variants of *owner*, the entity the identifier
        belongs to.
        """
        template_name = rename_template_name(identifier)
        if not self._renderer.has_template(template_name):
            return identifier
        return self._renderer.render(template_name, owner.model_dump())

    def dto_view(self, dto: RawDto) -> TemplateDto:
        """Build the template view of a DTO."""
        original = Names.of(dto.name)
        return TemplateDto(
            name=Names.of(self.rename(dto.name, original)),
            fields=tuple(self._field_view(field, original) for field in dto.fields),
            used_dto_names=_used_dto_names(dto.name, (field.type for field in dto.fields)),
        )

    def method_view(self, method: RawMethod) -> TemplateMethod:
        """Build the template view of a method."""
        original = Names.of(method.name)
        return TemplateMethod(
            name=Names.of(self.rename(method.name, original)),
            parameters=tuple(self._parameter_view(parameter, original) for parameter in method.parameters),
            used_dto_names=_used_dto_names(method.name, (parameter.type for parameter in method.parameters)),
        )

    # ------------------------------------------------------------------
    # View and file helpers
    # ------------------------------------------------------------------

    def _wrap(self, wrapper_template: str, value: str) -> str:
        return self._renderer.render(wrapper_template, {"value": value})

    def _field_view(self, field: RawField, owner: Names) -> TemplateField:
        reference = referenced_name(field.type)
        return TemplateField(
            name=self.rename(field.name, owner),
            original_name=field.name,
            type=self.render_type(field.type),
            optional=is_optional(field.type),
            reference=Names.of(reference) if reference is not None else None,
        )

    def _parameter_view(self, parameter: RawParameter, owner: Names) -> TemplateParameter:
        reference = referenced_name(parameter.type)
        return TemplateParameter(
            name=self.rename(parameter.name, owner),
            original_name=parameter.name,
            type=self.render_type(parameter.type),
            optional=is_optional(parameter.type),
            reference=Names.of(reference) if reference is not None else None,
        )

    def _resolve_template_file(
        self,
        template_file: TemplateFile,
        strategy: ResolveStrategy,
        entities: list[dict[str, Any]],
    ) -> TargetFiles:
        """Render one template file into a batch of target files."""
        if strategy.is_for_each:
            passes = [{strategy.item: entity} for entity in entities]
        else:
            passes = [{strategy.collection: entities}]

        batch = TargetFiles()
        for data in passes:
            batch.insert(self._render_target_file(template_file, data))
        return batch

    def _render_target_file(self, template_file: TemplateFile, data: Mapping[str, Any]) -> TargetFile:
        filename = self._renderer.render(file_name_template_name(template_file.template_path), data)
        content = self._renderer.render(template_file.template_path, data)
        return TargetFile(filename=filename, content=content)


# ################
# Implementation
# ################


def _used_dto_names(owner_name: str, types: Iterable[TypeDescriptor]) -> tuple[Names, ...]:
    """Return the sorted, deduplicated names referenced by *types*, except *owner_name*."""
    names = {referenced_name(type_descriptor) for type_descriptor in types}
    names.discard(None)
    names.discard(owner_name)
    return tuple(Names.of(name) for name in sorted(names))
