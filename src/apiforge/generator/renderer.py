# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Template rendering backend for the resolver.

The resolver only needs two operations, captured by the :class:`Renderer`
protocol, so the resolution algorithm can be exercised with a stub. The one
concrete implementation, :class:`JinjaRenderer`, is built once from a
configuration: every template file is read up front and registered under a
fixed naming scheme, after which the registry is never modified.

Registered template names:

* ``array`` and ``optional``: the wrapper type templates;
* ``<template_path>``: the content of a template file;
* ``<template_path>_name``: its target filename template;
* ``<from>_rename``: the replacement of a renamed identifier.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import jinja2

from apiforge.generator.config import Configuration
from apiforge.generator.errors import ResolveError

# ###############
# Public Interface
# ###############

ARRAY_TEMPLATE = "array"
OPTIONAL_TEMPLATE = "optional"
FILE_NAME_TEMPLATE_SUFFIX = "_name"
RENAME_TEMPLATE_SUFFIX = "_rename"


class Renderer(Protocol):
    """Renders registered templates by name."""

    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        """Render the template registered as *template_name* against *data*.

        Raises:
            ResolveError: If the template is unknown or fails to render.
        """
        ...

    def has_template(self, template_name: str) -> bool:
        """Return True if a template is registered as *template_name*."""
        ...


def file_name_template_name(template_path: str) -> str:
    """Return the registry name of the filename template of *template_path*.

    For example the target path of ``struct.rs.j2`` is registered as
    ``struct.rs.j2_name``.
    """
    return template_path + FILE_NAME_TEMPLATE_SUFFIX


def rename_template_name(identifier: str) -> str:
    """Return the registry name of the rename template for *identifier*."""
    return identifier + RENAME_TEMPLATE_SUFFIX


class JinjaRenderer:
    """A :class:`Renderer` backed by an immutable Jinja2 template registry.

    Undefined placeholders are errors rather than empty strings, and no
    HTML escaping is applied since the output is source code.
    """

    def __init__(self, templates: Mapping[str, str]) -> None:
        self._sources = dict(templates)
        self._environment = jinja2.Environment(
            loader=jinja2.DictLoader(self._sources),
            undefined=jinja2.StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._compiled: dict[str, jinja2.Template] = {}
        for name in self._sources:
            try:
                self._compiled[name] = self._environment.get_template(name)
            except jinja2.TemplateSyntaxError as exc:
                raise ResolveError.render_failed(name, f"line {exc.lineno}: {exc.message}") from exc

    @classmethod
    def from_configuration(cls, configuration: Configuration, template_dir: Path) -> JinjaRenderer:
        """Build the registry for *configuration*.

        Args:
            configuration: The generation configuration.
            template_dir: Directory that template paths are relative to.

        Raises:
            ResolveError: If a template file cannot be read, a template has
                invalid syntax, or two different templates map to the same
                registry name (e.g. a template file called ``optional``).
        """
        templates: dict[str, str] = {
            ARRAY_TEMPLATE: configuration.array_type,
            OPTIONAL_TEMPLATE: configuration.optional_type,
        }

        for template_file in configuration.template_files:
            if template_file.template_path in _RESERVED_TEMPLATE_NAMES:
                raise ResolveError.template_name_conflict(template_file.template_path)
            path = template_dir / template_file.template_path
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise ResolveError.missing_template(template_file.template_path, str(exc)) from exc
            _register(templates, template_file.template_path, content)
            _register(templates, file_name_template_name(template_file.template_path), template_file.target_path)

        renamed: set[str] = set()
        for rename in configuration.renames:
            name = rename_template_name(rename.from_)
            # The first rule declared for an identifier wins.
            if name in renamed:
                continue
            _register(templates, name, rename.to)
            renamed.add(name)

        return cls(templates)

    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        template = self._compiled.get(template_name)
        if template is None:
            raise ResolveError.missing_template(template_name, "no template registered under this name")
        try:
            return template.render(data)
        except Exception as exc:
            # Template expressions can raise anything (ZeroDivisionError, TypeError, ...).
            raise ResolveError.render_failed(template_name, f"{type(exc).__name__}: {exc}") from exc

    def has_template(self, template_name: str) -> bool:
        return template_name in self._compiled


# ################
# Implementation
# ################

_RESERVED_TEMPLATE_NAMES = frozenset({ARRAY_TEMPLATE, OPTIONAL_TEMPLATE})


def _register(templates: dict[str, str], name: str, source: str) -> None:
    """Add *source* under *name*; re-registering the same source is allowed."""
    existing = templates.get(name)
    if existing is not None and existing != source:
        raise ResolveError.template_name_conflict(name)
    templates[name] = source
