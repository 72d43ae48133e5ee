# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Back end: configuration, template resolution and target file output."""

from apiforge.generator.api import TemplateDto, TemplateField, TemplateMethod, TemplateParameter
from apiforge.generator.config import (
    Configuration,
    ConfigurationError,
    Rename,
    TemplateFile,
    load_configuration,
    parse_configuration,
)
from apiforge.generator.errors import ResolveError, ResolveErrorKind
from apiforge.generator.names import Names, to_camel_case, to_capital_camel_case, to_snake_case
from apiforge.generator.renderer import JinjaRenderer, Renderer
from apiforge.generator.resolve_strategy import ResolveStrategy
from apiforge.generator.resolver import TemplateResolver, resolve
from apiforge.generator.target_files import TargetFile, TargetFiles
from apiforge.generator.writer import DEFAULT_OUTPUT_DIRECTORY, WriteError, write_target_files

__all__ = [
    "Configuration",
    "ConfigurationError",
    "DEFAULT_OUTPUT_DIRECTORY",
    "JinjaRenderer",
    "Names",
    "Rename",
    "Renderer",
    "ResolveError",
    "ResolveErrorKind",
    "ResolveStrategy",
    "TargetFile",
    "TargetFiles",
    "TemplateDto",
    "TemplateField",
    "TemplateFile",
    "TemplateMethod",
    "TemplateParameter",
    "TemplateResolver",
    "WriteError",
    "load_configuration",
    "parse_configuration",
    "resolve",
    "to_camel_case",
    "to_capital_camel_case",
    "to_snake_case",
    "write_target_files",
]
