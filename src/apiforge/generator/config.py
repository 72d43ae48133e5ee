# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and loader for the code generation configuration file.

The configuration is a JSON document (``configuration.json``)::

    {
      "integer_type": "i64",
      "string_type": "String",
      "boolean_type": "bool",
      "array_type": "Vec<{{ value }}>",
      "optional_type": "Option<{{ value }}>",
      "renames": [{"from": "type", "to": "{{ snake_case }}_type"}],
      "template_files": [
        {
          "template_path": "dto.rs.j2",
          "target_path": "dtos/{{ dto.name.snake_case }}.rs",
          "resolve_strategy": "FOR_EACH_DTO"
        }
      ]
    }

It is read with the YAML loader, so YAML configurations are accepted too.
"""

from __future__ import annotations

from pathlib import Path

import jinja2
import jinja2.meta
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

VALUE_PLACEHOLDER = "value"


class ConfigurationError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


class Rename(BaseModel):
    """An identifier that is renamed in generated code, e.g. a reserved keyword.

    ``to`` is a template rendered against the name variants of the entity
    that owns the identifier, so ``"{{ snake_case }}_type"`` is valid.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str


class TemplateFile(BaseModel):
    """A template file and how it is turned into generated files.

    Attributes:
        template_path: Path of the content template, relative to the template directory.
        target_path: Template for the generated file name.
        resolve_strategy: One of ``FOR_ALL_DTOS``, ``FOR_EACH_DTO``,
            ``FOR_ALL_METHODS`` or ``FOR_EACH_METHOD``; checked when resolving.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    template_path: str
    target_path: str
    resolve_strategy: str


class Configuration(BaseModel):
    """Target-language type names, wrapper templates, renames and template files."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    integer_type: str
    string_type: str
    boolean_type: str
    array_type: str
    optional_type: str
    renames: tuple[Rename, ...] = ()
    template_files: tuple[TemplateFile, ...] = ()


def load_configuration(path: Path) -> Configuration:
    """Load and validate a code generation configuration file.

    Args:
        path: Path to the ``configuration.json`` file.

    Returns:
        A validated Configuration instance.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid
            JSON/YAML, does not match the schema, or a wrapper template is
            invalid or uses variables other than ``value``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {path}") from None
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration file: {exc}") from exc

    return parse_configuration(text, source_label=str(path))


def parse_configuration(text: str, source_label: str = "<string>") -> Configuration:
    """Parse configuration text into a Configuration.

    Args:
        text: Raw JSON (or YAML) content.
        source_label: Human-readable label used in error messages (e.g. the file path).
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid configuration syntax in {source_label}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"{source_label}: configuration must be a mapping")

    try:
        configuration = Configuration.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"{source_label}: invalid configuration: {exc}") from exc

    problems = validate_wrapper_templates(configuration)
    if problems:
        details = "\n".join(f"  {problem}" for problem in problems)
        raise ConfigurationError(f"{source_label}: invalid wrapper templates:\n{details}")

    return configuration


def validate_wrapper_templates(configuration: Configuration) -> list[str]:
    """Check that the array/optional wrappers only use the ``value`` placeholder.

    Wrappers are rendered with ``value`` as their only variable, so any other
    undeclared name would fail at generation time. A wrapper without template
    variables is a fixed type name and is accepted as is.

    Returns:
        One message per invalid wrapper; an empty list means both are valid.
    """
    environment = jinja2.Environment()
    problems: list[str] = []
    for key, template in (
        ("array_type", configuration.array_type),
        ("optional_type", configuration.optional_type),
    ):
        try:
            variables = jinja2.meta.find_undeclared_variables(environment.parse(template))
        except jinja2.TemplateSyntaxError as exc:
            problems.append(f"'{key}' is not a valid template: {exc.message}")
            continue

        unknown = sorted(variables - {VALUE_PLACEHOLDER})
        if unknown:
            problems.append(
                f"'{key}' must use the placeholder '{VALUE_PLACEHOLDER}', for example 'Wrapper<{{{{ value }}}}>'; "
                f"found: {', '.join(unknown)}"
            )
    return problems
