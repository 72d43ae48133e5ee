# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for the raw API model.

These checks run on the scraped model before generation and point out
documentation quirks that usually lead to broken generated code. They do
not look at the generated code itself.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from apiforge.model.entities import RawApi
from apiforge.model.types import referenced_name

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal finding; generation still works but may need attention.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A finding that makes the generated code invalid.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the consistency checks.

    Attributes:
        warnings: Non-fatal findings.
        errors: Findings that make the model unusable for generation.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were found."""
        return len(self.errors) > 0


def validate(raw_api: RawApi) -> ValidationResult:
    """Run all consistency checks on a raw API model.

    Checks performed:

    1. **Duplicate entities** (error): two DTOs, or two methods, sharing a
       name would generate colliding definitions.

    2. **Duplicate members** (error): a field or parameter name appearing
       twice within the same entity.

    3. **Unresolved references** (warning): a field or parameter whose type
       names no scraped DTO. Placeholder types documented without a table
       end up here.

    4. **Empty DTOs** (warning): DTOs without any field.

    Returns:
        A :class:`ValidationResult`; an empty result means the model is consistent.
    """
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    errors.extend(_check_duplicate_entities(raw_api))
    errors.extend(_check_duplicate_members(raw_api))
    warnings.extend(_check_unresolved_references(raw_api))
    warnings.extend(_check_empty_dtos(raw_api))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _duplicates(names: list[str]) -> list[str]:
    """Return every name occurring more than once, in first-occurrence order."""
    counts = Counter(names)
    return [name for name in dict.fromkeys(names) if counts[name] > 1]


def _check_duplicate_entities(raw_api: RawApi) -> list[ValidationError]:
    errors = [
        ValidationError(f"DTO '{name}' is defined more than once")
        for name in _duplicates([d.name for d in raw_api.dtos])
    ]
    errors.extend(
        ValidationError(f"Method '{name}' is defined more than once")
        for name in _duplicates([m.name for m in raw_api.methods])
    )
    return errors


def _check_duplicate_members(raw_api: RawApi) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for dto in raw_api.dtos:
        for name in _duplicates([f.name for f in dto.fields]):
            errors.append(ValidationError(f"DTO '{dto.name}' declares field '{name}' more than once"))
    for method in raw_api.methods:
        for name in _duplicates([p.name for p in method.parameters]):
            errors.append(ValidationError(f"Method '{method.name}' declares parameter '{name}' more than once"))
    return errors


def _check_unresolved_references(raw_api: RawApi) -> list[ValidationWarning]:
    known = {dto.name for dto in raw_api.dtos}
    warnings: list[ValidationWarning] = []

    for dto in raw_api.dtos:
        for f in dto.fields:
            name = referenced_name(f.type)
            if name is not None and name not in known:
                warnings.append(ValidationWarning(f"Field '{dto.name}.{f.name}' references unknown type '{name}'"))

    for method in raw_api.methods:
        for p in method.parameters:
            name = referenced_name(p.type)
            if name is not None and name not in known:
                warnings.append(
                    ValidationWarning(f"Parameter '{method.name}.{p.name}' references unknown type '{name}'")
                )

    return warnings


def _check_empty_dtos(raw_api: RawApi) -> list[ValidationWarning]:
    return [ValidationWarning(f"DTO '{dto.name}' has no fields") for dto in raw_api.dtos if not dto.fields]
