# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for the raw API model (duplicates, dangling references)."""

from apiforge.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
