# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""The single error type raised while resolving templates into target files."""

from __future__ import annotations

import enum
from collections.abc import Sequence

# ###############
# Public Interface
# ###############


class ResolveErrorKind(enum.Enum):
    """All failure modes of template resolution."""

    UNKNOWN_RESOLVE_STRATEGY = "unknown-resolve-strategy"
    DUPLICATE_FILENAME = "duplicate-filename"
    DUPLICATE_FILENAMES = "duplicate-filenames"
    MISSING_TEMPLATE = "missing-template"
    RENDER_FAILED = "render-failed"
    TEMPLATE_NAME_CONFLICT = "template-name-conflict"


class ResolveError(Exception):
    """Raised when templates cannot be resolved into a consistent set of files.

    Every failure aborts the whole generation run before anything is written.
    Use the classmethod constructors rather than instantiating directly.

    Attributes:
        kind: The failure mode.
        value: Offending strategy string or template name, if any.
        filenames: Colliding file names for the duplicate kinds.
    """

    def __init__(
        self,
        kind: ResolveErrorKind,
        message: str,
        *,
        value: str | None = None,
        filenames: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value
        self.filenames = list(filenames)

    @classmethod
    def unknown_resolve_strategy(cls, raw_value: str) -> ResolveError:
        return cls(
            ResolveErrorKind.UNKNOWN_RESOLVE_STRATEGY,
            f"The value '{raw_value}' is not a valid resolve strategy",
            value=raw_value,
        )

    @classmethod
    def duplicate_filename(cls, filename: str) -> ResolveError:
        return cls(
            ResolveErrorKind.DUPLICATE_FILENAME,
            f"Attempted to create two files with the same filename '{filename}'",
            filenames=[filename],
        )

    @classmethod
    def duplicate_filenames(cls, filenames: Sequence[str]) -> ResolveError:
        listing = ", ".join(f"'{name}'" for name in filenames)
        return cls(
            ResolveErrorKind.DUPLICATE_FILENAMES,
            f"Attempted to create files with already existing filenames: {listing}",
            filenames=filenames,
        )

    @classmethod
    def missing_template(cls, template_name: str, reason: str) -> ResolveError:
        return cls(
            ResolveErrorKind.MISSING_TEMPLATE,
            f"Template '{template_name}' is not available: {reason}",
            value=template_name,
        )

    @classmethod
    def render_failed(cls, template_name: str, reason: str) -> ResolveError:
        return cls(
            ResolveErrorKind.RENDER_FAILED,
            f"Failed to render template '{template_name}': {reason}",
            value=template_name,
        )

    @classmethod
    def template_name_conflict(cls, template_name: str) -> ResolveError:
        return cls(
            ResolveErrorKind.TEMPLATE_NAME_CONFLICT,
            f"Two different templates would be registered as '{template_name}'",
            value=template_name,
        )
