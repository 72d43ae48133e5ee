# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""How a template file is turned into target files."""

from __future__ import annotations

import enum

from apiforge.generator.errors import ResolveError

# ###############
# Public Interface
# ###############


class ResolveStrategy(enum.Enum):
    """Render a template once per entity, or once for a whole entity collection."""

    FOR_ALL_DTOS = "FOR_ALL_DTOS"
    FOR_EACH_DTO = "FOR_EACH_DTO"
    FOR_ALL_METHODS = "FOR_ALL_METHODS"
    FOR_EACH_METHOD = "FOR_EACH_METHOD"

    @classmethod
    def from_string(cls, value: str) -> ResolveStrategy:
        """Return the strategy named by *value* (exact match).

        Raises:
            ResolveError: If *value* names no strategy.
        """
        try:
            return cls(value)
        except ValueError:
            raise ResolveError.unknown_resolve_strategy(value) from None

    @property
    def is_for_each(self) -> bool:
        """True if the template is rendered once per entity."""
        return self in (ResolveStrategy.FOR_EACH_DTO, ResolveStrategy.FOR_EACH_METHOD)

    @property
    def collection(self) -> str:
        """Name of the entity collection the strategy iterates: ``dtos`` or ``methods``."""
        if self in (ResolveStrategy.FOR_ALL_DTOS, ResolveStrategy.FOR_EACH_DTO):
            return "dtos"
        return "methods"

    @property
    def item(self) -> str:
        """Template variable holding a single entity: ``dto`` or ``method``."""
        return "dto" if self.collection == "dtos" else "method"
