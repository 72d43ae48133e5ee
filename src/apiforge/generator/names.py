# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Case variants of identifiers exposed to templates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class Names(BaseModel):
    """An identifier together with its case variants.

    Attributes:
        original: The identifier as written in the document.
        snake_case: ``UserProfilePhotos`` becomes ``user_profile_photos``.
        camel_case: ``UserProfilePhotos`` becomes ``userProfilePhotos``.
        capital_camel_case: ``sendMessage`` becomes ``SendMessage``.
    """

    model_config = ConfigDict(frozen=True)

    original: str
    snake_case: str
    camel_case: str
    capital_camel_case: str

    @classmethod
    def of(cls, identifier: str) -> Names:
        """Compute all variants of *identifier*."""
        return cls(
            original=identifier,
            snake_case=to_snake_case(identifier),
            camel_case=to_camel_case(identifier),
            capital_camel_case=to_capital_camel_case(identifier),
        )


def to_snake_case(identifier: str) -> str:
    """Lower-case every ASCII capital, prefixing it with ``_`` unless it comes first.

    Non-ASCII characters are left unchanged.
    """
    result: list[str] = []
    for index, char in enumerate(identifier):
        if _is_ascii_upper(char):
            if index > 0:
                result.append("_")
            result.append(char.lower())
        else:
            result.append(char)
    return "".join(result)


def to_camel_case(identifier: str) -> str:
    """Lower-case the first character if it is an ASCII capital."""
    if identifier and _is_ascii_upper(identifier[0]):
        return identifier[0].lower() + identifier[1:]
    return identifier


def to_capital_camel_case(identifier: str) -> str:
    """Upper-case the first character if it is an ASCII lower-case letter."""
    if identifier and "a" <= identifier[0] <= "z":
        return identifier[0].upper() + identifier[1:]
    return identifier


# ################
# Implementation
# ################


def _is_ascii_upper(char: str) -> bool:
    return "A" <= char <= "Z"
