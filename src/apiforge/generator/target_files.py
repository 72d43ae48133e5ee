# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Collision-checked collection of generated files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from apiforge.generator.errors import ResolveError

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class TargetFile:
    """A generated file: its path relative to the output directory and its content."""

    filename: str
    content: str


class TargetFiles:
    """Generated files keyed by filename, in insertion order.

    Two files may never share a filename, since one would silently overwrite
    the other when written. Content plays no part in the comparison.
    """

    def __init__(self, files: Iterable[TargetFile] = ()) -> None:
        self._files: dict[str, str] = {}
        for target_file in files:
            self.insert(target_file)

    def insert(self, target_file: TargetFile) -> None:
        """Add a file.

        Raises:
            ResolveError: If a file with the same name already exists; the
                collection is left unchanged.
        """
        if target_file.filename in self._files:
            raise ResolveError.duplicate_filename(target_file.filename)
        self._files[target_file.filename] = target_file.content

    def insert_all(self, other: TargetFiles) -> None:
        """Add every file of *other*.

        Raises:
            ResolveError: Listing every filename of *other* that already
                exists here; nothing is inserted in that case.
        """
        duplicates = [filename for filename in other.filenames() if filename in self._files]
        if duplicates:
            raise ResolveError.duplicate_filenames(duplicates)
        self._files.update(other._files)

    def get(self, filename: str) -> str | None:
        """Return the content of *filename*, or None if absent."""
        return self._files.get(filename)

    def filenames(self) -> list[str]:
        return list(self._files)

    def items(self) -> list[tuple[str, str]]:
        return list(self._files.items())

    def __contains__(self, filename: object) -> bool:
        return filename in self._files

    def __iter__(self) -> Iterator[TargetFile]:
        for filename, content in self._files.items():
            yield TargetFile(filename=filename, content=content)

    def __len__(self) -> int:
        return len(self._files)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetFiles):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"TargetFiles({self.filenames()!r})"
