# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Writing resolved target files to the output directory."""

from __future__ import annotations

import shutil
from pathlib import Path, PurePosixPath

from apiforge.generator.target_files import TargetFiles

# ###############
# Public Interface
# ###############

DEFAULT_OUTPUT_DIRECTORY = "generated"


class WriteError(Exception):
    """Raised when generated files cannot be written."""


def write_target_files(target_files: TargetFiles, output_dir: Path) -> list[Path]:
    """Recreate *output_dir* and write every target file into it.

    An existing output directory is deleted first, so the directory holds
    exactly the files of this run. Intermediate directories implied by a
    filename (``dtos/update.rs``) are created as needed.

    Args:
        target_files: The files produced by the resolver.
        output_dir: Directory to (re)create.

    Returns:
        The paths of the written files, in insertion order.

    Raises:
        WriteError: If a filename is absolute or escapes *output_dir*, if two
            filenames denote the same file (``a//b.rs`` and ``a/b.rs``), or on
            any filesystem failure. Destinations are checked before anything
            is deleted.
    """
    destinations: list[tuple[Path, str]] = []
    claimed: dict[Path, str] = {}
    for target_file in target_files:
        path = _destination(output_dir, target_file.filename)
        if path in claimed:
            raise WriteError(
                f"Generated filenames '{claimed[path]}' and '{target_file.filename}' refer to the same file"
            )
        claimed[path] = target_file.filename
        destinations.append((path, target_file.content))

    try:
        if output_dir.exists():
            shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True)

        for path, content in destinations:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Cannot write generated files to '{output_dir}': {exc}") from exc

    return [path for path, _ in destinations]


# ################
# Implementation
# ################


def _destination(output_dir: Path, filename: str) -> Path:
    """Return the path of *filename* below *output_dir*, rejecting escapes."""
    relative = PurePosixPath(filename.replace("\\", "/"))
    if relative.is_absolute() or ".." in relative.parts or not relative.parts:
        raise WriteError(f"Generated filename '{filename}' must be a relative path inside the output directory")
    return output_dir.joinpath(*relative.parts)
