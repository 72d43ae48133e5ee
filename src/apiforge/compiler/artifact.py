# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of the raw API model to and from JSON artifacts.

A scraped model can be stored once and fed to the generator later without
re-scraping the document. The format is versioned so that schema changes
can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from apiforge.model.entities import RawApi

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".json"


class ArtifactError(Exception):
    """Raised when an artifact cannot be read, written, or is invalid."""


def serialize(raw_api: RawApi, *, indent: int | None = 2) -> str:
    """Serialize a raw API model to a JSON string."""
    data = {"v": ARTIFACT_FORMAT_VERSION, "api": raw_api.model_dump(mode="json")}
    return json.dumps(data, indent=indent)


def deserialize(data: str) -> RawApi:
    """Deserialize a raw API model from a JSON string produced by :func:`serialize`.

    Raises:
        ArtifactError: If the data is not valid JSON, has an unknown format
            version, or does not match the model schema.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ArtifactError(f"Invalid JSON artifact: {exc}") from exc

    if not isinstance(obj, dict):
        raise ArtifactError("Artifact must be a JSON object")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ArtifactError(f"Unsupported artifact format version: {version!r}")

    try:
        return RawApi.model_validate(obj.get("api", {}))
    except ValidationError as exc:
        raise ArtifactError(f"Invalid artifact: {exc}") from exc


def write_artifact(raw_api: RawApi, path: Path) -> None:
    """Write a raw API artifact to *path*, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize(raw_api) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ArtifactError(f"Cannot write artifact '{path}': {exc}") from exc


def read_artifact(path: Path) -> RawApi:
    """Read a raw API artifact from *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ArtifactError(f"Cannot read artifact '{path}': {exc}") from exc
    return deserialize(text)
