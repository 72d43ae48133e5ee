# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the raw API model artifact serialization."""

import json
from pathlib import Path

import pytest

from apiforge.compiler.artifact import (
    ARTIFACT_FORMAT_VERSION,
    ArtifactError,
    deserialize,
    read_artifact,
    serialize,
    write_artifact,
)
from apiforge.model.entities import RawApi, RawDto, RawField, RawMethod, RawParameter
from apiforge.model.types import ArrayType, BooleanType, OptionalType, ReferenceType, StringType

# ###############
# Helpers
# ###############


def _sample_api() -> RawApi:
    """Build an API exercising every type descriptor kind."""
    return RawApi(
        dtos=(
            RawDto(
                name="Message",
                fields=(
                    RawField(name="text", type=OptionalType(inner_type=StringType())),
                    RawField(
                        name="photo",
                        type=OptionalType(inner_type=ArrayType(element_type=ReferenceType(name="PhotoSize"))),
                    ),
                ),
            ),
        ),
        methods=(RawMethod(name="close", parameters=(RawParameter(name="force", type=BooleanType()),)),),
    )


# ###############
# Serialize / Deserialize
# ###############


class TestSerialize:
    def test_roundtrip(self) -> None:
        api = _sample_api()
        assert deserialize(serialize(api)) == api

    def test_empty_roundtrip(self) -> None:
        assert deserialize(serialize(RawApi())) == RawApi()

    def test_carries_format_version(self) -> None:
        data = json.loads(serialize(RawApi()))
        assert data["v"] == ARTIFACT_FORMAT_VERSION

    def test_type_kinds_are_explicit(self) -> None:
        data = json.loads(serialize(_sample_api()))
        photo_type = data["api"]["dtos"][0]["fields"][1]["type"]
        assert photo_type["kind"] == "optional"
        assert photo_type["inner_type"]["kind"] == "array"

    def test_serialization_is_deterministic(self) -> None:
        assert serialize(_sample_api()) == serialize(_sample_api())


class TestDeserializeErrors:
    def test_invalid_json(self) -> None:
        with pytest.raises(ArtifactError, match="Invalid JSON"):
            deserialize("{not json")

    def test_not_an_object(self) -> None:
        with pytest.raises(ArtifactError, match="JSON object"):
            deserialize("[]")

    def test_unknown_version(self) -> None:
        with pytest.raises(ArtifactError, match="version"):
            deserialize(json.dumps({"v": "0", "api": {}}))

    def test_schema_mismatch(self) -> None:
        with pytest.raises(ArtifactError, match="Invalid artifact"):
            deserialize(json.dumps({"v": ARTIFACT_FORMAT_VERSION, "api": {"dtos": [{"fields": []}]}}))


# ###############
# Files
# ###############


class TestArtifactFiles:
    def test_write_then_read(self, tmp_path: Path) -> None:
        path = tmp_path / "model" / "api.json"
        write_artifact(_sample_api(), path)
        assert path.exists()
        assert read_artifact(path) == _sample_api()

    def test_read_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ArtifactError, match="Cannot read artifact"):
            read_artifact(tmp_path / "missing.json")
