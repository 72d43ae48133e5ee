# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Front end: type grammar, model building and model artifacts."""

from apiforge.compiler.artifact import (
    ARTIFACT_SUFFIX,
    ArtifactError,
    deserialize,
    read_artifact,
    serialize,
    write_artifact,
)
from apiforge.compiler.build import compile_document, load_api
from apiforge.compiler.model_builder import build
from apiforge.compiler.type_parser import parse_field_type, parse_parameter_type, parse_type

__all__ = [
    "parse_type",
    "parse_field_type",
    "parse_parameter_type",
    "build",
    "compile_document",
    "load_api",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "ArtifactError",
]
