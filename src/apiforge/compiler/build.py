# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Front-end pipeline: document text or file to raw API model.

The stages run strictly in sequence and every failure propagates as the
error type of the stage that raised it:

1. :func:`~apiforge.scraper.scraper.scrape` recovers the tables
   (:class:`~apiforge.scraper.scraper.ScrapeError`);
2. :func:`~apiforge.compiler.model_builder.build` parses every type cell
   and assembles the :class:`~apiforge.model.entities.RawApi`.

A previously stored model artifact (``.json``) is loaded directly instead
of being scraped again.
"""

from __future__ import annotations

from pathlib import Path

from apiforge.compiler.artifact import ARTIFACT_SUFFIX, read_artifact
from apiforge.compiler.model_builder import build
from apiforge.model.entities import RawApi
from apiforge.scraper.scraper import DEFAULT_HEADING_TAG, read_document, scrape

# ###############
# Public Interface
# ###############


def compile_document(document: str, *, heading_tag: str = DEFAULT_HEADING_TAG) -> RawApi:
    """Scrape an HTML document and build its raw API model."""
    return build(scrape(document, heading_tag=heading_tag))


def load_api(path: Path, *, heading_tag: str = DEFAULT_HEADING_TAG) -> RawApi:
    """Load a raw API model from an HTML document or a JSON model artifact.

    Raises:
        ScrapeError: If the HTML document is unreadable or malformed.
        ArtifactError: If the JSON artifact is unreadable or invalid.
    """
    if path.suffix == ARTIFACT_SUFFIX:
        return read_artifact(path)
    return compile_document(read_document(path), heading_tag=heading_tag)
