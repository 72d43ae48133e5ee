# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""HTML scraper producing raw DTO and method tables."""

from apiforge.scraper.scraper import (
    DEFAULT_HEADING_TAG,
    ScrapeError,
    ScrapeErrorKind,
    read_document,
    scrape,
)
from apiforge.scraper.tables import DtoRow, DtoTable, MethodRow, MethodTable, Table

__all__ = [
    "DEFAULT_HEADING_TAG",
    "DtoRow",
    "DtoTable",
    "MethodRow",
    "MethodTable",
    "ScrapeError",
    "ScrapeErrorKind",
    "Table",
    "read_document",
    "scrape",
]
