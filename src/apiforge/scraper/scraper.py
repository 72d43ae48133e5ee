# Copyright 2026 apiforge Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scraper that recovers DTO and method tables from an HTML API document.

The document is expected to follow a loose convention rather than explicit
markup: every DTO or method is introduced by a heading (``<h4>`` by default)
carrying its name, followed, possibly after some prose, by a table. The
number of header cells tells the two apart:

* 3 columns (Field, Type, Description) describe a DTO;
* 4 columns (Parameter, Type, Required, Description) describe a method.

Headings are not exclusive to entities, so a heading that is never followed
by a table is silently replaced by the next one. A table that cannot be
attributed to a heading, on the other hand, means the document format has
changed and aborts the scrape.
"""

from __future__ import annotations

import enum
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from apiforge.scraper.tables import DtoRow, DtoTable, MethodRow, MethodTable, Table

# ###############
# Public Interface
# ###############

DEFAULT_HEADING_TAG = "h4"
DTO_TABLE_COLUMNS = 3
METHOD_TABLE_COLUMNS = 4


class ScrapeErrorKind(enum.Enum):
    """All failure modes of the scraper."""

    INVALID_COLUMN_COUNT = "invalid-column-count"
    TABLE_WITHOUT_HEADING = "table-without-heading"
    MISSING_TABLE_BODY = "missing-table-body"
    INVALID_ROW = "invalid-row"
    EMPTY_TEXT_NODE = "empty-text-node"
    DOCUMENT_UNREADABLE = "document-unreadable"


class ScrapeError(Exception):
    """Raised when the document does not follow the expected table convention.

    Use the classmethod constructors rather than instantiating directly.

    Attributes:
        kind: The failure mode.
        table_name: Heading of the offending table, if known.
        column_count: Number of header cells, for ``INVALID_COLUMN_COUNT``.
        row_index: 0-based index of the offending body row, if any.
    """

    def __init__(
        self,
        kind: ScrapeErrorKind,
        message: str,
        *,
        table_name: str | None = None,
        column_count: int | None = None,
        row_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.table_name = table_name
        self.column_count = column_count
        self.row_index = row_index

    @classmethod
    def invalid_column_count(cls, column_count: int) -> ScrapeError:
        return cls(
            ScrapeErrorKind.INVALID_COLUMN_COUNT,
            f"Cannot determine the content type of a table with {column_count} header column(s); "
            f"expected {DTO_TABLE_COLUMNS} (DTO) or {METHOD_TABLE_COLUMNS} (method)",
            column_count=column_count,
        )

    @classmethod
    def table_without_heading(cls) -> ScrapeError:
        return cls(
            ScrapeErrorKind.TABLE_WITHOUT_HEADING,
            "The document contains a table without a preceding heading",
        )

    @classmethod
    def missing_table_body(cls, table_name: str) -> ScrapeError:
        return cls(
            ScrapeErrorKind.MISSING_TABLE_BODY,
            f"Table '{table_name}' has no table body",
            table_name=table_name,
        )

    @classmethod
    def invalid_row(cls, table_name: str, row_index: int, found: int, expected: int) -> ScrapeError:
        return cls(
            ScrapeErrorKind.INVALID_ROW,
            f"Row {row_index} of table '{table_name}' has {found} data cell(s), expected {expected}",
            table_name=table_name,
            row_index=row_index,
        )

    @classmethod
    def empty_text_node(cls, table_name: str, row_index: int) -> ScrapeError:
        return cls(
            ScrapeErrorKind.EMPTY_TEXT_NODE,
            f"Row {row_index} of table '{table_name}' contains a cell without text",
            table_name=table_name,
            row_index=row_index,
        )

    @classmethod
    def document_unreadable(cls, path: Path, reason: str) -> ScrapeError:
        return cls(
            ScrapeErrorKind.DOCUMENT_UNREADABLE,
            f"Cannot read document '{path}': {reason}",
        )


def read_document(path: Path) -> str:
    """Read an HTML document from disk.

    Raises:
        ScrapeError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScrapeError.document_unreadable(path, str(exc)) from exc


def scrape(document: str, *, heading_tag: str = DEFAULT_HEADING_TAG) -> list[Table]:
    """Extract every DTO and method table from an HTML document.

    Args:
        document: The HTML source text.
        heading_tag: Name of the tag whose text names the following table.

    Returns:
        The tables in document order.

    Raises:
        ScrapeError: On the first table that violates the document convention.
    """
    soup = BeautifulSoup(document, "html.parser")
    tables: list[Table] = []
    current_heading: str | None = None

    for node in soup.find_all([heading_tag, "table"]):
        if node.name == heading_tag:
            current_heading = _node_text(node) or None
            continue

        column_count = len(node.find_all("th"))
        if column_count not in (DTO_TABLE_COLUMNS, METHOD_TABLE_COLUMNS):
            raise ScrapeError.invalid_column_count(column_count)
        if current_heading is None:
            raise ScrapeError.table_without_heading()

        if column_count == DTO_TABLE_COLUMNS:
            tables.append(_extract_dto_table(current_heading, node))
        else:
            tables.append(_extract_method_table(current_heading, node))
        current_heading = None

    return tables


# ################
# Implementation
# ################


def _node_text(node: Tag) -> str:
    """Concatenate all descendant text nodes of *node* in document order."""
    return node.get_text()


def _extract_dto_table(name: str, table: Tag) -> DtoTable:
    rows = [DtoRow(*cells) for cells in _extract_rows(name, table, DTO_TABLE_COLUMNS)]
    return DtoTable(name=name, rows=tuple(rows))


def _extract_method_table(name: str, table: Tag) -> MethodTable:
    rows = [MethodRow(*cells) for cells in _extract_rows(name, table, METHOD_TABLE_COLUMNS)]
    return MethodTable(name=name, rows=tuple(rows))


def _extract_rows(name: str, table: Tag, columns: int) -> list[list[str]]:
    """Return the text of the first *columns* data cells of every body row."""
    body = table.find("tbody")
    if body is None:
        raise ScrapeError.missing_table_body(name)

    rows: list[list[str]] = []
    for index, row in enumerate(body.find_all("tr")):
        cells = row.find_all("td")
        if len(cells) < columns:
            raise ScrapeError.invalid_row(name, index, len(cells), columns)
        texts = [_node_text(cell) for cell in cells[:columns]]
        if any(text == "" for text in texts):
            raise ScrapeError.empty_text_node(name, index)
        rows.append(texts)
    return rows
