#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/revmark/converters/tables.py
"""Converters for pipe tables.

Pipe tables cannot express merged cells, nested tables or block content, so
those fall back to HTML. Markdown also requires a header row: any row holding
``<th>`` cells is followed by the header separator. A table
without any ``<th>`` falls back to ``table_without_header_row_handling``,
which either promotes the first row or synthesizes an empty header row.
"""

from __future__ import annotations

import logging
from typing import Any

from bs4.element import Tag

from revmark.constants import EMPTY_HEADER_CELL, TABLE_CELL_ELEMENTS
from revmark.converters.base import ConverterBase
from revmark.utils.dom import has_ancestor
from revmark.utils.escape import escape_table_cell

logger = logging.getLogger(__name__)


def _has_spans(node: Tag) -> bool:
    return node.find(lambda tag: tag.has_attr("colspan") or tag.has_attr("rowspan")) is not None


def _get_cells(row: Tag) -> list[Tag]:
    return row.find_all(list(TABLE_CELL_ELEMENTS), recursive=False)


def _get_first_row(table: Tag) -> Tag | None:
    return table.find("tr")


def _separator_row(column_count: int) -> str:
    return "|" + " --- |" * column_count + "\n"


def _is_header_row(row: Tag) -> bool:
    return row.find("th", recursive=False) is not None


def _has_header_row(table: Tag) -> bool:
    # rows of nested tables belong to those tables
    return any(_is_header_row(row) for row in table.find_all("tr") if row.find_parent("table") is table)


class TableConverter(ConverterBase):
    """Convert ``<table>`` to a pipe table."""

    tags = ("table",)

    def convert(self, node: Any) -> str:
        if has_ancestor(node, "table"):
            logger.debug("Passing nested table through as HTML")
            return str(node)
        if _has_spans(node):
            logger.debug("Passing table with colspan/rowspan through as HTML")
            return str(node)

        caption = ""
        rows = []
        for child in node.children:
            if isinstance(child, Tag) and child.name == "caption":
                caption = " ".join(self.treat_children(child).split())
            else:
                rows.append(self.converter.convert_node(child))

        content = "".join(rows)
        if not content.strip():
            return ""

        prefix = f"\n\n{caption}\n\n" if caption else "\n\n"
        return f"{prefix}{self._get_empty_header(node)}{content}\n"

    def _get_empty_header(self, node: Tag) -> str:
        if self.options.table_without_header_row_handling != "empty_row" or _has_header_row(node):
            return ""

        first_row = _get_first_row(node)
        column_count = len(_get_cells(first_row)) if first_row is not None else 0
        if column_count == 0:
            return ""
        return "|" + f" {EMPTY_HEADER_CELL} |" * column_count + "\n" + _separator_row(column_count)


class TableRowConverter(ConverterBase):
    """Convert ``<tr>`` to one pipe-delimited line."""

    tags = ("tr",)

    def convert(self, node: Any) -> str:
        content = self.treat_children(node).rstrip()
        if not content.strip():
            return ""
        return f"|{content}\n{self._get_separator(node)}"

    def _get_separator(self, node: Tag) -> str:
        if _is_header_row(node):
            return _separator_row(len(_get_cells(node)))

        table = node.find_parent("table")
        if table is None or _get_first_row(table) is not node:
            return ""
        if self.options.table_without_header_row_handling == "first_row" and not _has_header_row(table):
            return _separator_row(len(_get_cells(node)))
        return ""


class TableCellConverter(ConverterBase):
    """Convert ``<td>``/``<th>`` to `` content |``."""

    tags = ("td", "th")

    def convert(self, node: Any) -> str:
        content = self.treat_children(node).strip()
        content = "<br>".join(line.strip() for line in content.split("\n"))
        return f" {escape_table_cell(content)} |"
