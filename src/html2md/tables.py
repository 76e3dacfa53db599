#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2md/tables.py
"""Pipe table support.

``TableBuilder`` accumulates the alignment separator line while header cells
are scanned; the row handler flushes it once the header row closes. With
``format_tables`` enabled the finished table is re-padded into aligned
columns by ``format_pipe_table``.
"""

from __future__ import annotations

import logging
import re

from html2md.constants import TableAlignment

logger = logging.getLogger(__name__)

_CELL_SPLIT = re.compile(r"(?<!\\)\|")
_SEPARATOR_CELL = re.compile(r"^:?-+:?$")


def separator_segment(align: str | None) -> str:
    """Build one column's segment of the separator line.

    Parameters
    ----------
    align : str or None
        Value of the header cell's ``align`` attribute.

    Returns
    -------
    str
        ``"| :--- "``, ``"| ---: "``, ``"| :---: "`` or ``"| --- "``.

    """
    align = (align or "").strip().lower()
    segment = "| "
    if align in ("left", "center"):
        segment += ":"
    segment += "---"
    if align in ("right", "center"):
        segment += ":"
    return segment + " "


class TableBuilder:
    """Pending separator line and table start positions for one conversion."""

    def __init__(self) -> None:
        self.separator_line = ""
        self._starts: list[int] = []

    def add_header_cell(self, align: str | None) -> None:
        """Append a column segment for a header cell."""
        self.separator_line += separator_segment(align)

    def has_pending_separator(self) -> bool:
        return bool(self.separator_line)

    def flush_separator(self) -> str:
        """Return the completed separator line and clear it."""
        line = self.separator_line + "|\n"
        self.separator_line = ""
        return line

    def begin(self, position: int) -> None:
        """Remember where a table starts in the Markdown buffer."""
        self._starts.append(position)

    def end(self) -> int | None:
        """Forget the innermost table start and return it."""
        return self._starts.pop() if self._starts else None


def _split_row(line: str) -> list[str]:
    stripped = line.strip()
    if stripped.startswith("|"):
        stripped = stripped[1:]
    if stripped.endswith("|") and not stripped.endswith("\\|"):
        stripped = stripped[:-1]
    return [cell.strip() for cell in _CELL_SPLIT.split(stripped)]


def _alignment_of(cell: str) -> TableAlignment | None:
    if cell.startswith(":") and cell.endswith(":"):
        return "center"
    if cell.endswith(":"):
        return "right"
    if cell.startswith(":"):
        return "left"
    return None


def _separator_cell(alignment: TableAlignment | None, width: int) -> str:
    if alignment == "center":
        return ":" + "-" * (width - 2) + ":"
    if alignment == "right":
        return "-" * (width - 1) + ":"
    if alignment == "left":
        return ":" + "-" * (width - 1)
    return "-" * width


def _format_block(lines: list[str]) -> list[str]:
    rows = [_split_row(line) for line in lines]
    separator_rows = {
        index for index, row in enumerate(rows) if row and all(_SEPARATOR_CELL.match(cell) for cell in row)
    }
    column_count = max(len(row) for row in rows)
    widths = [3] * column_count
    for index, row in enumerate(rows):
        if index in separator_rows:
            continue
        for column, cell in enumerate(row):
            widths[column] = max(widths[column], len(cell))

    formatted = []
    for index, row in enumerate(rows):
        row = row + [""] * (column_count - len(row))
        if index in separator_rows:
            cells = [_separator_cell(_alignment_of(cell), widths[column]) for column, cell in enumerate(row)]
        else:
            cells = [cell.ljust(widths[column]) for column, cell in enumerate(row)]
        formatted.append("| " + " | ".join(cells) + " |")
    return formatted


def format_pipe_table(markdown: str) -> str:
    """Pad every run of pipe-table lines in ``markdown`` into aligned columns.

    Lines that do not start with ``|`` are returned unchanged.

    Parameters
    ----------
    markdown : str
        Markdown containing one or more pipe tables.

    Returns
    -------
    str
        Markdown with padded tables.

    Examples
    --------
        >>> format_pipe_table("| a| bb|\\n| --- | --- |\\n| ccc| d|")
        '| a   | bb  |\\n| --- | --- |\\n| ccc | d   |'

    """
    output: list[str] = []
    block: list[str] = []
    for line in markdown.split("\n"):
        if line.strip().startswith("|"):
            block.append(line)
            continue
        if block:
            output.extend(_format_block(block))
            block = []
        output.append(line)
    if block:
        output.extend(_format_block(block))
    logger.debug("Formatted pipe table spanning %d lines", len(output))
    return "\n".join(output)
