"""Test utilities for the html2tbl test suite.

This module provides helpers for building table markup and picking apart
rendered layout blocks.
"""

from typing import Sequence

LAYOUT_HEADER = ".TS\nallbox tab(|);\n"
LAYOUT_FOOTER = ".TE\n.sp\n.sp\n"


def table_html(rows: Sequence[Sequence[str]], header: bool = False) -> str:
    """Build a table from rows of cell bodies.

    Parameters
    ----------
    rows : sequence of sequence of str
        Cell markup, row by row
    header : bool, default False
        Render the first row with ``th`` cells

    Returns
    -------
    str
        Table markup

    """
    parts = ["<table>"]
    for row_index, row in enumerate(rows):
        tag = "th" if header and row_index == 0 else "td"
        parts.append("<tr>" + "".join(f"<{tag}>{cell}</{tag}>" for cell in row) + "</tr>")
    parts.append("</table>")
    return "".join(parts)


def format_lines(block: str) -> list[str]:
    """Return the format lines of a layout block, excluding the final ``.`` line."""
    lines = block.split("\n")
    end = lines.index(".", 2)
    return lines[2:end]


def content_section(block: str) -> str:
    """Return the row blocks of a single-table layout block."""
    body = block.split("\n.\n", 1)[1]
    return body[: -len(LAYOUT_FOOTER)]
