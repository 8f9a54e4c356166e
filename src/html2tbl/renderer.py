#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2tbl/renderer.py
"""tbl layout rendering from a parsed table tree.

This module provides the TblTableRenderer class, which compiles the node tree
built by :func:`html2tbl.parser.parse` into a tbl layout block::

    .TS
    allbox tab(|);
    <format lines>.
    <row blocks>
    .TE
    .sp
    .sp

Rendering takes two passes over the same tree. The format pass emits one
column token per grid column (``c``/``l`` with an optional expand marker,
``s`` for columns absorbed by a colspan, ``^`` for columns covered by a
rowspan from above). The generation pass emits the cell contents as
``T{ ... T}`` text blocks, or ``\\^`` where a column is covered from above.

Each pass tracks rowspans in its own :class:`SpanLedger`. When a row
omits a cell that a rowspan from another row makes necessary, an empty
``td`` is appended to that row just before it is visited.

"""

from __future__ import annotations

import logging

from html2tbl.constants import (
    CELL_CLOSE,
    CELL_OPEN,
    COLSPAN_ATTR,
    CONTENT_CONTINUATION_TOKEN,
    DATA_COLUMN_TOKEN,
    FORMAT_CONTINUATION_TOKEN,
    FORMAT_LINE_END,
    HEADER_COLUMN_TOKEN,
    ROW_TAG,
    ROWSPAN_ATTR,
    SPAN_FILLER_TOKEN,
    TABLE_END,
    TABLE_OPTIONS_TEMPLATE,
    TABLE_START,
    TABLE_TAG,
    TABLE_TRAILING_SPACE,
)
from html2tbl.exceptions import MalformedSpanAttributeError, MissingStructuralNameError
from html2tbl.nodes import Node
from html2tbl.options import TableOptions
from html2tbl.utils import debug_timer

logger = logging.getLogger(__name__)


class SpanLedger:
    """Columns still covered by a rowspan that started in an earlier row.

    Maps a zero-based column index to the number of rows it remains covered
    for. An entry disappears as soon as its count reaches zero.
    """

    def __init__(self) -> None:
        """Create an empty ledger."""
        self._remaining: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._remaining)

    def __contains__(self, column: object) -> bool:
        return column in self._remaining

    def register(self, column: int, rows: int) -> None:
        """Mark ``column`` as covered for the next ``rows`` rows."""
        if rows > 0:
            self._remaining[column] = rows

    def consume(self, column: int) -> None:
        """Use up one covered row of ``column``."""
        remaining = self._remaining[column] - 1
        if remaining > 0:
            self._remaining[column] = remaining
        else:
            del self._remaining[column]

    def remaining(self, column: int) -> int:
        """Rows still covered in ``column`` (0 when uncovered)."""
        return self._remaining.get(column, 0)


def span_value(node: Node, attribute: str, stage: str | None = None) -> int:
    """Read a ``colspan``/``rowspan`` attribute as a positive integer.

    Parameters
    ----------
    node : Node
        Cell carrying the attribute
    attribute : str
        Attribute name
    stage : str, optional
        Pass name reported with errors

    Returns
    -------
    int
        The span, or 1 when the attribute is absent

    Raises
    ------
    MalformedSpanAttributeError
        If the value is not a positive integer

    """
    raw = node.attributes.get(attribute)
    if raw is None:
        return 1

    text = raw.strip()
    if not (text.isascii() and text.isdigit()) or int(text) < 1:
        raise MalformedSpanAttributeError(attribute, raw, parsing_stage=stage)
    return int(text)


def expands(index: int, width: int) -> bool:
    """Whether the column at ``index`` absorbs extra width in a row of ``width`` columns.

    The middle column expands in three-column tables; otherwise the last
    column expands when there are fewer than five columns.
    """
    return (width == 3 and index == 1) or (width != 3 and width < 5 and index == width - 1)


def _require_name(node: Node, stage: str) -> None:
    if not node.name:
        raise MissingStructuralNameError(parsing_stage=stage)


def _cell_at(row: Node, position: int) -> Node:
    """Return the row's child at ``position``, padding the row if it is short."""
    while position >= len(row.children):
        logger.debug("Padding <tr> with an empty cell at position %d", len(row.children))
        row.append_child(Node.padding())
    return row.children[position]


class TblTableRenderer:
    r"""Render parsed table trees to tbl layout blocks.

    Parameters
    ----------
    options : TableOptions or None, default = None
        Layout options

    Examples
    --------
        >>> from html2tbl.parser import parse
        >>> root = parse("<table><tr><th>A</th><td>B</td></tr></table>")
        >>> renderer = TblTableRenderer()
        >>> renderer.scan_format(root.children[0])
        'c lx \n.\n'
        >>> renderer.render(root).splitlines()[4:]
        ['T{', 'A', 'T}|T{', 'B', 'T}', '.TE', '.sp', '.sp']

    """

    def __init__(self, options: TableOptions | None = None):
        """Initialize the renderer with options."""
        if options is not None and not isinstance(options, TableOptions):
            raise TypeError(f"Expected TableOptions, got {type(options).__name__}")
        self.options: TableOptions = options or TableOptions()
        self._output: list[str] = []

    @property
    def separator(self) -> str:
        return self.options.column_separator

    def row_width(self, row: Node) -> int:
        """Count the grid columns of a row, weighting each child by its colspan."""
        return sum(span_value(child, COLSPAN_ATTR, "format") for child in row.children)

    def scan_format(self, node: Node) -> str:
        """Produce the format lines for a table.

        Parameters
        ----------
        node : Node
            Table node (or any container of rows)

        Returns
        -------
        str
            Format lines, one per row, followed by ``.`` for a table node

        Raises
        ------
        MalformedSpanAttributeError
            If a colspan/rowspan value is not a positive integer
        MissingStructuralNameError
            If a node has no tag name

        """
        tokens: list[str] = []
        self._scan(node, 0, 0, SpanLedger(), tokens)
        return "".join(tokens)

    def _scan(self, node: Node, index: int, width: int, ledger: SpanLedger, tokens: list[str]) -> None:
        _require_name(node, "format")

        if node.is_cell:
            column_token = HEADER_COLUMN_TOKEN if node.is_header else DATA_COLUMN_TOKEN
            marker = self.options.expand_marker if expands(index, width) else ""
            tokens.append(f"{column_token}{marker} ")
            tokens.append(f"{SPAN_FILLER_TOKEN} " * (span_value(node, COLSPAN_ATTR, "format") - 1))

            rowspan = span_value(node, ROWSPAN_ATTR, "format")
            if rowspan > 1:
                ledger.register(index, rowspan - 1)

        if node.name == ROW_TAG and ledger:
            position = 0
            for column in range(width):
                if column in ledger:
                    tokens.append(f"{FORMAT_CONTINUATION_TOKEN} ")
                    ledger.consume(column)
                else:
                    self._scan(_cell_at(node, position), column, width, ledger, tokens)
                    position += 1
        else:
            # Rows are assumed to share the first row's width
            if node.children and node.children[0].name == ROW_TAG:
                width = self.row_width(node.children[0])
            for position, child in enumerate(node.children):
                self._scan(child, position, width, ledger, tokens)

        if node.name == TABLE_TAG:
            tokens.append(FORMAT_LINE_END)
        elif node.name == ROW_TAG:
            tokens.append("\n")

    def render(self, node: Node) -> str:
        """Render every table under ``node`` as a tbl layout block.

        Parameters
        ----------
        node : Node
            Root of a parsed tree, usually from :func:`html2tbl.parser.parse`

        Returns
        -------
        str
            The layout block(s); nothing is returned when rendering fails

        Raises
        ------
        MalformedSpanAttributeError
            If a colspan/rowspan value is not a positive integer
        MissingStructuralNameError
            If a node has no tag name

        """
        self._output = []
        with debug_timer(logger, "Table layout"):
            self._gen(node, 0, False, SpanLedger())
        return "".join(self._output)

    def _gen(self, node: Node, index: int, last: bool, ledger: SpanLedger) -> None:
        _require_name(node, "generate")

        if node.name == TABLE_TAG:
            self._output.append(TABLE_START)
            self._output.append(TABLE_OPTIONS_TEMPLATE.format(separator=self.separator))
            self._output.append(self.scan_format(node))
            ledger = SpanLedger()
        elif node.is_cell:
            self._output.append(CELL_OPEN + node.text)
            rowspan = span_value(node, ROWSPAN_ATTR, "generate")
            if rowspan > 1:
                ledger.register(index, rowspan - 1)

        if node.name == ROW_TAG and ledger:
            total = len(ledger) + len(node.children)
            position = 0
            for column in range(total):
                is_last = column == total - 1
                if column in ledger:
                    self._output.append(CONTENT_CONTINUATION_TOKEN + ("" if is_last else self.separator))
                    ledger.consume(column)
                else:
                    self._gen(_cell_at(node, position), column, is_last, ledger)
                    position += 1
        else:
            count = len(node.children)
            for position, child in enumerate(node.children):
                self._gen(child, position, position == count - 1, ledger)

        if node.name == TABLE_TAG:
            self._output.append(TABLE_END + TABLE_TRAILING_SPACE)
        elif node.name == ROW_TAG:
            self._output.append("\n")
        elif node.is_cell:
            self._output.append(CELL_CLOSE + ("" if last else self.separator))


__all__ = ["SpanLedger", "TblTableRenderer", "span_value", "expands"]
