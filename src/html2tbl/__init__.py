"""html2tbl - compile HTML tables into tbl layout blocks for troff.

html2tbl converts a possibly malformed HTML table fragment into the
``.TS``/``.TE`` block consumed by the ``tbl`` preprocessor, preserving the
table's grid: ``colspan`` cells become ``s`` filler columns, ``rowspan`` cells
become ``^``/``\\^`` continuation markers in the rows below, and rows that omit
cells covered by a rowspan are padded with empty cells.

The conversion is a small two-stage compiler:

- :mod:`html2tbl.parser` leniently matches open/close tag pairs into a tree
  of :class:`~html2tbl.nodes.Node` objects, flattening cell content to text;
- :mod:`html2tbl.renderer` walks that tree twice, once for the format lines
  and once for the cell contents.

Examples
--------
Convert a single table:

    >>> from html2tbl import parse_table
    >>> print(parse_table("<table><tr><th>Name</th><th>Value</th></tr></table>"))

Convert every table in a page, leaving broken tables as they are:

    >>> from html2tbl import TableOptions, convert_tables
    >>> page = convert_tables(html, TableOptions(fail_on_table_errors=False))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "html2tbl requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from html2tbl.api import parse_table
from html2tbl.config import load_options
from html2tbl.document import convert_tables
from html2tbl.exceptions import (
    ConfigError,
    Html2TblError,
    MalformedSpanAttribute,
    MalformedSpanAttributeError,
    MissingStructuralName,
    MissingStructuralNameError,
    ParsingError,
)
from html2tbl.nodes import Node, format_tree
from html2tbl.options import TableOptions
from html2tbl.parser import parse, strip_tags
from html2tbl.renderer import TblTableRenderer

__all__ = [
    "__version__",
    "parse_table",
    "convert_tables",
    "parse",
    "strip_tags",
    "Node",
    "format_tree",
    "TblTableRenderer",
    "TableOptions",
    "load_options",
    # Exceptions
    "Html2TblError",
    "ParsingError",
    "MalformedSpanAttributeError",
    "MalformedSpanAttribute",
    "MissingStructuralNameError",
    "MissingStructuralName",
    "ConfigError",
]
