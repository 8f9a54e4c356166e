#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2tbl/constants.py
"""Constants shared by the html2tbl parser and renderer.

This module centralizes tag names, fixed tbl directives and option defaults
so they can be referenced from the options, parser and renderer modules.
"""

from __future__ import annotations

# Tag names
ROOT_TAG = "root"
TABLE_TAG = "table"
ROW_TAG = "tr"
HEADER_CELL_TAG = "th"
DATA_CELL_TAG = "td"
CELL_TAGS = frozenset({HEADER_CELL_TAG, DATA_CELL_TAG})

# Span attributes
COLSPAN_ATTR = "colspan"
ROWSPAN_ATTR = "rowspan"

# Format line tokens
HEADER_COLUMN_TOKEN = "c"
DATA_COLUMN_TOKEN = "l"
SPAN_FILLER_TOKEN = "s"
FORMAT_CONTINUATION_TOKEN = "^"
FORMAT_LINE_END = ".\n"

# Layout block directives
TABLE_START = ".TS\n"
TABLE_OPTIONS_TEMPLATE = "allbox tab({separator});\n"
TABLE_END = ".TE\n"
TABLE_TRAILING_SPACE = ".sp\n.sp\n"
CELL_OPEN = "T{\n"
CELL_CLOSE = "\nT}"
CONTENT_CONTINUATION_TOKEN = "\\^"

# Line break used for <pre> bodies inside table cells
PRE_LINE_BREAK = "\n.br\n"

# Zero-width escape placed before cell lines that start with a control character
CONTROL_LINE_ESCAPE = "\\&"

# Option defaults
DEFAULT_COLUMN_SEPARATOR = "|"
DEFAULT_EXPAND_MARKER = "x"
DEFAULT_FAIL_ON_TABLE_ERRORS = True
DEFAULT_ESCAPE_CONTROL_LINES = True

# Configuration discovery
CONFIG_FILENAMES = [".html2tbl.toml", ".html2tbl.yaml", ".html2tbl.yml", ".html2tbl.json"]
PYPROJECT_TOOL_SECTION = "html2tbl"
