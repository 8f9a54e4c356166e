#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2tbl/document.py
"""Splice compiled tables back into a larger document.

Pages usually carry tables among other markup that a separate rewrite step
turns into troff. This module finds each outermost ``<table>`` element in
such a document, compiles it with :func:`html2tbl.api.parse_table` and puts
the layout block in its place, leaving everything else untouched.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from html2tbl.api import parse_table
from html2tbl.constants import CONTROL_LINE_ESCAPE, PRE_LINE_BREAK, TABLE_TAG
from html2tbl.exceptions import ParsingError
from html2tbl.options import TableOptions
from html2tbl.parser import find_elements

logger = logging.getLogger(__name__)

# A cell whose text starts with a control character would be read as a request
_CONTROL_LINE = re.compile(r"T\{\n([.'])")


def escape_pre_sections(table_html: str) -> str:
    """Unwrap ``<pre>`` elements, keeping their line breaks as ``.br`` requests.

    Parameters
    ----------
    table_html : str
        Table markup

    Returns
    -------
    str
        Markup with every outermost ``<pre>`` replaced by its body

    """
    pieces: list[str] = []
    last = 0
    for element in find_elements(table_html, "pre"):
        pieces.append(table_html[last : element.start])
        pieces.append(element.body.replace("\n", PRE_LINE_BREAK))
        last = element.end
    pieces.append(table_html[last:])
    return "".join(pieces)


def escape_control_lines(block: str) -> str:
    r"""Prefix cell text beginning with ``.`` or ``'`` with ``\&``.

    Examples
    --------
        >>> escape_control_lines("T{\n.5 mm\nT}")
        'T{\n\\&.5 mm\nT}'

    """
    return _CONTROL_LINE.sub(lambda match: f"T{{\n{CONTROL_LINE_ESCAPE}{match.group(1)}", block)


def convert_tables(document: str, options: Optional[TableOptions] = None) -> str:
    """Replace every outermost ``<table>`` in a document with its tbl layout block.

    Parameters
    ----------
    document : str
        Page markup
    options : TableOptions, optional
        Layout and error-policy options

    Returns
    -------
    str
        The document with converted tables

    Raises
    ------
    ParsingError
        If a table cannot be laid out and ``options.fail_on_table_errors`` is set

    """
    options = options or TableOptions()
    pieces: list[str] = []
    last = 0
    converted = 0

    for element in find_elements(document, TABLE_TAG):
        table_html = document[element.start : element.end]
        try:
            block = parse_table(escape_pre_sections(table_html), options)
        except ParsingError as e:
            if options.fail_on_table_errors:
                raise
            logger.warning("Leaving table at offset %d unconverted: %s", element.start, e.message)
            continue

        if options.escape_control_lines:
            block = escape_control_lines(block)

        pieces.append(document[last : element.start])
        pieces.append(block)
        last = element.end
        converted += 1

    pieces.append(document[last:])
    logger.debug("Converted %d table(s)", converted)
    return "".join(pieces)


__all__ = ["convert_tables", "escape_pre_sections", "escape_control_lines"]
