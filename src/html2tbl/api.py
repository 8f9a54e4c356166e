"""The main exported API for compiling HTML tables."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/html2tbl/api.py
import logging
from typing import Optional

from html2tbl.options import TableOptions
from html2tbl.parser import parse
from html2tbl.renderer import TblTableRenderer

logger = logging.getLogger(__name__)


def parse_table(html: str, options: Optional[TableOptions] = None) -> str:
    """Compile an HTML table fragment into a tbl layout block.

    The markup is parsed once into a node tree, then rendered in two passes
    (format lines, then content). Malformed markup is matched leniently, but
    span attributes are validated strictly.

    Parameters
    ----------
    html : str
        Markup bounded by a single outermost ``<table>`` element
    options : TableOptions, optional
        Layout options; defaults are used when omitted

    Returns
    -------
    str
        The layout block, ``.TS`` through the trailing ``.sp`` lines

    Raises
    ------
    MalformedSpanAttributeError
        If a ``colspan``/``rowspan`` value is not a positive integer
    MissingStructuralNameError
        If the tree contains a node without a tag name

    Examples
    --------
        >>> block = parse_table("<table><tr><td>A</td><td>B</td></tr></table>")
        >>> block.splitlines()[2]
        'l lx '

    """
    root = parse(html)
    logger.debug("Parsed %d top-level element(s) from %d characters of markup", len(root.children), len(html))
    return TblTableRenderer(options).render(root)


__all__ = ["parse_table"]
