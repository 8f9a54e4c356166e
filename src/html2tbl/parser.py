#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2tbl/parser.py
"""Lenient structural parsing of table markup.

This module turns a markup string into a tree of :class:`~html2tbl.nodes.Node`
objects and flattens cell content to plain text. It is a best-effort matcher,
not a validating HTML parser:

- tags are tokenized once per call and paired with a stack per tag name, so
  a close tag always pairs with the nearest unpaired open tag of its name;
- an open tag without a matching close tag is skipped and scanning resumes
  right after it, so its content is still visible to the scan;
- comments, declarations and self-closing tags never form an element.

Nothing in this module raises on bad markup. Input without any matching
element simply produces nodes with no children and no text.

"""

from __future__ import annotations

import html
import logging
import re
from typing import Iterator, NamedTuple

from html2tbl.constants import ROOT_TAG
from html2tbl.nodes import Node

logger = logging.getLogger(__name__)

_TAG = re.compile(r"<\s*(/?)\s*([A-Za-z][\w:-]*)([^>]*)>", re.S)
_ATTRIBUTE = re.compile(
    r"""
    ([\w:.-]+)
    \s* = \s*
    (?: '((?:\\.|[^'\\])*)'
      | "((?:\\.|[^"\\])*)"
      | ([^\s"'=<>`]+) )
    """,
    re.S | re.X,
)
_ESCAPED_QUOTE = re.compile(r"\\(['\"\\])")


class ElementMatch(NamedTuple):
    """A matched open/close element pair within a markup string.

    Attributes
    ----------
    name : str
        Lower-cased tag name
    attr_list : str
        Raw text between the tag name and the closing ``>`` of the open tag
    body : str
        Raw markup between the open and close tags
    start : int
        Offset of the open tag's ``<``
    end : int
        Offset just past the close tag's ``>``

    """

    name: str
    attr_list: str
    body: str
    start: int
    end: int


class _Tag(NamedTuple):
    name: str
    closing: bool
    attr_list: str
    start: int
    end: int


def _is_self_closing(attr_list: str) -> bool:
    return attr_list.rstrip().endswith("/")


def _tokenize(markup: str) -> list[_Tag]:
    return [
        _Tag(tag.group(2).lower(), bool(tag.group(1)), tag.group(3), tag.start(), tag.end())
        for tag in _TAG.finditer(markup)
    ]


def _pair_tags(tags: list[_Tag]) -> dict[int, int]:
    """Map the index of each open tag to the index of its close tag.

    One stack per tag name: a close tag pairs with the latest unpaired open
    tag of the same name. Close tags with nothing to pair are ignored.
    """
    open_stacks: dict[str, list[int]] = {}
    partners: dict[int, int] = {}
    for index, tag in enumerate(tags):
        if tag.closing:
            stack = open_stacks.get(tag.name)
            if stack:
                partners[stack.pop()] = index
        elif not _is_self_closing(tag.attr_list):
            open_stacks.setdefault(tag.name, []).append(index)
    return partners


def _iter_matches(markup: str, name: str | None = None) -> Iterator[ElementMatch]:
    tags = _tokenize(markup)
    partners = _pair_tags(tags)
    pos = 0
    for index, tag in enumerate(tags):
        if tag.closing or tag.start < pos or (name is not None and tag.name != name):
            continue

        partner = partners.get(index)
        if partner is None:
            logger.debug("Skipping <%s> at offset %d: no matching close tag", tag.name, tag.start)
            continue

        close = tags[partner]
        yield ElementMatch(
            name=tag.name,
            attr_list=tag.attr_list.strip(),
            body=markup[tag.end : close.start],
            start=tag.start,
            end=close.end,
        )
        pos = close.end


def iter_elements(markup: str) -> Iterator[ElementMatch]:
    """Iterate over the outermost elements of a markup string, left to right.

    Parameters
    ----------
    markup : str
        Markup to scan

    Yields
    ------
    ElementMatch
        Each matched element; nested elements are left inside ``body``

    """
    return _iter_matches(markup)


def find_elements(markup: str, name: str) -> Iterator[ElementMatch]:
    """Iterate over the outermost elements named ``name`` anywhere in ``markup``.

    Unlike :func:`iter_elements`, elements of other names are looked through,
    so a ``table`` nested in arbitrary page structure is still found.

    Parameters
    ----------
    markup : str
        Document markup
    name : str
        Tag name to look for (case-insensitive)

    Yields
    ------
    ElementMatch
        Each outermost matching element

    """
    return _iter_matches(markup, name=name.lower())


def parse_attributes(attr_list: str) -> dict[str, str]:
    """Extract ``name="value"`` pairs from the attribute text of an open tag.

    Single-quoted, double-quoted and bare values are accepted. Escaped quotes
    and HTML character references in values are unescaped. Attribute names are
    lower-cased; when a name repeats, the first occurrence wins. Text that does
    not form a pair is ignored.

    Parameters
    ----------
    attr_list : str
        Raw attribute text, e.g. ``'class="x" colspan="2"'``

    Returns
    -------
    dict[str, str]
        Attribute name to value

    Examples
    --------
        >>> parse_attributes('colspan="2" title="a &amp; b" rowspan=3')
        {'colspan': '2', 'title': 'a & b', 'rowspan': '3'}

    """
    attributes: dict[str, str] = {}
    for match in _ATTRIBUTE.finditer(attr_list):
        name = match.group(1).lower()
        value = next(group for group in match.groups()[1:] if group is not None)
        value = html.unescape(_ESCAPED_QUOTE.sub(r"\1", value))
        attributes.setdefault(name, value)
    return attributes


def _strip_once(markup: str) -> str:
    pieces: list[str] = []
    last = 0
    for element in iter_elements(markup):
        pieces.append(markup[last : element.start])
        pieces.append(strip_tags(element.body))
        last = element.end

    if not pieces:
        return markup

    pieces.append(markup[last:])
    return "".join(pieces)


def strip_tags(markup: str) -> str:
    """Replace every matched element with its own tag-stripped content.

    Whitespace and any text outside matched elements are preserved as-is.
    Unpaired tags (``<br>``, an unclosed ``<p>``) are left in place. The
    result is re-stripped until nothing changes, so the function is
    idempotent even when overlapping tags only pair up after a first pass.

    Parameters
    ----------
    markup : str
        Cell markup

    Returns
    -------
    str
        Flat text run

    Examples
    --------
        >>> strip_tags("<b>Foo</b> bar")
        'Foo bar'

    """
    stripped = _strip_once(markup)
    while stripped != markup:
        markup = stripped
        stripped = _strip_once(markup)
    return stripped


def parse(markup: str, tag_name: str = ROOT_TAG, attr_list: str = "") -> Node:
    """Build a node tree from markup.

    The returned node is named ``tag_name`` (a synthetic ``root`` by default)
    and owns the elements found in ``markup``. Cells (``th``/``td``) are leaves:
    their markup is flattened with :func:`strip_tags` into ``text``. Every other
    element is parsed recursively into ``children``.

    Parameters
    ----------
    markup : str
        Body markup of the node being built
    tag_name : str, default "root"
        Name of the node being built
    attr_list : str, default ""
        Raw attribute text for the node being built

    Returns
    -------
    Node
        The constructed node

    Examples
    --------
        >>> root = parse("<table><tr><td colspan='2'><b>A</b></td></tr></table>")
        >>> root.children[0].children[0].children[0]
        Node(name='td', attributes={'colspan': '2'}, text='A', children=[])

    """
    node = Node(name=tag_name.lower(), attributes=parse_attributes(attr_list))

    if node.is_cell:
        node.text = strip_tags(markup)
    else:
        for element in iter_elements(markup):
            node.append_child(parse(element.body, element.name, element.attr_list))

    return node


__all__ = ["ElementMatch", "iter_elements", "find_elements", "parse_attributes", "strip_tags", "parse"]
