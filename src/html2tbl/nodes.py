#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2tbl/nodes.py
"""Tree nodes produced by the structural node parser.

A node is either a container (``root``, ``table``, ``tbody``, ``tr``, ...)
whose content lives in ``children``, or a leaf cell (``th``/``td``) whose
content has been flattened to ``text``. Rows may gain padding cells while
the renderer walks them, so ``children`` is a plain growable list owned by
the parent.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from html2tbl.constants import CELL_TAGS, DATA_CELL_TAG, HEADER_CELL_TAG


@dataclass
class Node:
    """One markup element of a parsed table.

    Parameters
    ----------
    name : str
        Lower-cased tag name, or ``"root"`` for the synthetic document node
    attributes : dict, default = empty dict
        Attribute name to unescaped value
    text : str, default = ""
        Tag-stripped cell content; only set on ``th``/``td`` nodes
    children : list of Node, default = empty list
        Child elements in source order; always empty on cells

    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""
    children: list[Node] = field(default_factory=list)

    @classmethod
    def padding(cls) -> Node:
        """Create the empty data cell used where a row omits a spanned cell."""
        return cls(name=DATA_CELL_TAG)

    @property
    def is_cell(self) -> bool:
        """Whether this node is a leaf table cell."""
        return self.name in CELL_TAGS

    @property
    def is_header(self) -> bool:
        """Whether this node is a header cell."""
        return self.name == HEADER_CELL_TAG

    def append_child(self, child: Node) -> None:
        """Append a child node.

        Raises
        ------
        ValueError
            If this node is a cell; cells never carry children.

        """
        if self.is_cell:
            raise ValueError(f"<{self.name}> cells cannot have children")
        self.children.append(child)


def format_tree(node: Node, indent: int = 2, _depth: int = 0) -> str:
    """Render a node tree as an indented outline for debugging.

    Each line reads ``name: {attributes} text`` and children are indented
    by ``indent`` spaces per level.

    Examples
    --------
        >>> from html2tbl.parser import parse
        >>> print(format_tree(parse("<table><tr><td>A</td></tr></table>")))
        root: {}
          table: {}
            tr: {}
              td: {} A

    """
    lines = [f"{' ' * _depth}{node.name}: {node.attributes} {node.text}".rstrip()]
    for child in node.children:
        lines.append(format_tree(child, indent=indent, _depth=_depth + indent))
    return "\n".join(lines)


__all__ = ["Node", "format_tree"]
